from __future__ import annotations

from typing import TYPE_CHECKING

from .model import ExecOptions, ExecOutcome
from .process import run

if TYPE_CHECKING:
    from .context import RunContext

SHELL_PATH = "/bin/sh"


def run_shell(command: str, options: ExecOptions = ExecOptions(), ctx: RunContext | None = None) -> ExecOutcome:
    """Run ``command`` through ``SHELL_PATH -c``; the string is passed verbatim."""
    return run(SHELL_PATH, ["-c", command], options, ctx)
