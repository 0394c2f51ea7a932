"""Execwrap core package."""
from .context import RunContext
from .errors import ExecFailure, ScriptError
from .model import ExecOptions, ExecOutcome
from .process import run
from .runtime.logging import log_event
from .runtime.serialize import dumps_json
from .shell import run_shell

__all__ = [
    "ExecFailure",
    "ExecOptions",
    "ExecOutcome",
    "RunContext",
    "ScriptError",
    "dumps_json",
    "log_event",
    "run",
    "run_shell",
]
