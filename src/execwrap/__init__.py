"""Run external programs and turn their exit status into structured outcomes."""

from .core.errors import ExecFailure
from .core.model import ExecOptions, ExecOutcome
from .core.process import run
from .core.shell import SHELL_PATH, run_shell

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ExecFailure",
    "ExecOptions",
    "ExecOutcome",
    "SHELL_PATH",
    "run",
    "run_shell",
]
