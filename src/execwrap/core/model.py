"""Options and outcome values for a single process execution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExecOptions:
    cwd: Path | str | None = None
    strip_final_newline: bool = True


@dataclass(frozen=True)
class ExecOutcome:
    """Result of one execution attempt.

    ``failed`` is true when the program could not be launched or exited with a
    non-zero status. ``exit_code`` is only set once the process terminated and
    ``stdout``/``stderr`` only once it ran to completion; ``None`` means absent,
    ``""`` means the stream was captured empty.
    """

    failed: bool
    message: str | None = None
    exit_code: int | None = None
    stdout: str | None = None
    stderr: str | None = None

    def to_payload(self) -> dict[str, object]:
        return {
            "failed": self.failed,
            "message": self.message,
            "exit_code": self.exit_code,
            "stdout": self.stdout,
            "stderr": self.stderr,
        }
