from __future__ import annotations

from dataclasses import dataclass

from .model import ExecOutcome

NOT_FOUND_PREFIX = "Program with path "
LAUNCH_FAILURE_PREFIX = "Process failed: "
UNKNOWN_FAILURE = f"{LAUNCH_FAILURE_PREFIX}Unknown error"


def not_found_message(program: str) -> str:
    return f'{NOT_FOUND_PREFIX}"{program}" was not found'


def launch_failure_message(reason: object) -> str:
    return f"{LAUNCH_FAILURE_PREFIX}{reason}"


@dataclass
class ScriptError(Exception):
    message: str
    code: int

    def __str__(self) -> str:
        return self.message


@dataclass
class ExecFailure(Exception):
    outcome: ExecOutcome

    def __str__(self) -> str:
        return self.outcome.message or UNKNOWN_FAILURE

    @property
    def kind(self) -> str:
        if self.outcome.exit_code is not None or self.outcome.stdout is not None:
            return "non_zero_exit"
        # never spawned: only the pre-flight check writes the not-found message
        if (self.outcome.message or "").startswith(NOT_FOUND_PREFIX):
            return "not_found"
        return "launch_failure"
