"""Process runner: spawn, drain, wait, classify."""

from __future__ import annotations

import os
import subprocess
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .errors import ExecFailure, launch_failure_message, not_found_message
from .model import ExecOptions, ExecOutcome
from .runtime.logging import log_event

if TYPE_CHECKING:
    from .context import RunContext


def decode_output(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return ""


def strip_final_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def _log(
    ctx: RunContext | None,
    program: str,
    arguments: Sequence[str],
    options: ExecOptions,
    outcome: ExecOutcome,
    started: float,
) -> None:
    if ctx is None:
        return
    log_event(
        ctx,
        "error" if outcome.failed and outcome.exit_code is None else "info",
        "process",
        "run-command",
        program=program,
        argc=len(arguments),
        cwd=str(options.cwd) if options.cwd is not None else "",
        failed=outcome.failed,
        code=outcome.exit_code,
        duration_ms=int((time.monotonic() - started) * 1000),
    )


def _fail(
    ctx: RunContext | None,
    program: str,
    arguments: Sequence[str],
    options: ExecOptions,
    outcome: ExecOutcome,
    started: float,
) -> ExecFailure:
    _log(ctx, program, arguments, options, outcome, started)
    return ExecFailure(outcome)


def run(
    program: str | os.PathLike[str],
    arguments: Sequence[str] = (),
    options: ExecOptions = ExecOptions(),
    ctx: RunContext | None = None,
) -> ExecOutcome:
    """Run ``program`` with ``arguments`` and return its outcome.

    Raises ``ExecFailure`` when the program does not exist, cannot be
    launched, or exits with a non-zero status. The outcome attached to the
    failure carries whatever was known at that point.
    """
    program_path = os.fspath(program)
    args = [str(arg) for arg in arguments]
    started = time.monotonic()

    # Relative paths resolve against our cwd, never the child's or PATH.
    resolved = os.path.abspath(program_path) if program_path else ""

    # Pre-flight only; the spawn below still reports a vanished file.
    if not resolved or not os.path.exists(resolved):
        outcome = ExecOutcome(failed=True, message=not_found_message(program_path))
        raise _fail(ctx, program_path, args, options, outcome, started)

    try:
        proc = subprocess.Popen(
            [resolved, *args],
            cwd=options.cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        outcome = ExecOutcome(failed=True, message=launch_failure_message(exc.strerror or exc))
        raise _fail(ctx, program_path, args, options, outcome, started) from exc

    # communicate() reads both pipes to EOF before waiting on the child.
    with proc:
        stdout_data, stderr_data = proc.communicate()
    exit_code = proc.returncode

    stdout = decode_output(stdout_data)
    stderr = decode_output(stderr_data)
    if options.strip_final_newline:
        stdout = strip_final_newline(stdout)
        stderr = strip_final_newline(stderr)

    if exit_code != 0:
        message = f"Command returned non-zero exit code ({exit_code})"
        if stderr:
            message += f":\n\n{stderr}"
        outcome = ExecOutcome(failed=True, message=message, exit_code=exit_code, stdout=stdout, stderr=stderr)
        raise _fail(ctx, program_path, args, options, outcome, started)

    outcome = ExecOutcome(failed=False, exit_code=exit_code, stdout=stdout, stderr=stderr)
    _log(ctx, program_path, args, options, outcome, started)
    return outcome
