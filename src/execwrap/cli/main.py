from __future__ import annotations

import argparse
import platform
import sys

from .. import __version__
from ..contracts import OUTCOME_SCHEMA, VERSION_SCHEMA
from ..core.context import RunContext
from ..core.errors import ExecFailure, ScriptError
from ..core.exit_codes import ERR_INTERNAL, ERR_USAGE
from ..core.model import ExecOptions
from ..core.process import run
from ..core.runtime.logging import log_event
from ..core.shell import SHELL_PATH, run_shell
from .output import (
    build_base_payload,
    build_outcome_payload,
    emit_payload,
    failure_exit_code,
    render_outcome_text,
    report_error,
)


def _add_exec_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--cwd", help="working directory for the child process")
    parser.add_argument(
        "--keep-final-newline",
        action="store_true",
        help="do not strip the trailing newline from captured output",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="execwrap", description="run a program and report its outcome")
    p.add_argument("--version", action="version", version=f"execwrap {__version__}")
    p.add_argument("--run-id", help="run identifier attached to logs and payloads")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--json", action="store_true", help="shorthand for --format json")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="run a program with explicit arguments")
    _add_exec_options(run_p)
    run_p.add_argument("program", help="path to the program")
    run_p.add_argument("args", nargs=argparse.REMAINDER, help="arguments passed to the program")

    shell_p = sub.add_parser("shell", help=f"run a command string through {SHELL_PATH} -c")
    _add_exec_options(shell_p)
    shell_p.add_argument("command", help="command string, passed to the shell unmodified")

    sub.add_parser("version", help="print version information")
    return p


def _options(ns: argparse.Namespace) -> ExecOptions:
    return ExecOptions(cwd=ns.cwd, strip_final_newline=not ns.keep_final_newline)


def _execute(ctx: RunContext, ns: argparse.Namespace) -> int:
    options = _options(ns)
    failure: ExecFailure | None = None
    try:
        if ns.cmd == "run":
            outcome = run(ns.program, ns.args, options, ctx)
        else:
            outcome = run_shell(ns.command, options, ctx)
    except ExecFailure as exc:
        failure = exc
        outcome = exc.outcome
    if ctx.output_format == "json":
        emit_payload(OUTCOME_SCHEMA, build_outcome_payload(ctx, outcome, failure))
    else:
        render_outcome_text(outcome)
    return failure_exit_code(failure) if failure is not None else 0


def main(argv: list[str] | None = None) -> int:
    raw_argv = argv if argv is not None else sys.argv[1:]
    p = build_parser()
    ns = p.parse_args(argv)
    # CI and text defaults are resolved by RunContext
    ctx = RunContext.from_args(ns.run_id, "json" if ns.json else ns.format, ns.log_json, ns.verbose, ns.quiet)
    try:
        if ns.format and ns.json and ns.format != "json":
            raise ScriptError("conflicting output flags: use either --format json or --json", ERR_USAGE)
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format, argv=" ".join(raw_argv))
        if ns.cmd == "version":
            payload = build_base_payload(ctx, VERSION_SCHEMA)
            payload.update(
                {
                    "version": __version__,
                    "python_version": platform.python_version(),
                    "shell": SHELL_PATH,
                }
            )
            if ctx.output_format == "json":
                emit_payload(VERSION_SCHEMA, payload)
            else:
                print(f"execwrap {__version__} (python {payload['python_version']}, shell {SHELL_PATH})")
            return 0
        if ns.cmd in {"run", "shell"}:
            return _execute(ctx, ns)
        return ERR_USAGE
    except ScriptError as exc:
        report_error(ctx, str(exc), exc.code)
        return exc.code
    except Exception as exc:  # pragma: no cover
        report_error(ctx, f"internal error: {exc}", ERR_INTERNAL)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
