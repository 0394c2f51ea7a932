"""CLI payload output helpers."""

from __future__ import annotations

import sys
from typing import TextIO

from ..contracts import ERROR_SCHEMA, OUTCOME_SCHEMA, validate
from ..core.context import RunContext
from ..core.errors import ExecFailure
from ..core.exit_codes import ERR_LAUNCH, ERR_NOT_FOUND
from ..core.model import ExecOutcome
from ..core.runtime.serialize import dumps_json


def emit_payload(schema_name: str, payload: dict[str, object]) -> None:
    validate(schema_name, payload)
    print(dumps_json(payload))


def build_base_payload(ctx: RunContext, schema_name: str, status: str = "ok") -> dict[str, object]:
    return {
        "schema_name": schema_name,
        "schema_version": 1,
        "tool": "execwrap",
        "status": status,
        "run_id": ctx.run_id,
    }


def build_outcome_payload(
    ctx: RunContext,
    outcome: ExecOutcome,
    failure: ExecFailure | None = None,
) -> dict[str, object]:
    payload = build_base_payload(ctx, OUTCOME_SCHEMA, "error" if outcome.failed else "ok")
    payload["kind"] = failure.kind if failure is not None else "ok"
    payload["outcome"] = outcome.to_payload()
    return payload


def report_error(ctx: RunContext, message: str, code: int) -> None:
    if ctx.output_format != "json":
        print(message, file=sys.stderr)
        return
    payload = {
        "schema_name": ERROR_SCHEMA,
        "schema_version": 1,
        "tool": "execwrap",
        "status": "error",
        "errors": [{"code": code, "message": message}],
    }
    print(dumps_json(payload), file=sys.stderr)


def failure_exit_code(failure: ExecFailure) -> int:
    code = failure.outcome.exit_code
    if code is None:
        return ERR_NOT_FOUND if failure.kind == "not_found" else ERR_LAUNCH
    # killed by signal N
    if code < 0:
        return 128 - code
    return code


def write_text(stream: TextIO, text: str | None) -> None:
    if not text:
        return
    stream.write(text if text.endswith("\n") else text + "\n")


def render_outcome_text(outcome: ExecOutcome, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    write_text(out, outcome.stdout)
    if outcome.failed:
        write_text(err, outcome.message)
    else:
        write_text(err, outcome.stderr)
