from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Literal

from .runtime.clock import utc_stamp
from .runtime.env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    output_format: OutputFormat = "text"
    log_json: bool = False
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        output_format: OutputFormat | None = None,
        log_json: bool = False,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "RunContext":
        default_run = f"execwrap-{utc_stamp()}-{uuid.uuid4().hex[:8]}"
        resolved_run_id = run_id or getenv("EXECWRAP_RUN_ID") or default_run
        resolved_format: OutputFormat = output_format or ("json" if getenv("CI") else "text")
        return cls(
            run_id=resolved_run_id,
            output_format=resolved_format,
            log_json=log_json or getenv_flag("EXECWRAP_LOG_JSON"),
            verbose=verbose,
            quiet=quiet,
        )
