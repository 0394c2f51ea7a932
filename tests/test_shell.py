from __future__ import annotations

from pathlib import Path

import pytest

import execwrap.core.shell as shell_module
from execwrap import SHELL_PATH, ExecFailure, ExecOptions, ExecOutcome, run, run_shell
from execwrap.core.context import RunContext


def test_run_shell_matches_direct_echo(echo_path: str) -> None:
    assert run_shell("echo hello world") == run(echo_path, ["hello", "world"])
    assert run_shell("echo hello world") == ExecOutcome(failed=False, exit_code=0, stdout="hello world", stderr="")


def test_run_shell_passes_command_verbatim(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[object, ...]] = []

    def _fake_run(program, arguments, options, ctx):  # noqa: ANN001, ANN202
        calls.append((program, list(arguments), options, ctx))
        return ExecOutcome(failed=False, exit_code=0, stdout="", stderr="")

    monkeypatch.setattr(shell_module, "run", _fake_run)
    options = ExecOptions(strip_final_newline=False)
    ctx = RunContext(run_id="t-shell", quiet=True)
    command = "echo 'a  b' | tr a-z A-Z; exit $?"
    shell_module.run_shell(command, options, ctx)
    assert calls == [(SHELL_PATH, ["-c", command], options, ctx)]


def test_run_shell_applies_shell_syntax() -> None:
    assert run_shell("echo 'a  b' | tr a-z A-Z").stdout == "A  B"


def test_run_shell_honours_options(tmp_path: Path) -> None:
    result = run_shell("pwd", ExecOptions(cwd=tmp_path, strip_final_newline=False))
    assert result.stdout is not None
    assert Path(result.stdout.rstrip("\n")).resolve() == tmp_path.resolve()
    assert result.stdout.endswith("\n")


def test_run_shell_failure_is_exec_failure() -> None:
    with pytest.raises(ExecFailure) as excinfo:
        run_shell("echo nope >&2; exit 7")
    assert excinfo.value.outcome.exit_code == 7
    assert "nope" in str(excinfo.value)
