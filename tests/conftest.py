from __future__ import annotations

import shutil

import pytest

_ALLOWED_MARKERS = {"unit", "integration"}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_execwrap_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CI", "EXECWRAP_RUN_ID", "EXECWRAP_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


def _require_tool(name: str) -> str:
    path = shutil.which(name)
    if path is None:
        pytest.skip(f"{name} not available")
    return path


@pytest.fixture
def echo_path() -> str:
    return _require_tool("echo")


@pytest.fixture
def pwd_path() -> str:
    return _require_tool("pwd")


@pytest.fixture
def cp_path() -> str:
    return _require_tool("cp")
