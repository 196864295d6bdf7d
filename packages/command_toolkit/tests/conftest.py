from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _set_required_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COMMAND_TOOLKIT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("COMMAND_TOOLKIT_LOG_OUTCOMES", "true")
    monkeypatch.delenv("COMMAND_TOOLKIT_LOG_FORMAT", raising=False)
    monkeypatch.delenv("COMMAND_TOOLKIT_TRACER_NAME", raising=False)
