"""Test configuration and fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from fsm_triggers.config import get_settings
from fsm_triggers.registry import TriggerParameterRegistry


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate every test from the developer's environment and `.env`."""
    for name in (
        "FSM_TRIGGERS_LOG_LEVEL",
        "FSM_TRIGGERS_MAX_ARITY",
        "FSM_TRIGGERS_ASSIGNABILITY",
        "FSM_TRIGGERS_NUMERIC_WIDENING",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> TriggerParameterRegistry:
    """Provide an empty registry."""
    return TriggerParameterRegistry()
