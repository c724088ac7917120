"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fsm_triggers.config import TriggerSettings, get_settings


def test_settings_defaults() -> None:
    settings = TriggerSettings()

    assert settings.log_level == "INFO"
    assert settings.max_arity == 16
    assert settings.assignability == "instance"
    assert settings.numeric_widening is True


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "FSM_TRIGGERS_MAX_ARITY=4",
                "FSM_TRIGGERS_ASSIGNABILITY=pydantic",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = TriggerSettings()

    assert settings.max_arity == 4
    assert settings.assignability == "pydantic"


def test_settings_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FSM_TRIGGERS_NUMERIC_WIDENING", "false")
    monkeypatch.setenv("FSM_TRIGGERS_LOG_LEVEL", "DEBUG")

    settings = TriggerSettings()

    assert settings.numeric_widening is False
    assert settings.log_level == "DEBUG"


def test_settings_reject_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FSM_TRIGGERS_ASSIGNABILITY", "duck")
    with pytest.raises(ValidationError):
        TriggerSettings()

    monkeypatch.setenv("FSM_TRIGGERS_ASSIGNABILITY", "instance")
    monkeypatch.setenv("FSM_TRIGGERS_MAX_ARITY", "-1")
    with pytest.raises(ValidationError):
        TriggerSettings()


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("FSM_TRIGGERS_MAX_ARITY", "1")

    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().max_arity == 1
