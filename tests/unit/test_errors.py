"""Unit tests for error values."""

from __future__ import annotations

import pickle

import pytest

from fsm_triggers.errors import (
    NullArgumentError,
    ParameterCountMismatch,
    ParameterTypeMismatch,
    RegistryFrozenError,
    TriggerAlreadyConfigured,
)
from fsm_triggers.key import TriggerKey


def test_errors_survive_pickling() -> None:
    count = pickle.loads(pickle.dumps(ParameterCountMismatch(trigger="t", expected=2, actual=3)))
    assert (count.trigger, count.expected, count.actual) == ("t", 2, 3)
    assert str(count) == "Trigger 't' expects 2 parameter(s), got 3"

    mismatch = pickle.loads(
        pickle.dumps(ParameterTypeMismatch(trigger="t", index=1, expected=int, actual=str))
    )
    assert mismatch.index == 1
    assert mismatch.expected is int
    assert mismatch.actual is str

    null = pickle.loads(pickle.dumps(NullArgumentError("args")))
    assert null.argument == "args"

    frozen = pickle.loads(pickle.dumps(RegistryFrozenError("registry is frozen")))
    assert str(frozen) == "registry is frozen"


def test_notes_can_be_attached() -> None:
    error = TriggerAlreadyConfigured(key=TriggerKey("deposit", [float]))

    error.add_note("while configuring the account machine")

    assert error.__notes__ == ["while configuring the account machine"]
    restored = pickle.loads(pickle.dumps(error))
    assert restored.key == TriggerKey("deposit", [float])
    assert restored.__notes__ == ["while configuring the account machine"]


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        raise ParameterCountMismatch(trigger="t", expected=1, actual=0)
