"""Unit tests for trigger key identity."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from enum import Enum

import pytest

from fsm_triggers.errors import NullArgumentError
from fsm_triggers.key import TriggerKey


class Trigger(str, Enum):
    DEPOSIT = "deposit"
    TRANSFER = "transfer"
    CLOSE = "close"


def test_independently_built_keys_are_equal_and_hash_equal() -> None:
    a = TriggerKey(Trigger.TRANSFER, [float, str])
    b = TriggerKey(Trigger.TRANSFER, (float, str))

    assert a is not b
    assert a == b
    assert hash(a) == hash(b)

    configured = {a: "transfer-config"}
    assert configured[b] == "transfer-config"


def test_argument_order_is_significant() -> None:
    assert TriggerKey(Trigger.TRANSFER, [float, str]) != TriggerKey(Trigger.TRANSFER, [str, float])


def test_different_signatures_for_the_same_trigger_are_distinct_keys() -> None:
    keys = {
        TriggerKey(Trigger.DEPOSIT, []),
        TriggerKey(Trigger.DEPOSIT, [float]),
        TriggerKey(Trigger.DEPOSIT, [float, str]),
    }
    assert len(keys) == 3


def test_different_triggers_with_same_signature_are_distinct() -> None:
    assert TriggerKey(Trigger.DEPOSIT, [float]) != TriggerKey(Trigger.TRANSFER, [float])


def test_none_argument_types_rejected_but_empty_allowed() -> None:
    with pytest.raises(NullArgumentError) as exc_info:
        TriggerKey(Trigger.CLOSE, None)
    assert exc_info.value.argument == "argument_types"

    key = TriggerKey(Trigger.CLOSE, [])
    assert key.arity == 0
    assert key.argument_types == ()


def test_key_is_read_only() -> None:
    types = [float]
    key = TriggerKey(Trigger.DEPOSIT, types)

    types.append(str)
    assert key.argument_types == (float,)

    with pytest.raises(FrozenInstanceError):
        key.trigger = Trigger.CLOSE  # type: ignore[misc]


def test_typing_descriptors_participate_in_equality() -> None:
    assert TriggerKey("t", [list[int], int | None]) == TriggerKey("t", [list[int], int | None])
    assert TriggerKey("t", [list[int]]) != TriggerKey("t", [list[str]])


def test_str_renders_signature() -> None:
    assert str(TriggerKey("transfer", [float, str])) == "'transfer'(float, str)"
