from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from fsm_triggers.errors import NullArgumentError, describe_type

TTrigger = TypeVar("TTrigger")


@dataclass(frozen=True, slots=True)
class TriggerKey(Generic[TTrigger]):
    """Identity of a trigger together with its ordered parameter signature.

    Equality and hashing cover the trigger and every position of
    ``argument_types``. Two keys built independently from the same trigger and the
    same ordered types are interchangeable as mapping keys.
    """

    trigger: TTrigger
    argument_types: tuple[object, ...]

    def __init__(self, trigger: TTrigger, argument_types: Iterable[object] | None) -> None:
        if argument_types is None:
            raise NullArgumentError("argument_types")
        object.__setattr__(self, "trigger", trigger)
        object.__setattr__(self, "argument_types", tuple(argument_types))

    @property
    def arity(self) -> int:
        return len(self.argument_types)

    def __str__(self) -> str:
        signature = ", ".join(describe_type(t) for t in self.argument_types)
        return f"{self.trigger!r}({signature})"
