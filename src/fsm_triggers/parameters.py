"""Triggers that carry a fixed, ordered, typed argument list.

A :class:`TriggerParameterSet` is declared once while the state machine is being
configured and checked every time the trigger fires::

    deposit = with_parameters(Trigger.DEPOSIT, float)
    invocation = deposit.bind(42)           # checked statically and at runtime
    deposit.validate_parameters([42])       # runtime check used by the fire routine

One generic class covers every arity. :func:`with_parameters` is overloaded for
the common arities so type checkers know the signature of ``bind``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, TypeVarTuple, Unpack, overload

from fsm_triggers.config import get_settings
from fsm_triggers.errors import ArityLimitExceeded, NullArgumentError
from fsm_triggers.key import TriggerKey
from fsm_triggers.validation import (
    ParameterValidator,
    TypeDescriptor,
    ValidationResult,
    default_validator,
)

logger = logging.getLogger(__name__)

TTrigger = TypeVar("TTrigger")
Ts = TypeVarTuple("Ts")
A0 = TypeVar("A0")
A1 = TypeVar("A1")
A2 = TypeVar("A2")


class TriggerParameterSet(Generic[TTrigger, Unpack[Ts]]):
    """A trigger together with the parameter signature it must be fired with.

    The trigger and its signature are fixed at construction. Equality is identity;
    use :attr:`key` to compare signatures.
    """

    def __init__(
        self,
        trigger: TTrigger,
        *argument_types: TypeDescriptor,
        validator: ParameterValidator | None = None,
    ) -> None:
        limit = get_settings().max_arity
        if len(argument_types) > limit:
            raise ArityLimitExceeded(trigger=trigger, arity=len(argument_types), limit=limit)

        self._key: TriggerKey[TTrigger] = TriggerKey(trigger, argument_types)
        self._validator = validator if validator is not None else default_validator()

    @property
    def trigger(self) -> TTrigger:
        return self._key.trigger

    @property
    def key(self) -> TriggerKey[TTrigger]:
        """Registry key for this configuration. Not part of the firing API."""

        return self._key

    @property
    def argument_types(self) -> tuple[TypeDescriptor, ...]:
        return self._key.argument_types

    @property
    def arity(self) -> int:
        return self._key.arity

    def check_parameters(self, args: Sequence[object]) -> ValidationResult:
        """Validate ``args`` and return the outcome without raising or logging."""

        return self._validator.validate(args, self._key.argument_types)

    def validate_parameters(self, args: Sequence[object] | None) -> None:
        """Ensure ``args`` matches the configured signature.

        Called once per fire attempt, before any guard or action runs. Pass an
        empty sequence for a zero-arity trigger; ``None`` is always rejected.

        Raises:
            NullArgumentError: ``args`` is ``None``.
            ParameterCountMismatch: ``len(args)`` differs from the arity.
            ParameterTypeMismatch: the first argument not assignable to its type.
        """

        if args is None:
            raise NullArgumentError("args")

        result = self.check_parameters(args)
        if not result.ok:
            logger.debug(
                "Trigger parameters rejected",
                extra={
                    "trigger": repr(self.trigger),
                    "reason": result.kind,
                    "position": result.index,
                },
            )
            result.raise_for_failure(self.trigger)

    def bind(self, *args: Unpack[Ts]) -> TriggerInvocation[TTrigger]:
        """Validate ``args`` and pair them with the trigger."""

        values: tuple[object, ...] = tuple(args)
        self.validate_parameters(values)
        return TriggerInvocation(parameters=self, args=values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key})"


@dataclass(frozen=True, slots=True)
class TriggerInvocation(Generic[TTrigger]):
    """A trigger paired with arguments that already passed validation."""

    parameters: TriggerParameterSet[TTrigger, Unpack[tuple[Any, ...]]]
    args: tuple[object, ...]

    @property
    def trigger(self) -> TTrigger:
        return self.parameters.trigger


# Typed overloads cover arity 0-3. Larger signatures use the variadic overload and lose
# static checking of `bind`.
@overload
def with_parameters(
    trigger: TTrigger, /, *, validator: ParameterValidator | None = ...
) -> TriggerParameterSet[TTrigger]: ...


@overload
def with_parameters(
    trigger: TTrigger, t0: type[A0], /, *, validator: ParameterValidator | None = ...
) -> TriggerParameterSet[TTrigger, A0]: ...


@overload
def with_parameters(
    trigger: TTrigger,
    t0: type[A0],
    t1: type[A1],
    /,
    *,
    validator: ParameterValidator | None = ...,
) -> TriggerParameterSet[TTrigger, A0, A1]: ...


@overload
def with_parameters(
    trigger: TTrigger,
    t0: type[A0],
    t1: type[A1],
    t2: type[A2],
    /,
    *,
    validator: ParameterValidator | None = ...,
) -> TriggerParameterSet[TTrigger, A0, A1, A2]: ...


@overload
def with_parameters(
    trigger: TTrigger,
    /,
    *argument_types: TypeDescriptor,
    validator: ParameterValidator | None = ...,
) -> TriggerParameterSet[TTrigger, Unpack[tuple[Any, ...]]]: ...


def with_parameters(
    trigger: Any,
    /,
    *argument_types: TypeDescriptor,
    validator: ParameterValidator | None = None,
) -> TriggerParameterSet[Any, Unpack[tuple[Any, ...]]]:
    """Declare the parameter signature of ``trigger``.

    Example:
        >>> transfer = with_parameters("transfer", float, str)
        >>> transfer.arity
        2
    """

    return TriggerParameterSet(trigger, *argument_types, validator=validator)
