"""Configuration side-table of parameterised triggers.

Trigger identifiers are usually plain enum members with no way to carry a payload
shape. Signatures are attached here instead, keyed by (trigger, signature), so
the same trigger may be declared with several distinct signatures.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator, Sequence
from typing import Any, Unpack

from fsm_triggers.errors import (
    NullArgumentError,
    RegistryFrozenError,
    TriggerAlreadyConfigured,
)
from fsm_triggers.key import TriggerKey
from fsm_triggers.parameters import TriggerParameterSet, with_parameters
from fsm_triggers.validation import ParameterValidator, TypeDescriptor, ValidationResult

logger = logging.getLogger(__name__)

AnyParameterSet = TriggerParameterSet[Any, Unpack[tuple[Any, ...]]]


class TriggerParameterRegistry:
    """Holds every parameter set declared for a state machine.

    Registration happens once during configuration and is not synchronised.
    Call :meth:`freeze` when configuration is done; from then on the registry is
    read-only and :meth:`validate_fire` may be called from any thread.
    """

    def __init__(self, *, validator: ParameterValidator | None = None) -> None:
        self._validator = validator
        self._by_key: dict[TriggerKey[Any], AnyParameterSet] = {}
        self._by_trigger: dict[Hashable, list[AnyParameterSet]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def register(self, parameters: AnyParameterSet) -> AnyParameterSet:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot configure {parameters.key}: registry is frozen")
        if parameters.key in self._by_key:
            raise TriggerAlreadyConfigured(key=parameters.key)

        self._by_key[parameters.key] = parameters
        self._by_trigger.setdefault(parameters.trigger, []).append(parameters)
        logger.debug(
            "Registered trigger parameters",
            extra={"trigger": repr(parameters.trigger), "arity": parameters.arity},
        )
        return parameters

    def set_trigger_parameters(
        self, trigger: Hashable, *argument_types: TypeDescriptor
    ) -> AnyParameterSet:
        """Declare and register a signature for ``trigger``."""

        return self.register(with_parameters(trigger, *argument_types, validator=self._validator))

    def get(self, key: TriggerKey[Any]) -> AnyParameterSet | None:
        return self._by_key.get(key)

    def signatures_for(self, trigger: Hashable) -> list[AnyParameterSet]:
        return list(self._by_trigger.get(trigger, ()))

    def validate_fire(
        self, trigger: Hashable, args: Sequence[object] | None
    ) -> AnyParameterSet | None:
        """Check the arguments of a fire attempt against the declared signatures.

        Returns the matching parameter set, or ``None`` when ``trigger`` was never
        declared with parameters (such triggers are not checked). When no declared
        signature accepts ``args``, the error from the signature whose arity equals
        ``len(args)`` is raised, falling back to the first declared signature.
        """

        if args is None:
            raise NullArgumentError("args")

        candidates = self._by_trigger.get(trigger)
        if not candidates:
            return None

        failures: list[tuple[AnyParameterSet, ValidationResult]] = []
        for parameters in candidates:
            result = parameters.check_parameters(args)
            if result.ok:
                return parameters
            failures.append((parameters, result))

        reported, result = next(
            ((p, r) for p, r in failures if p.arity == len(args)), failures[0]
        )
        logger.debug(
            "Trigger fire rejected",
            extra={
                "trigger": repr(trigger),
                "signatures": len(candidates),
                "reason": result.kind,
                "position": result.index,
            },
        )
        error = result.error(reported.trigger)
        assert error is not None
        raise error

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __len__(self) -> int:
        return len(self._by_key)

    def __iter__(self) -> Iterator[AnyParameterSet]:
        return iter(self._by_key.values())
