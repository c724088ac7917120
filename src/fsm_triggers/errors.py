"""Errors raised while declaring or firing parameterised triggers.

Every error is raised synchronously at the boundary where it is detected and is
never handled inside this package. Callers of the fire routine see them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fsm_triggers.key import TriggerKey


def describe_type(descriptor: object) -> str:
    """Render a type descriptor for error messages (``int`` rather than ``<class 'int'>``)."""

    if isinstance(descriptor, type):
        return descriptor.__qualname__
    return repr(descriptor)


class TriggerParameterError(ValueError):
    """Base class for trigger parameter failures.

    Subclasses are dataclasses built from keyword arguments, which leaves
    ``args`` empty; pickling rebuilds them from their fields instead.
    """

    def __reduce__(self) -> tuple[Any, ...]:
        if not is_dataclass(self):
            return super().__reduce__()
        values = tuple(getattr(self, f.name) for f in fields(self))
        return (type(self), values, self.__dict__)


@dataclass(eq=False)
class NullArgumentError(TriggerParameterError):
    """A required sequence was ``None``.

    An empty sequence is a valid value (a zero-arity signature or call) and never
    raises this.
    """

    argument: str

    def __str__(self) -> str:
        return f"Argument {self.argument!r} must not be None"


@dataclass(eq=False)
class ParameterCountMismatch(TriggerParameterError):
    trigger: object
    expected: int
    actual: int

    def __str__(self) -> str:
        return (
            f"Trigger {self.trigger!r} expects {self.expected} parameter(s), "
            f"got {self.actual}"
        )


@dataclass(eq=False)
class ParameterTypeMismatch(TriggerParameterError):
    """The argument at ``index`` is not assignable to the declared type."""

    trigger: object
    index: int
    expected: object
    actual: type

    def __str__(self) -> str:
        return (
            f"Trigger {self.trigger!r} parameter {self.index} expects "
            f"{describe_type(self.expected)}, got {describe_type(self.actual)}"
        )


@dataclass(eq=False)
class ArityLimitExceeded(TriggerParameterError):
    trigger: object
    arity: int
    limit: int

    def __str__(self) -> str:
        return (
            f"Trigger {self.trigger!r} declares {self.arity} parameters; "
            f"the configured maximum is {self.limit}"
        )


@dataclass(eq=False)
class TriggerAlreadyConfigured(TriggerParameterError):
    """Raised when the registry already holds a parameter set for the same key."""

    key: TriggerKey

    def __str__(self) -> str:
        return f"Parameters for {self.key} have already been configured"


class RegistryFrozenError(TriggerParameterError):
    pass
