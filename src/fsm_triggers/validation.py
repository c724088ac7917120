"""Parameter validation at fire time.

A :class:`ParameterValidator` compares a runtime argument sequence with an
ordered list of expected type descriptors and reports success or the first
failure. What counts as "assignable" is decided by an injectable
:class:`Assignability` rule so the embedding state machine can bring its own
notion of compatibility.
"""

from __future__ import annotations

import types
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Literal,
    Protocol,
    TypeAlias,
    Union,
    get_args,
    get_origin,
)

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from fsm_triggers.config import TriggerSettings, get_settings
from fsm_triggers.errors import (
    ParameterCountMismatch,
    ParameterTypeMismatch,
    TriggerParameterError,
)

# A class, `typing.Any`, a union, a parameterised generic, `Literal[...]`, `None`...
TypeDescriptor: TypeAlias = object

ValidationKind = Literal["ok", "count_mismatch", "type_mismatch"]


class Assignability(Protocol):
    """Decides whether a runtime value may stand in for an expected type."""

    def __call__(self, value: object, expected: TypeDescriptor) -> bool: ...


def _is_plain_protocol(expected: TypeDescriptor) -> bool:
    return bool(getattr(expected, "_is_protocol", False)) and not getattr(
        expected, "_is_runtime_protocol", False
    )


def _has_protocol_members(value: object, protocol: Any) -> bool:
    """Structural check for protocols that `isinstance` refuses to handle."""

    members: set[str] = set()
    for base in protocol.__mro__:
        if base is object or not getattr(base, "_is_protocol", False):
            continue
        members.update(vars(base))
        members.update(getattr(base, "__annotations__", {}))
    return all(hasattr(value, name) for name in members if not name.startswith("_"))


def _isinstance(value: object, expected: type) -> bool:
    if _is_plain_protocol(expected):
        return _has_protocol_members(value, expected)
    return isinstance(value, expected)


@dataclass(frozen=True, slots=True)
class InstanceAssignability(Assignability):
    """``isinstance``-based rule that understands the common typing constructs.

    Parameterised generics are checked by their origin only: ``[1, "a"]`` is
    assignable to ``list[int]``. Descriptors that are not classes and not one of
    the recognised typing forms (a bare ``TypeVar`` for instance) accept anything.
    Protocols that are not ``@runtime_checkable`` are checked structurally: the
    value must have every public member the protocol declares.
    """

    numeric_widening: bool = True

    def __call__(self, value: object, expected: TypeDescriptor) -> bool:
        if expected is Any or expected is object:
            return True
        if expected is None or expected is types.NoneType:
            return value is None

        origin = get_origin(expected)
        if origin is Union or origin is types.UnionType:
            return any(self(value, member) for member in get_args(expected))
        if origin is Literal:
            return any(type(value) is type(m) and value == m for m in get_args(expected))
        if origin is Annotated:
            return self(value, get_args(expected)[0])
        if origin is not None:
            expected = origin

        if not isinstance(expected, type):
            return True
        if _isinstance(value, expected):
            return True

        if self.numeric_widening:
            if expected is float:
                return isinstance(value, int)
            if expected is complex:
                return isinstance(value, int | float)
        return False


@lru_cache(maxsize=256)
def _type_adapter(expected: TypeDescriptor) -> TypeAdapter[Any] | None:
    try:
        return TypeAdapter(expected)
    except PydanticSchemaGenerationError:
        # Arbitrary classes without a pydantic schema; checked with isinstance instead.
        return None


class PydanticAssignability(Assignability):
    """Strict pydantic validation of each argument against its descriptor.

    Unlike :class:`InstanceAssignability` this looks inside containers
    (``list[int]`` rejects ``["a"]``) and rejects ``bool`` where ``int`` is
    expected. No coercion happens; the argument is only checked.
    """

    def __call__(self, value: object, expected: TypeDescriptor) -> bool:
        if _is_plain_protocol(expected):
            return _has_protocol_members(value, expected)
        adapter = _type_adapter(expected)
        if adapter is None:
            return not isinstance(expected, type) or _isinstance(value, expected)
        try:
            adapter.validate_python(value, strict=True)
        except ValidationError:
            return False
        return True


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one argument sequence.

    ``kind`` tags the variant; only the fields relevant to that variant are set.
    """

    kind: ValidationKind
    expected_count: int | None = None
    actual_count: int | None = None
    index: int | None = None
    expected_type: TypeDescriptor = None
    actual_type: type | None = None

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(kind="ok")

    @classmethod
    def count_mismatch(cls, *, expected: int, actual: int) -> ValidationResult:
        return cls(kind="count_mismatch", expected_count=expected, actual_count=actual)

    @classmethod
    def type_mismatch(
        cls, *, index: int, expected: TypeDescriptor, actual: type
    ) -> ValidationResult:
        return cls(kind="type_mismatch", index=index, expected_type=expected, actual_type=actual)

    @property
    def ok(self) -> bool:
        return self.kind == "ok"

    def error(self, trigger: object) -> TriggerParameterError | None:
        """Build the error matching this result; ``None`` on success."""

        if self.kind == "count_mismatch":
            assert self.expected_count is not None and self.actual_count is not None
            return ParameterCountMismatch(
                trigger=trigger, expected=self.expected_count, actual=self.actual_count
            )
        if self.kind == "type_mismatch":
            assert self.index is not None and self.actual_type is not None
            return ParameterTypeMismatch(
                trigger=trigger,
                index=self.index,
                expected=self.expected_type,
                actual=self.actual_type,
            )
        return None

    def raise_for_failure(self, trigger: object) -> None:
        """Raise the error matching this result; do nothing on success."""

        error = self.error(trigger)
        if error is not None:
            raise error


class ParameterValidator(Protocol):
    def validate(
        self,
        argument_values: Sequence[object],
        expected_types: Sequence[TypeDescriptor],
    ) -> ValidationResult: ...


@dataclass(frozen=True, slots=True)
class DefaultParameterValidator(ParameterValidator):
    """Check the argument count, then each position in order.

    Stops at the first incompatible position. Never mutates its inputs.
    """

    assignable: Assignability = field(default_factory=InstanceAssignability)

    def validate(
        self,
        argument_values: Sequence[object],
        expected_types: Sequence[TypeDescriptor],
    ) -> ValidationResult:
        if len(argument_values) != len(expected_types):
            return ValidationResult.count_mismatch(
                expected=len(expected_types), actual=len(argument_values)
            )
        for index, (value, expected) in enumerate(zip(argument_values, expected_types)):
            if not self.assignable(value, expected):
                return ValidationResult.type_mismatch(
                    index=index, expected=expected, actual=type(value)
                )
        return ValidationResult.success()


def default_validator(settings: TriggerSettings | None = None) -> DefaultParameterValidator:
    """Build the validator selected by settings."""

    settings = settings or get_settings()
    assignable: Assignability
    if settings.assignability == "pydantic":
        assignable = PydanticAssignability()
    else:
        assignable = InstanceAssignability(numeric_widening=settings.numeric_widening)
    return DefaultParameterValidator(assignable=assignable)
