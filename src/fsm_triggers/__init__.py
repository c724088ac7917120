"""Typed trigger parameters for finite-state machines.

Declare the ordered argument types a trigger must be fired with, and validate the
arguments of every fire attempt before any guard or action runs:
- `TriggerKey`: identity of a trigger plus its parameter signature
- `TriggerParameterSet` / `with_parameters`: declaration and fire-time validation
- `TriggerParameterRegistry`: the (trigger, signature) side-table
"""

__version__ = "0.1.0"

from fsm_triggers.config import TriggerSettings, get_settings
from fsm_triggers.errors import (
    ArityLimitExceeded,
    NullArgumentError,
    ParameterCountMismatch,
    ParameterTypeMismatch,
    RegistryFrozenError,
    TriggerAlreadyConfigured,
    TriggerParameterError,
)
from fsm_triggers.key import TriggerKey
from fsm_triggers.parameters import TriggerInvocation, TriggerParameterSet, with_parameters
from fsm_triggers.registry import TriggerParameterRegistry
from fsm_triggers.validation import (
    DefaultParameterValidator,
    InstanceAssignability,
    ParameterValidator,
    PydanticAssignability,
    ValidationResult,
)

__all__ = [
    "__version__",
    "ArityLimitExceeded",
    "DefaultParameterValidator",
    "InstanceAssignability",
    "NullArgumentError",
    "ParameterCountMismatch",
    "ParameterTypeMismatch",
    "ParameterValidator",
    "PydanticAssignability",
    "RegistryFrozenError",
    "TriggerAlreadyConfigured",
    "TriggerInvocation",
    "TriggerKey",
    "TriggerParameterError",
    "TriggerParameterRegistry",
    "TriggerParameterSet",
    "TriggerSettings",
    "ValidationResult",
    "get_settings",
    "with_parameters",
]
