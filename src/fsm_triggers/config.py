"""Settings for trigger parameter declaration and validation.

Configuration is loaded from:
- environment variables prefixed with ``FSM_TRIGGERS_``
- and a local `.env` file (if present)

Settings are read once per process through :func:`get_settings`. Tests reset the
cache with ``get_settings.cache_clear()``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TriggerSettings(BaseSettings):
    """Settings for trigger parameter handling.

    Environment variables:
    - FSM_TRIGGERS_LOG_LEVEL         (optional)
    - FSM_TRIGGERS_MAX_ARITY         (optional)
    - FSM_TRIGGERS_ASSIGNABILITY     (optional, "instance" or "pydantic")
    - FSM_TRIGGERS_NUMERIC_WIDENING  (optional)
    """

    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )
    max_arity: int = Field(
        default=16,
        ge=0,
        description="Largest parameter signature a trigger may declare",
    )
    assignability: Literal["instance", "pydantic"] = Field(
        default="instance",
        description=(
            "Rule used by the default validator. 'instance' uses isinstance checks with "
            "optional numeric widening; 'pydantic' uses strict pydantic validation, which "
            "also checks the contents of parameterised generics such as list[int]."
        ),
    )
    numeric_widening: bool = Field(
        default=True,
        description="Accept int where float/complex is expected and float where complex is.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FSM_TRIGGERS_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> TriggerSettings:
    return TriggerSettings()
