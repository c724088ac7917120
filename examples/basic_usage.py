#!/usr/bin/env python3
"""Declare trigger signatures for a small account state machine and fire them.

This demonstrates using the components directly:

* load settings from `.env`
* declare parameterised triggers in a registry
* validate fire attempts before any transition logic runs

Arguments for one fire attempt are passed on the command line.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from enum import Enum

from fsm_triggers import TriggerParameterError, TriggerParameterRegistry, get_settings
from fsm_triggers.logging import configure_logging

logger = logging.getLogger(__name__)


class AccountTrigger(str, Enum):
    DEPOSIT = "deposit"
    TRANSFER = "transfer"
    CLOSE = "close"


def _coerce(raw: str) -> object:
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate one fire attempt (example).")
    parser.add_argument(
        "trigger", choices=[t.value for t in AccountTrigger], help="Trigger to fire"
    )
    parser.add_argument("args", nargs="*", help="Trigger arguments; numbers are parsed as such")
    return parser.parse_args(argv)


def build_registry() -> TriggerParameterRegistry:
    registry = TriggerParameterRegistry()
    registry.set_trigger_parameters(AccountTrigger.DEPOSIT, float)
    registry.set_trigger_parameters(AccountTrigger.TRANSFER, float, str)
    registry.set_trigger_parameters(AccountTrigger.CLOSE)
    registry.freeze()
    return registry


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    configure_logging(get_settings().log_level)
    registry = build_registry()

    trigger = AccountTrigger(args.trigger)
    values = [_coerce(v) for v in args.args]
    try:
        registry.validate_fire(trigger, values)
    except TriggerParameterError as e:
        logger.error("Fire rejected", extra={"trigger": trigger.value, "error": str(e)})
        return 1

    logger.info("Fire accepted", extra={"trigger": trigger.value, "values": values})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
