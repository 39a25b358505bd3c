"""Command line argument parsing for gift-calc.

Turns a flat token list (already split on whitespace and quotes) into a
ParsedConfig. Unknown tokens are ignored; malformed values raise
ArgumentError with a message meant to be shown to the user as-is.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Sequence

from giftcalc.models import (
    DEFAULT_BASE_VALUE,
    DEFAULT_CURRENCY,
    DEFAULT_DECIMALS,
    DEFAULT_VARIATION,
    Command,
    ParsedConfig,
)


class ArgumentError(ValueError):
    """A flag was given a missing, malformed or out-of-range value."""


# Tokens that short-circuit parsing when they come first.
_LEADING_COMMANDS: dict[str, Command] = {
    "init-config": Command.INIT_CONFIG,
    "update-config": Command.UPDATE_CONFIG,
    "log": Command.LOG,
    "--version": Command.VERSION,
}


def _numeric(args: Sequence[str], i: int, label: str) -> float:
    """Read args[i + 1] as a finite number."""
    token = args[i + 1] if i + 1 < len(args) else None
    try:
        # No underscore digit separators
        value = float(token) if token and "_" not in token else math.nan
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        raise ArgumentError(f"{label} requires a numeric value")
    return value


def _in_range(value: float, lo: float, hi: float, label: str) -> float:
    if not lo <= value <= hi:
        raise ArgumentError(f"{label} must be between {lo} and {hi}")
    return value


def _string(args: Sequence[str], i: int, message: str) -> str:
    """Read args[i + 1] as a plain value; flags don't count."""
    token = args[i + 1] if i + 1 < len(args) else None
    if not token or token.startswith("-"):
        raise ArgumentError(message)
    return token


def _initial_config(defaults: Optional[Mapping[str, Any]]) -> ParsedConfig:
    defaults = defaults or {}
    decimals = defaults.get("decimals")
    return ParsedConfig(
        base_value=defaults.get("base_value") or DEFAULT_BASE_VALUE,
        variation=defaults.get("variation") or DEFAULT_VARIATION,
        currency=defaults.get("currency") or DEFAULT_CURRENCY,
        decimals=decimals if decimals is not None else DEFAULT_DECIMALS,
    )


def parse_arguments(
    args: Sequence[str],
    defaults: Optional[Mapping[str, Any]] = None,
) -> ParsedConfig:
    """Parse gift-calc tokens into a ParsedConfig.

    Args:
        args: Tokens after the program name, e.g. ["-b", "100", "--name", "Alice"].
        defaults: Optional caller defaults with any of the keys base_value,
            variation, currency, decimals. Friend and nice scores always
            start at 5.

    Returns:
        The parsed configuration. If the first token is a special command
        only ``command`` is set.

    Raises:
        ArgumentError: A flag's value is missing, not numeric, out of range,
            or (for string flags) looks like another flag.
    """
    config = _initial_config(defaults)

    if args and args[0] in _LEADING_COMMANDS:
        config.command = _LEADING_COMMANDS[args[0]]
        return config

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in ("-h", "--help"):
            config.show_help = True
            break
        if arg == "--version":
            config.command = Command.VERSION
            break

        if arg in ("-b", "--basevalue"):
            config.base_value = _numeric(args, i, "-b/--basevalue")
            i += 1
        elif arg in ("-v", "--variation"):
            label = "-v/--variation"
            config.variation = _in_range(_numeric(args, i, label), 0, 100, label)
            i += 1
        elif arg in ("-f", "--friend-score"):
            label = "-f/--friend-score"
            config.friend_score = _in_range(_numeric(args, i, label), 1, 10, label)
            i += 1
        elif arg in ("-n", "--nice-score"):
            label = "-n/--nice-score"
            config.nice_score = _in_range(_numeric(args, i, label), 0, 10, label)
            i += 1
        elif arg in ("-d", "--decimals"):
            label = "-d/--decimals"
            config.decimals = _in_range(int(_numeric(args, i, label)), 0, 10, label)
            i += 1
        elif arg in ("-c", "--currency"):
            config.currency = _string(
                args, i, "-c/--currency requires a currency code (e.g., SEK, USD, EUR)"
            ).upper()
            i += 1
        elif arg == "--name":
            config.recipient_name = _string(args, i, "--name requires a name value")
            i += 1
        elif arg in ("-cp", "--copy"):
            config.copy_to_clipboard = True
        elif arg == "--max":
            config.use_maximum = True
        elif arg == "--min":
            config.use_minimum = True
        elif arg in ("--asshole", "--dickhead"):
            config.nice_score = 0.0
        elif arg == "--no-log":
            config.log_to_file = False

        i += 1

    return config
