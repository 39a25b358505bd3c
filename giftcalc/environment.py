"""Environment-driven configuration for gift-calc.

Each loader takes an optional env mapping (defaults to os.environ) and
returns plain values ready to hand to the parser or the CLI. Unparsable or
out-of-range values are logged and ignored so a bad variable never blocks
a calculation.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)

_PREFIX = "GIFT_CALC_"

# Variable suffix -> (defaults key, converter, allowed range or None)
_DEFAULT_VARS: dict[str, tuple[str, Callable[[str], Any], Optional[tuple[float, float]]]] = {
    "BASE_VALUE": ("base_value", float, None),
    "VARIATION": ("variation", float, (0, 100)),
    "CURRENCY": ("currency", str.upper, None),
    "DECIMALS": ("decimals", int, (0, 10)),
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def load_defaults(env: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Build the caller defaults mapping from GIFT_CALC_* variables.

    Only variables that are set, parse cleanly and fall inside the same
    ranges the command line enforces appear in the result, so the parser's
    built-in defaults cover the rest.
    """
    source = _env(env)
    defaults: dict[str, Any] = {}
    for suffix, (key, convert, bounds) in _DEFAULT_VARS.items():
        name = _PREFIX + suffix
        raw = source.get(name, "").strip()
        if not raw:
            continue
        try:
            value = convert(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a valid value", name, raw)
            continue
        if isinstance(value, float) and not math.isfinite(value):
            logger.warning("Ignoring %s=%r: not a finite number", name, raw)
            continue
        if bounds and not bounds[0] <= value <= bounds[1]:
            logger.warning("Ignoring %s=%r: must be between %s and %s", name, raw, *bounds)
            continue
        defaults[key] = value
    return defaults


def load_seed(env: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Integer seed from GIFT_CALC_SEED, or None for fresh randomness."""
    raw = _env(env).get(_PREFIX + "SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %sSEED=%r: not an integer", _PREFIX, raw)
        return None


def log_level(env: Optional[Mapping[str, str]] = None) -> str:
    """Logging level name from GIFT_CALC_LOG_LEVEL (default WARNING)."""
    raw = _env(env).get(_PREFIX + "LOG_LEVEL", "").strip().upper()
    return raw if raw in _LOG_LEVELS else "WARNING"
