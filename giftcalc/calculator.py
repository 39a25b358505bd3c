"""Gift amount calculation.

Two entry points:
- compute_randomized_amount: one biased random draw inside the variation
  envelope around the base value.
- compute_final_amount: the override ladder (nice-score reductions, --max,
  --min) falling back to the randomized amount.

Randomness comes from an injectable UniformSource so results can be
reproduced; random.Random satisfies the protocol.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional, Protocol

from giftcalc.models import CalculationParameters

logger = logging.getLogger(__name__)

# Scores are centred on the midpoint of the 1-10 scale.
_SCORE_MIDPOINT = 5.5
_BIAS_PER_POINT = 0.1

# Fixed fractions of the base value for the lowest nice scores.
_NICE_REDUCTIONS: dict[float, float] = {
    0: 0.0,
    1: 0.1,
    2: 0.2,
    3: 0.3,
}

_MAXIMUM_FACTOR = 1.2
_MINIMUM_FACTOR = 0.8


class UniformSource(Protocol):
    """Anything that yields independent uniform floats in [0, 1)."""

    def random(self) -> float: ...


_default_source = random.Random()


def round_half_away(value: float, decimal_places: int) -> float:
    """Round to ``decimal_places`` with halves going away from zero.

    Values too large to scale are already coarser than the requested
    precision and come back unchanged.
    """
    multiplier = 10 ** decimal_places
    scaled = abs(value) * multiplier
    if not math.isfinite(scaled):
        return value
    return math.copysign(math.floor(scaled + 0.5), value) / multiplier


def _score_bias(score: float) -> float:
    return (score - _SCORE_MIDPOINT) * _BIAS_PER_POINT


def compute_randomized_amount(
    base: float,
    variation_percent: float,
    friend_score: float,
    nice_score: float,
    decimal_places: int,
    source: Optional[UniformSource] = None,
) -> float:
    """Draw a biased amount within +/- variation_percent of ``base``.

    Both scores shift the random percentage by their distance from 5.5
    (0.1 per point, averaged), then the result is clamped back into the
    variation envelope. Consumes exactly one draw from ``source``.

    Args:
        base: Unadjusted starting amount.
        variation_percent: Half-width of the envelope, in percent (0-100).
        friend_score: 1-10, higher skews upward.
        nice_score: 0-10, higher skews upward.
        decimal_places: Rounding precision of the result.
        source: Random source; a shared module-level Random when omitted.

    Returns:
        The rounded amount.
    """
    rng = source if source is not None else _default_source
    combined_bias = (_score_bias(friend_score) + _score_bias(nice_score)) / 2

    random_percentage = rng.random() * (variation_percent * 2) - variation_percent
    biased_percentage = random_percentage + combined_bias * variation_percent

    # Bias may move the draw but never outside the envelope
    final_percentage = max(-variation_percent, min(variation_percent, biased_percentage))

    amount = base * (1 + final_percentage / 100)
    return round_half_away(amount, decimal_places)


def compute_final_amount(
    params: CalculationParameters,
    source: Optional[UniformSource] = None,
) -> float:
    """Apply the override ladder, falling back to a randomized amount.

    Order matters: nice scores 0-3 beat --max, which beats --min. Only
    integer-valued nice scores trigger the fixed reductions; 1.5 goes to
    the random branch.
    """
    base = params.base_value
    reduction = _NICE_REDUCTIONS.get(params.nice_score)

    if reduction is not None:
        logger.debug("nice score %s: fixed %s of base", params.nice_score, reduction)
        amount = base * reduction
    elif params.use_maximum:
        logger.debug("maximum override")
        amount = base * _MAXIMUM_FACTOR
    elif params.use_minimum:
        logger.debug("minimum override")
        amount = base * _MINIMUM_FACTOR
    else:
        amount = compute_randomized_amount(
            base,
            params.variation_percent,
            params.friend_score,
            params.nice_score,
            params.decimal_places,
            source=source,
        )
        logger.debug("randomized amount %s", amount)

    return round_half_away(amount, params.decimal_places)
