"""Tests for giftcalc.calculator.

Randomness is always injected: a scripted source for exact values, a
seeded random.Random for the bound property.
"""

import random

import pytest

from giftcalc.calculator import (
    compute_final_amount,
    compute_randomized_amount,
    round_half_away,
)
from giftcalc.models import CalculationParameters


class ScriptedSource:
    """Returns the given draws in order and counts how many were taken."""

    def __init__(self, *draws: float):
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls]
        self.calls += 1
        return value


class ExplodingSource:
    """Fails the test if anything draws from it."""

    def random(self) -> float:
        pytest.fail("random source should not be consulted")


def params(**overrides) -> CalculationParameters:
    values = dict(
        base_value=100.0,
        variation_percent=20.0,
        friend_score=5.5,
        nice_score=5.5,
        decimal_places=2,
    )
    values.update(overrides)
    return CalculationParameters(**values)


# --- Rounding (4 tests) ---

def test_round_half_away_positive():
    assert round_half_away(2.5, 0) == 3.0


def test_round_half_away_negative():
    assert round_half_away(-2.5, 0) == -3.0


def test_round_to_two_places():
    assert round_half_away(84.126, 2) == pytest.approx(84.13)


@pytest.mark.parametrize("value", [0.0, 12.34, 99.999, 1234.5678, 70.0])
@pytest.mark.parametrize("places", [0, 1, 2, 3])
def test_rounding_is_idempotent(value, places):
    once = round_half_away(value, places)
    assert round_half_away(once, places) == once


# --- Randomized amount (8 tests) ---

def test_neutral_scores_midpoint_draw_returns_base():
    """Scores of 5.5 carry no bias; a 0.5 draw sits in the middle."""
    assert compute_randomized_amount(100, 20, 5.5, 5.5, 2, ScriptedSource(0.5)) == pytest.approx(100.0)


def test_lowest_draw_hits_lower_bound():
    assert compute_randomized_amount(100, 20, 5.5, 5.5, 2, ScriptedSource(0.0)) == pytest.approx(80.0)


def test_high_scores_shift_upward():
    """Friend 10 and nice 10 give +0.45 bias, i.e. +9% at 20% variation."""
    assert compute_randomized_amount(100, 20, 10, 10, 2, ScriptedSource(0.5)) == pytest.approx(109.0)


def test_low_scores_shift_downward():
    """Friend 1 (-0.45) and nice 4 (-0.15) average to -0.3, i.e. -6%."""
    assert compute_randomized_amount(100, 20, 1, 4, 2, ScriptedSource(0.5)) == pytest.approx(94.0)


def test_bias_is_clamped_to_envelope():
    assert compute_randomized_amount(100, 20, 10, 10, 2, ScriptedSource(0.99)) == pytest.approx(120.0)
    assert compute_randomized_amount(100, 20, 1, 1, 2, ScriptedSource(0.01)) == pytest.approx(80.0)


def test_consumes_exactly_one_draw():
    source = ScriptedSource(0.3, 0.7)
    compute_randomized_amount(70, 20, 5, 5, 2, source)
    assert source.calls == 1


def test_zero_variation_returns_base():
    assert compute_randomized_amount(70, 0, 9, 9, 2, ScriptedSource(0.8)) == pytest.approx(70.0)


def test_rounds_to_requested_places():
    # 0.123 * 40 - 20 = -15.08 -> 84.92
    assert compute_randomized_amount(100, 20, 5.5, 5.5, 0, ScriptedSource(0.123)) == 85.0
    assert compute_randomized_amount(100, 20, 5.5, 5.5, 1, ScriptedSource(0.123)) == pytest.approx(84.9)


# --- Override ladder (8 tests) ---

@pytest.mark.parametrize("nice, expected", [(0, 0.0), (1, 10.0), (2, 20.0), (3, 30.0)])
def test_low_nice_scores_are_fixed(nice, expected):
    result = compute_final_amount(params(nice_score=nice), ExplodingSource())
    assert result == pytest.approx(expected)


@pytest.mark.parametrize("nice", [0, 1, 2, 3])
def test_low_nice_scores_ignore_other_inputs(nice):
    p = params(
        nice_score=nice,
        variation_percent=90,
        friend_score=10,
        use_maximum=True,
        use_minimum=True,
    )
    assert compute_final_amount(p, ExplodingSource()) == pytest.approx(100.0 * nice / 10)


def test_use_maximum():
    assert compute_final_amount(params(nice_score=7, use_maximum=True), ExplodingSource()) == pytest.approx(120.0)


def test_use_minimum():
    assert compute_final_amount(params(nice_score=4, use_minimum=True), ExplodingSource()) == pytest.approx(80.0)


def test_maximum_wins_over_minimum():
    p = params(nice_score=6, use_maximum=True, use_minimum=True)
    assert compute_final_amount(p, ExplodingSource()) == pytest.approx(120.0)


def test_max_min_rounded_to_decimals():
    p = params(base_value=33.33, nice_score=5, use_maximum=True, decimal_places=1)
    assert compute_final_amount(p, ExplodingSource()) == pytest.approx(40.0)


def test_fractional_nice_score_falls_through_to_random():
    """1.5 is not one of the integer override thresholds."""
    source = ScriptedSource(0.5)
    result = compute_final_amount(params(nice_score=1.5, friend_score=5.5), source)
    assert source.calls == 1
    # bias: (0 + -0.4) / 2 = -0.2 -> -4% at 20% variation
    assert result == pytest.approx(96.0)


def test_random_branch_with_default_source():
    result = compute_final_amount(params())
    assert 80.0 <= result <= 120.0


# --- Bound property (1 test) ---

def test_randomized_result_stays_within_variation():
    """10,000 trials across valid scores never leave the envelope."""
    rng = random.Random(20240501)
    friend_scores = [x / 2 for x in range(2, 21)]   # 1.0 .. 10.0
    nice_scores = [x / 2 for x in range(8, 21)]     # 4.0 .. 10.0

    for _ in range(10_000):
        base = float(rng.randint(10, 500))
        variation = float(rng.randint(0, 100))
        p = CalculationParameters(
            base_value=base,
            variation_percent=variation,
            friend_score=rng.choice(friend_scores),
            nice_score=rng.choice(nice_scores),
            decimal_places=2,
        )
        result = compute_final_amount(p, rng)
        low = base * (1 - variation / 100)
        high = base * (1 + variation / 100)
        assert low - 1e-9 <= result <= high + 1e-9


# --- Large values and injected sources (4 tests) ---

def test_round_leaves_unscalable_values_alone():
    assert round_half_away(1.2e306, 10) == 1.2e306
    assert round_half_away(-1.2e306, 10) == -1.2e306


def test_huge_base_value_with_maximum():
    p = params(base_value=1e306, nice_score=5, use_maximum=True, decimal_places=10)
    assert compute_final_amount(p, ExplodingSource()) == pytest.approx(1.2e306)


def test_huge_base_value_randomized():
    p = params(base_value=1e306, decimal_places=10)
    assert compute_final_amount(p, ScriptedSource(0.5)) == pytest.approx(1e306)


def test_falsy_source_is_still_used():
    """An injected source is used even when it evaluates as false."""

    class EmptyLookingSource(ScriptedSource):
        def __len__(self):
            return 0

    source = EmptyLookingSource(0.0)
    assert compute_randomized_amount(100, 20, 5.5, 5.5, 2, source) == pytest.approx(80.0)
    assert source.calls == 1
