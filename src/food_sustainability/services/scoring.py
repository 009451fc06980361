"""Rounding and clamping helpers shared by the score calculators."""

import math

MIN_SCORE = 0
MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(value + 0.5)


def round_money(value: float) -> float:
    """Round a monetary amount to cents."""
    return round(value, 2)


def clamp_score(value: float) -> int:
    """Round a score and clamp it into the 0-100 range."""
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(value)))
