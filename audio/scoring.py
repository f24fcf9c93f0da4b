"""
Score normalization for delivery metrics.

Maps raw metrics onto the 1-5 ordinal scale shown to the speaker:
- intonation (pitch range), volume (mean voiced volume)
- pause (pauses per minute, banded), speed_variation (volume spread)
"""

from __future__ import annotations
import math

from .constants import SCORE_MAX, SCORE_MIN


def _clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi; NaN maps to lo."""
    if math.isnan(x):
        return lo
    return max(lo, min(hi, x))


def scale(value: float, lo: float, hi: float) -> int:
    """
    Clamp to [lo, hi], map linearly onto 0..4, round half up, add 1.

    lo -> 1 ; hi -> 5. A degenerate range (hi <= lo) scores 1.
    """
    if hi <= lo:
        return SCORE_MIN
    ratio = (_clamp(value, lo, hi) - lo) / (hi - lo)
    steps = SCORE_MAX - SCORE_MIN
    # Snap float noise (e.g. a mean of 0.04999999999999999) onto the half-step
    return int(math.floor(round(ratio * steps, 9) + 0.5)) + SCORE_MIN


def score_pause_rate(
    pauses_per_minute: float,
    ideal_min: float = 5.0,
    ideal_max: float = 15.0,
    ceiling: float = 30.0,
) -> int:
    """
    Banded pause score: too few and too many pauses are both penalized.

    ideal_min..ideal_max -> 5 ; below -> scale(x, 0, ideal_min) ;
    above -> 5 - scale(x, ideal_max, ceiling), floored at 1.
    """
    if ideal_min <= pauses_per_minute <= ideal_max:
        return SCORE_MAX
    if pauses_per_minute < ideal_min:
        return scale(pauses_per_minute, 0.0, ideal_min)
    return max(SCORE_MIN, SCORE_MAX - scale(pauses_per_minute, ideal_max, ceiling))
