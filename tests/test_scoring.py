"""
Unit tests for 1-5 score normalization.
"""

import numpy as np
import pytest

from audio.scoring import scale, score_pause_rate


class TestScale:

    def test_bounds_map_to_ends_of_scale(self):
        assert scale(50, 50, 250) == 1
        assert scale(250, 50, 250) == 5

    def test_values_are_clamped(self):
        assert scale(-100, 50, 250) == 1
        assert scale(10_000, 50, 250) == 5

    def test_midpoint(self):
        assert scale(150, 50, 250) == 3

    def test_rounds_half_up(self):
        # 1/8 of the range is exactly half a step
        assert scale(1, 0, 8) == 2
        assert scale(3, 0, 8) == 3

    def test_half_step_from_computed_mean(self):
        # np.mean of 100 x 0.05 is 0.04999999999999999, still the 1.5 step
        mean = float(np.mean([0.05] * 100))
        assert scale(mean, 0.02, 0.10) == 3

    def test_degenerate_range(self):
        assert scale(5, 3, 3) == 1

    def test_nan_scores_minimum(self):
        assert scale(float("nan"), 0, 1) == 1

    def test_monotonic_and_in_range(self):
        values = [x / 100 for x in range(-50, 1200)]
        scores = [scale(v, 0.0, 10.0) for v in values]
        assert all(isinstance(s, int) for s in scores)
        assert all(1 <= s <= 5 for s in scores)
        assert all(a <= b for a, b in zip(scores, scores[1:]))


class TestPauseRate:

    @pytest.mark.parametrize("ppm", [5.0, 10.0, 15.0])
    def test_ideal_band_scores_five(self, ppm):
        assert score_pause_rate(ppm) == 5

    def test_too_few_pauses(self):
        assert score_pause_rate(0.0) == 1
        assert score_pause_rate(2.5) == 3

    def test_too_many_pauses(self):
        assert score_pause_rate(20.0) == 3
        assert score_pause_rate(22.5) == 2

    def test_over_pausing_never_drops_below_one(self):
        assert score_pause_rate(30.0) == 1
        assert score_pause_rate(300.0) == 1
