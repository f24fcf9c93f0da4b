"""
Unit tests for pause segmentation.
"""

import pytest

from audio.pauses import count_pauses, segment_pauses


class TestCountPauses:

    @pytest.mark.parametrize("length", range(0, 12))
    def test_all_silent_series(self, length):
        """A fully silent series is one pause iff it reaches the minimum run."""
        volumes = [0.0] * length
        expected = 1 if length >= 5 else 0
        assert count_pauses(volumes, threshold=0.02, min_frames=5) == expected

    def test_short_gaps_are_not_pauses(self):
        volumes = [0.1] * 3 + [0.0] * 4 + [0.1] * 3
        assert count_pauses(volumes) == 0

    def test_runs_counted_when_speech_resumes(self):
        volumes = [0.1] * 3 + [0.0] * 5 + [0.1] * 2 + [0.01] * 7 + [0.1]
        assert count_pauses(volumes) == 2

    def test_trailing_silence_is_flushed(self):
        volumes = [0.1] * 10 + [0.0] * 6
        assert count_pauses(volumes) == 1

    def test_threshold_is_inclusive_for_speech(self):
        """Volume equal to the threshold ends a silent run."""
        volumes = [0.0] * 5 + [0.02] + [0.0] * 2
        assert count_pauses(volumes, threshold=0.02) == 1


class TestSegmentPauses:

    def test_empty_series(self):
        stats = segment_pauses([])
        assert stats.pause_count == 0
        assert stats.total_seconds == 1.0
        assert stats.pauses_per_minute == 0.0

    def test_pauses_per_minute(self):
        # 60 s of frames at 100 ms, with 6 pauses of 1 s each
        volumes = ([0.1] * 90 + [0.0] * 10) * 6
        stats = segment_pauses(volumes, tick_sec=0.1)
        assert stats.pause_count == 6
        assert stats.total_seconds == pytest.approx(60.0)
        assert stats.pauses_per_minute == pytest.approx(6.0)

    def test_short_series_floors_duration_at_one_second(self):
        stats = segment_pauses([0.0] * 5, tick_sec=0.1)
        assert stats.pause_count == 1
        assert stats.total_seconds == 1.0
        assert stats.pauses_per_minute == pytest.approx(60.0)
