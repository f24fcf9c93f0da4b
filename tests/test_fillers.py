"""
Unit tests for filler detection and speaking rate.
"""

import pytest

from transcript.fillers import (
    compute_speaking_rate,
    count_fillers,
    count_occurrences,
    detect_fillers,
    speaking_rate_label,
)


class TestCountOccurrences:

    def test_repeated_token(self):
        assert count_occurrences("あのー", "あのーあのー") == 2

    def test_non_overlapping(self):
        assert count_occurrences("ああ", "あああ") == 1

    def test_regex_metacharacters_are_literal(self):
        assert count_occurrences("え?", "え?え?ええ") == 2
        assert count_occurrences(".", "abc") == 0
        assert count_occurrences("(笑)", "(笑)すみません(笑)") == 2

    def test_empty_inputs(self):
        assert count_occurrences("", "あのー") == 0
        assert count_occurrences("あのー", "") == 0


class TestDetectFillers:

    def test_report_format_and_order(self):
        transcript = "えーと、まあ、えーと、あのー、まあ、まあ"
        found = detect_fillers(transcript, ["あのー", "まあ", "えーと"])
        assert found == ["あのー(1回)", "まあ(3回)", "えーと(2回)"]

    def test_threshold(self):
        transcript = "えーと、まあ、えーと、あのー、まあ、まあ"
        assert detect_fillers(transcript, ["あのー", "まあ", "えーと"], min_count=3) == ["まあ(3回)"]

    def test_absent_fillers_never_reported(self):
        assert detect_fillers("よろしくお願いします。", ["あのー"], min_count=1) == []

    def test_empty_transcript(self):
        assert detect_fillers("", ["あのー"]) == []

    def test_default_list(self):
        counts = count_fillers("あのー、うーん。")
        assert counts["あのー"] == 1
        assert counts["うーん"] == 1


class TestSpeakingRate:

    def test_characters_per_minute(self):
        assert compute_speaking_rate("あ" * 150, 30.0) == 300

    def test_duration_floor(self):
        assert compute_speaking_rate("あいう", 0.0) == 180

    def test_empty(self):
        assert compute_speaking_rate("", 10.0) == 0

    @pytest.mark.parametrize("rate,label", [
        (279, "slowly"),
        (280, "good"),
        (300, "good"),
        (320, "good"),
        (321, "fast"),
    ])
    def test_label(self, rate, label):
        assert speaking_rate_label(rate) == label
