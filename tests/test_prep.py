"""
Unit tests for PREP reorganization.
"""

import pytest

from transcript.models import PrepSection
from transcript.prep import classify_sentence, reorganize, split_sentences


class TestSplitSentences:

    def test_keeps_terminators(self):
        assert split_sentences("速い。本当？はい！") == ["速い。", "本当？", "はい！"]

    def test_trailing_fragment_kept(self):
        assert split_sentences("速い。続き") == ["速い。", "続き"]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_input(self, text):
        assert split_sentences(text) == []


class TestClassify:

    @pytest.mark.parametrize("sentence, section", [
        ("結論から言うと速い。", PrepSection.POINT),
        ("なぜなら準備したから。", PrepSection.REASON),
        ("例えば昨年の案件です。", PrepSection.EXAMPLE),
        ("つまり準備が大切です。", PrepSection.CONCLUSION),
        ("今日は晴れです。", None),
        ("私はリーダーでした。", None),
    ])
    def test_opening_keyword(self, sentence, section):
        assert classify_sentence(sentence) == section

    def test_keyword_must_open_sentence(self):
        assert classify_sentence("昨日なぜなら雨だった。") is None


class TestReorganize:

    def test_point_then_reason(self):
        result = reorganize("結論から言うと速い。なぜなら準備したから。")
        assert result.point == ["結論から言うと速い。"]
        assert result.reason == ["なぜなら準備したから。"]
        assert result.text == "結論から言うと速い。なぜなら準備したから。"

    def test_reordered_into_prep_order(self):
        text = "つまり準備が大切です。例えば昨年の案件です。なぜなら時間がないから。結論から言うと速さです。"
        result = reorganize(text)
        assert result.text == (
            "結論から言うと速さです。なぜなら時間がないから。例えば昨年の案件です。つまり準備が大切です。"
        )

    def test_unkeyed_sentences_follow_current_section(self):
        result = reorganize("なぜなら時間がないから。締め切りも近い。")
        assert result.reason == ["なぜなら時間がないから。", "締め切りも近い。"]

    def test_first_person_sentence_stays_in_example(self):
        text = "結論から言うと準備が大切です。例えば昨年の発表です。私はその時リーダーでした。"
        result = reorganize(text)
        assert result.point == ["結論から言うと準備が大切です。"]
        assert result.example == ["例えば昨年の発表です。", "私はその時リーダーでした。"]
        assert result.text == text

    def test_unkeyed_opening_sentence_is_point(self):
        result = reorganize("速さが大事です。なぜなら時間がないから。")
        assert result.point == ["速さが大事です。"]
        assert result.unclassified == []

    def test_without_lead_section(self):
        result = reorganize("速さが大事です。なぜなら時間がないから。", lead_section=None)
        assert result.unclassified == ["速さが大事です。"]
        assert result.text.endswith("速さが大事です。")

    def test_no_sentence_added_or_lost(self):
        text = "今日は晴れ。例えば散歩。つまり良い日。それから寝た。"
        result = reorganize(text)
        assert sorted(result.text) == sorted(text)
        total = sum(len(getattr(result, f)) for f in ("point", "reason", "example", "conclusion", "unclassified"))
        assert total == 4

    def test_empty(self):
        result = reorganize("")
        assert result.text == ""
        assert result.point == []
