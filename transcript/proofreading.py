"""
Transcript correction from proofreading suggestions.

Applies (offset, length, replacement) edits to the original transcript,
renders a grammar message per applied edit, and degrades to a filler-strip
fallback when the proofreading service is unavailable.
"""

import re
import logging
from typing import Iterable, List, Optional, Protocol, Sequence

from .constants import DEFAULT_TERMINATOR, FILLERS_JA, SENTENCE_TERMINATORS
from .exceptions import ProofreadError
from .models import Correction, CorrectionSource, PatchResult, Suggestion, SuggestionRule
from .proofread_client import strip_control_chars

logger = logging.getLogger(__name__)


class Proofreader(Protocol):
    """Anything that returns suggestions for a sentence or raises ProofreadError."""

    def proofread(self, sentence: str, rules: Optional[Sequence[str]] = None) -> List[Suggestion]:
        ...


RULE_MESSAGES = {
    SuggestionRule.RA_NUKI: "「{original}」は「ら抜き言葉」です。「{replacement}」が正しい表現です。",
    SuggestionRule.I_NUKI: "「{original}」は「い抜き言葉」です。「{replacement}」と言いましょう。",
    SuggestionRule.SA_IRE: "「{original}」は「さ入れ言葉」です。「{replacement}」が正しい表現です。",
    SuggestionRule.SA_NUKI: "「{original}」は「さ抜き言葉」です。「{replacement}」が正しい表現です。",
    SuggestionRule.JODOUSHI: "「{original}」は助動詞の使い方に誤りがあります。「{replacement}」としましょう。",
}

GENERIC_MESSAGE = "「{original}」は「{replacement}」に修正することをおすすめします。"


def apply_suggestions(transcript: str, suggestions: Iterable[Suggestion]) -> PatchResult:
    """
    Apply suggestions right-to-left so earlier offsets never drift.

    Suggestions are sorted by offset descending (stable for ties). An edit
    reaching past the end is clamped to the end; one starting past the end,
    or overlapping an edit already applied to its right, is skipped.

    Args:
        transcript: Original transcript; offsets index its codepoints
        suggestions: Suggestion set for that transcript

    Returns:
        PatchResult with the patched text and the applied/skipped suggestions
    """
    text = transcript
    applied: List[Suggestion] = []
    skipped: List[Suggestion] = []
    # Start of the leftmost edit applied so far, in original coordinates
    boundary = len(transcript)

    for s in sorted(suggestions, key=lambda s: s.offset, reverse=True):
        if s.offset > len(transcript):
            logger.debug(f"Skipping suggestion past end of transcript: offset={s.offset}")
            skipped.append(s)
            continue
        end = min(s.offset + s.length, len(transcript))
        if end > boundary:
            logger.debug(f"Skipping overlapping suggestion: offset={s.offset}, length={s.length}")
            skipped.append(s)
            continue
        text = text[:s.offset] + s.replacement + text[end:]
        boundary = s.offset
        applied.append(s)

    return PatchResult(text=text, applied=applied, skipped=skipped)


def _filler_pattern(fillers: Sequence[str]) -> Optional["re.Pattern[str]"]:
    tokens = sorted({f for f in fillers if f}, key=len, reverse=True)
    if not tokens:
        return None
    return re.compile("|".join(re.escape(t) for t in tokens))


def fallback_correction(transcript: str, fillers: Optional[Sequence[str]] = None) -> str:
    """
    Strip fillers and close the last sentence.

    All filler tokens are removed with one combined pattern (longest first);
    a terminator is appended unless the text is empty or already ends in one.
    """
    fillers = FILLERS_JA if fillers is None else fillers
    pattern = _filler_pattern(fillers)
    text = pattern.sub("", transcript) if pattern else transcript
    text = text.strip()
    if text and text[-1] not in SENTENCE_TERMINATORS:
        text += DEFAULT_TERMINATOR
    return text


def suggestion_message(suggestion: Suggestion, transcript: Optional[str] = None) -> str:
    """Human-readable message for one applied suggestion, keyed by its rule."""
    original = suggestion.original
    if original is None and transcript is not None:
        original = transcript[suggestion.offset:suggestion.offset + suggestion.length]
    template = RULE_MESSAGES.get(suggestion.rule, GENERIC_MESSAGE)
    return template.format(original=original or "", replacement=suggestion.replacement)


def correct_transcript(
    transcript: str,
    proofreader: Optional[Proofreader],
    fillers: Optional[Sequence[str]] = None,
) -> Correction:
    """
    Correct a finalized transcript with one proofreading call.

    The service is called once with no retry. Any ProofreadError (or a
    missing proofreader) falls back to `fallback_correction` with no messages.
    Control characters are removed first, matching the text the service
    sees, so suggestion offsets line up with the patched string.
    """
    transcript = strip_control_chars(transcript)
    if proofreader is None:
        return Correction(
            text=fallback_correction(transcript, fillers),
            source=CorrectionSource.FALLBACK,
        )

    try:
        suggestions = proofreader.proofread(transcript)
    except ProofreadError as e:
        logger.warning(f"Proofreading unavailable, using fallback correction: {e.message}")
        return Correction(
            text=fallback_correction(transcript, fillers),
            source=CorrectionSource.FALLBACK,
        )

    result = apply_suggestions(transcript, suggestions)
    messages = [suggestion_message(s, transcript) for s in reversed(result.applied)]
    if result.skipped:
        logger.info(f"Applied {len(result.applied)} suggestions, skipped {len(result.skipped)}")
    return Correction(text=result.text, messages=messages, source=CorrectionSource.SERVICE)
