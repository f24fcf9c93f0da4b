"""Transcript analysis package for the interview coach.

- fillers: filler-word detection and speaking rate
- proofreading: suggestion patching, grammar messages and fallback correction
- proofread_client: client for the external proofreading service
- prep: PREP (Point / Reason / Example / Conclusion) reorganization
"""

from .models import (
    Correction,
    CorrectionSource,
    PatchResult,
    PrepResult,
    PrepSection,
    Suggestion,
    SuggestionRule,
)
from .fillers import (
    compute_speaking_rate,
    count_occurrences,
    detect_fillers,
    speaking_rate_label,
)
from .proofreading import (
    apply_suggestions,
    correct_transcript,
    fallback_correction,
    suggestion_message,
)
from .prep import reorganize, split_sentences

__all__ = [
    "Correction",
    "CorrectionSource",
    "PatchResult",
    "PrepResult",
    "PrepSection",
    "Suggestion",
    "SuggestionRule",
    "compute_speaking_rate",
    "count_occurrences",
    "detect_fillers",
    "speaking_rate_label",
    "apply_suggestions",
    "correct_transcript",
    "fallback_correction",
    "suggestion_message",
    "reorganize",
    "split_sentences",
]
