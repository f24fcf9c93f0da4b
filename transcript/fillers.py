"""
Text metrics computation for interview answers.

This module provides functions to detect Japanese filler words and compute
the speaking rate (characters per minute) of a finalized transcript.
"""

import re
import logging
from typing import Dict, List, Optional, Sequence

from .constants import FILLERS_JA, GOOD_RATE_MAX, GOOD_RATE_MIN

logger = logging.getLogger(__name__)


def count_occurrences(token: str, text: str) -> int:
    """
    Count non-overlapping literal occurrences of `token` in `text`.

    Tokens are matched as plain text; regex metacharacters are escaped.
    """
    if not token or not text:
        return 0
    return len(re.findall(re.escape(token), text))


def count_fillers(transcript: str, fillers: Optional[Sequence[str]] = None) -> Dict[str, int]:
    """
    Count every configured filler in the transcript.

    Returns:
        Dict mapping filler -> count, in the order of `fillers`
    """
    fillers = FILLERS_JA if fillers is None else fillers
    return {token: count_occurrences(token, transcript) for token in fillers}


def detect_fillers(
    transcript: str,
    fillers: Optional[Sequence[str]] = None,
    min_count: int = 1,
) -> List[str]:
    """
    Report fillers used at least `min_count` times.

    Args:
        transcript: Finalized transcript
        fillers: Filler tokens to look for (defaults to FILLERS_JA)
        min_count: Minimum occurrences for a filler to be reported

    Returns:
        Entries formatted as "token(count回)", following the order of `fillers`
    """
    if not transcript:
        return []
    counts = count_fillers(transcript, fillers)
    found = [
        f"{token}({count}回)"
        for token, count in counts.items()
        if count >= min_count and count > 0
    ]
    logger.debug(f"Filler detection: {len(found)} fillers reported, counts={counts}")
    return found


def compute_speaking_rate(transcript: str, duration_sec: float) -> int:
    """
    Characters per minute over the recording.

    Duration is rounded to whole seconds and floored at 1s.
    """
    seconds = max(1, int(round(duration_sec)))
    return int(round(len(transcript or "") / seconds * 60))


def speaking_rate_label(rate: float) -> str:
    """
    Classify a speaking rate against the 280-320 chars/min target band.

    Returns:
        "good", "slowly" or "fast"
    """
    if GOOD_RATE_MIN <= rate <= GOOD_RATE_MAX:
        return "good"
    if rate < GOOD_RATE_MIN:
        return "slowly"
    return "fast"
