"""
PREP reorganization of an interview answer.

Splits the corrected transcript into sentences, buckets them into
Point / Reason / Example / Conclusion by their opening keywords, and
reassembles the answer in PREP order. Sentences are never added or
rewritten, and keep their relative order inside a bucket.
"""

import re
import logging
from typing import Dict, List, Optional, Tuple

from .constants import SENTENCE_TERMINATORS
from .models import PrepResult, PrepSection

logger = logging.getLogger(__name__)

# Sentence openers that switch the current section
SECTION_KEYWORDS: Dict[PrepSection, Tuple[str, ...]] = {
    PrepSection.POINT: (
        "結論から言うと", "結論から申し上げると", "結論から", "私の強みは",
        "要点は", "ポイントは",
    ),
    PrepSection.REASON: (
        "なぜなら", "その理由は", "理由は", "理由としては", "というのも", "なぜかというと",
    ),
    PrepSection.EXAMPLE: (
        "例えば", "たとえば", "具体的には", "実際に", "具体例として", "事例として",
    ),
    PrepSection.CONCLUSION: (
        "つまり", "以上のことから", "以上から", "以上より", "したがって", "まとめると",
        "結論として", "このように", "だからこそ",
    ),
}

SECTION_ORDER = (
    PrepSection.POINT,
    PrepSection.REASON,
    PrepSection.EXAMPLE,
    PrepSection.CONCLUSION,
    PrepSection.UNCLASSIFIED,
)

_SENTENCE_RE = re.compile(rf"[^{SENTENCE_TERMINATORS}]*[{SENTENCE_TERMINATORS}]+|[^{SENTENCE_TERMINATORS}]+$")


def split_sentences(text: str) -> List[str]:
    """Split on 。？！ keeping the terminator; blank fragments are dropped."""
    if not text:
        return []
    return [m.group(0).strip() for m in _SENTENCE_RE.finditer(text) if m.group(0).strip()]


def classify_sentence(sentence: str) -> Optional[PrepSection]:
    """Section whose keyword opens the sentence, if any."""
    for section, keywords in SECTION_KEYWORDS.items():
        if sentence.startswith(keywords):
            return section
    return None


def reorganize(text: str, lead_section: Optional[PrepSection] = PrepSection.POINT) -> PrepResult:
    """
    Bucket sentences by PREP role and reassemble them in PREP order.

    Args:
        text: Corrected transcript
        lead_section: Section for an opening sentence with no keyword.
            With None, sentences before the first keyword stay unclassified.

    Returns:
        PrepResult with per-section sentence lists and the reassembled text
    """
    buckets: Dict[PrepSection, List[str]] = {section: [] for section in SECTION_ORDER}
    current = PrepSection.UNCLASSIFIED

    for i, sentence in enumerate(split_sentences(text)):
        section = classify_sentence(sentence)
        if section is not None:
            current = section
        elif i == 0 and lead_section is not None:
            current = lead_section
        buckets[current].append(sentence)

    reassembled = "".join(s for section in SECTION_ORDER for s in buckets[section])
    logger.debug(
        "PREP buckets: " + ", ".join(f"{s.value}={len(buckets[s])}" for s in SECTION_ORDER)
    )
    return PrepResult(
        point=buckets[PrepSection.POINT],
        reason=buckets[PrepSection.REASON],
        example=buckets[PrepSection.EXAMPLE],
        conclusion=buckets[PrepSection.CONCLUSION],
        unclassified=buckets[PrepSection.UNCLASSIFIED],
        text=reassembled,
    )
