"""
Pydantic models for transcript correction and PREP reorganization.
"""

from typing import List, Optional
from enum import Enum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SuggestionRule(str, Enum):
    """Grammar rule a correction suggestion was raised for."""
    RA_NUKI = "ra-nuki"
    I_NUKI = "i-nuki"
    SA_IRE = "sa-ire"
    SA_NUKI = "sa-nuki"
    JODOUSHI = "jodoushi"
    OTHER = "other"


# Rule labels as reported by the proofreading service
_RULE_ALIASES = {
    "ら抜き": SuggestionRule.RA_NUKI,
    "ら抜き言葉": SuggestionRule.RA_NUKI,
    "い抜き": SuggestionRule.I_NUKI,
    "い抜き言葉": SuggestionRule.I_NUKI,
    "さ入れ": SuggestionRule.SA_IRE,
    "さ入れ言葉": SuggestionRule.SA_IRE,
    "さ抜き": SuggestionRule.SA_NUKI,
    "さ抜き言葉": SuggestionRule.SA_NUKI,
    "助動詞": SuggestionRule.JODOUSHI,
}


def parse_rule(raw: object) -> SuggestionRule:
    """Map a service rule label (or a rule tag) onto SuggestionRule."""
    if isinstance(raw, SuggestionRule):
        return raw
    label = str(raw or "").strip()
    try:
        return SuggestionRule(label)
    except ValueError:
        return _RULE_ALIASES.get(label, SuggestionRule.OTHER)


class Suggestion(BaseModel):
    """A proposed edit at a codepoint offset of the original transcript."""
    offset: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    replacement: str = Field(
        "",
        validation_alias=AliasChoices("replacement", "suggestion"),
    )
    rule: SuggestionRule = SuggestionRule.OTHER
    original: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("original", "word"),
    )
    note: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator('rule', mode='before')
    @classmethod
    def validate_rule(cls, v: object) -> SuggestionRule:
        return parse_rule(v)

    @field_validator('replacement', mode='before')
    @classmethod
    def validate_replacement(cls, v: object) -> str:
        return "" if v is None else str(v)


class PatchResult(BaseModel):
    """Outcome of applying a suggestion set to a transcript."""
    text: str
    applied: List[Suggestion] = Field(default_factory=list)
    skipped: List[Suggestion] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class CorrectionSource(str, Enum):
    """Where the corrected transcript came from."""
    SERVICE = "service"
    FALLBACK = "fallback"


class Correction(BaseModel):
    """Corrected transcript plus the grammar messages behind it."""
    text: str
    messages: List[str] = Field(default_factory=list)
    source: CorrectionSource

    model_config = ConfigDict(frozen=True)


class PrepSection(str, Enum):
    """Rhetorical role of a sentence in a PREP answer."""
    POINT = "point"
    REASON = "reason"
    EXAMPLE = "example"
    CONCLUSION = "conclusion"
    UNCLASSIFIED = "unclassified"


class PrepResult(BaseModel):
    """Sentences bucketed by PREP role and the reassembled text."""
    point: List[str] = Field(default_factory=list)
    reason: List[str] = Field(default_factory=list)
    example: List[str] = Field(default_factory=list)
    conclusion: List[str] = Field(default_factory=list)
    unclassified: List[str] = Field(default_factory=list)
    text: str = ""

    model_config = ConfigDict(frozen=True)
