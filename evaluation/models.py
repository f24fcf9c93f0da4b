"""
Pydantic models for the evaluation record handed to presentation/storage.
"""

from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict

from audio.models import DeliveryReport
from transcript.models import CorrectionSource, PrepResult

NO_SPEECH_MESSAGE = "音声が検出されませんでした。もう一度お試しください。"


class EvaluationStatus(str, Enum):
    """Status of a session evaluation."""
    COMPLETED = "completed"
    NO_SPEECH = "no_speech"


class EvaluationRecord(BaseModel):
    """Structured evaluation of one recorded answer."""
    status: EvaluationStatus
    error: Optional[str] = None

    delivery: Optional[DeliveryReport] = None
    filler_words: List[str] = Field(default_factory=list)
    speaking_rate: int = Field(0, ge=0, description="Characters per minute")
    speaking_rate_label: Optional[str] = None

    transcript: str = ""
    corrected_transcript: str = ""
    grammar_errors: List[str] = Field(default_factory=list)
    correction_source: Optional[CorrectionSource] = None

    prep: Optional[PrepResult] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def no_speech(cls) -> "EvaluationRecord":
        return cls(status=EvaluationStatus.NO_SPEECH, error=NO_SPEECH_MESSAGE)
