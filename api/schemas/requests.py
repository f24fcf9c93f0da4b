from typing import List, Optional
from pydantic import BaseModel, Field

from audio.models import Frame
from transcript.models import Suggestion


class ProofreadRequest(BaseModel):
    sentence: Optional[str] = None
    rules: Optional[List[str]] = Field(None, description="Keep only suggestions for these rule tags")


class SuggestionList(BaseModel):
    suggestions: List[Suggestion] = Field(default_factory=list)


class ProofreadResponse(BaseModel):
    result: SuggestionList


class EvaluationRequest(BaseModel):
    transcript: str = ""
    frames: List[Frame] = Field(default_factory=list)
    duration_sec: Optional[float] = Field(None, ge=0, description="Recording length; defaults to frames x tick")
    include_prep: bool = True


class PrepRequest(BaseModel):
    text: str = ""
