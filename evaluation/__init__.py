"""Session evaluation package.

- InterviewSession: explicit per-recording context (frame buffer + transcript)
- evaluate_session / evaluate_recording: build the EvaluationRecord
"""

from .exceptions import SessionError, SessionSealedError
from .models import EvaluationRecord, EvaluationStatus
from .session import InterviewSession
from .pipeline import evaluate_recording, evaluate_session

__all__ = [
    "SessionError",
    "SessionSealedError",
    "EvaluationRecord",
    "EvaluationStatus",
    "InterviewSession",
    "evaluate_recording",
    "evaluate_session",
]
