"""Evaluation and PREP endpoints for recorded interview answers."""
import logging
from fastapi import APIRouter, Request

from api.dependencies import check_rate_limit, get_proofreader, get_settings
from api.schemas.requests import EvaluationRequest, PrepRequest
from evaluation.models import EvaluationRecord
from evaluation.pipeline import evaluate_recording
from transcript.models import PrepResult
from transcript.prep import reorganize
from transcript.proofread_client import strip_control_chars

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Evaluation"])


@router.post("/v1/evaluation", response_model=EvaluationRecord)
def evaluate(body: EvaluationRequest, request: Request):
    """
    Score a captured answer.

    Only answers that reach the proofreading service count against the
    caller's correction quota; no-speech answers and local fallbacks are free.
    """
    if not strip_control_chars(body.transcript or "").strip():
        return EvaluationRecord.no_speech()

    proofreader = get_proofreader(request)
    if proofreader is not None:
        limited = check_rate_limit(request)
        if limited is not None:
            return limited

    settings = get_settings(request)
    return evaluate_recording(
        body.transcript,
        body.frames,
        duration_sec=body.duration_sec,
        proofreader=proofreader,
        filler_min_count=settings.FILLER_MIN_COUNT,
        include_prep=body.include_prep and settings.INCLUDE_PREP,
    )


@router.post("/v1/prep", response_model=PrepResult)
def prep(body: PrepRequest):
    """Reorganize an answer into Point / Reason / Example / Conclusion order."""
    return reorganize(body.text)
