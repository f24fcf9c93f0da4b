"""Proofreading proxy endpoint."""
import logging
from fastapi import APIRouter, Request

from api.dependencies import check_rate_limit, get_proofreader
from api.schemas.requests import ProofreadRequest, ProofreadResponse
from transcript.exceptions import ProofreadConfigurationError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Proofreading"])


@router.post("/api/proofread", response_model=ProofreadResponse)
def proofread(body: ProofreadRequest, request: Request):
    """
    Forward one sentence to the proofreading service.

    Rate-limited per client; failures come back as `{"error": ...}` through
    the proofreading exception handler.
    """
    limited = check_rate_limit(request)
    if limited is not None:
        return limited

    proofreader = get_proofreader(request)
    if proofreader is None:
        raise ProofreadConfigurationError("Proofreading service is not configured on the server.")

    suggestions = proofreader.proofread(body.sentence, rules=body.rules)
    logger.info(f"Proofread {len(body.sentence or '')} chars -> {len(suggestions)} suggestions")
    return {"result": {"suggestions": suggestions}}
