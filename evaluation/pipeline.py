"""
Evaluation pipeline for one recorded interview answer.

Runs once per session, after the frame buffer is sealed:
1. no-speech check on the finalized transcript
2. delivery scores from the frame buffer
3. filler words and speaking rate from the transcript
4. one proofreading call (or the local fallback) for the corrected transcript
5. optional PREP reorganization of the corrected transcript
"""

import logging
from typing import Optional, Sequence

from audio.config import DeliveryConfig, config as default_delivery_config
from audio.delivery import score_delivery
from audio.models import Frame
from transcript.fillers import compute_speaking_rate, detect_fillers, speaking_rate_label
from transcript.prep import reorganize
from transcript.proofread_client import strip_control_chars
from transcript.proofreading import Proofreader, correct_transcript
from utils.logging import log_execution_time

from .models import EvaluationRecord, EvaluationStatus
from .session import InterviewSession

logger = logging.getLogger(__name__)


@log_execution_time(logger, level=logging.DEBUG)
def evaluate_session(
    session: InterviewSession,
    proofreader: Optional[Proofreader] = None,
    delivery_config: Optional[DeliveryConfig] = None,
    fillers: Optional[Sequence[str]] = None,
    filler_min_count: int = 1,
    include_prep: bool = True,
) -> EvaluationRecord:
    """
    Build the evaluation record for a session.

    Args:
        session: Recording context; sealed here if still open
        proofreader: Correction service; None uses the local fallback
        delivery_config: Delivery thresholds; defaults to the session's own.
            Pauses are always segmented at the session's tick.
        fillers: Filler tokens (defaults to the Japanese list)
        filler_min_count: Minimum occurrences for a filler to be reported
        include_prep: Attach the PREP reorganization of the corrected text

    Returns:
        EvaluationRecord; status NO_SPEECH when nothing was transcribed
    """
    if not session.sealed:
        session.stop()

    transcript = strip_control_chars(session.final_transcript)
    if not transcript.strip():
        logger.info(f"Session {session.session_id}: no speech detected, skipping scoring")
        return EvaluationRecord.no_speech()

    cfg = delivery_config or session.delivery_config
    if cfg.tick_sec != session.tick_sec:
        logger.warning(
            f"Session {session.session_id}: delivery tick {cfg.tick_sec}s differs from "
            f"capture tick {session.tick_sec}s, using the capture tick"
        )
        cfg = cfg.model_copy(update={"tick_sec": session.tick_sec})
    delivery = score_delivery(session.frames, cfg)

    filler_words = detect_fillers(transcript, fillers, min_count=filler_min_count)
    rate = compute_speaking_rate(transcript, session.duration_sec)

    correction = correct_transcript(transcript, proofreader, fillers)
    prep = reorganize(correction.text) if include_prep else None

    logger.info(
        f"Session {session.session_id} evaluated: rate={rate}/min, "
        f"fillers={len(filler_words)}, corrections={len(correction.messages)} "
        f"({correction.source.value})"
    )

    return EvaluationRecord(
        status=EvaluationStatus.COMPLETED,
        delivery=delivery,
        filler_words=filler_words,
        speaking_rate=rate,
        speaking_rate_label=speaking_rate_label(rate),
        transcript=transcript,
        corrected_transcript=correction.text,
        grammar_errors=correction.messages,
        correction_source=correction.source,
        prep=prep,
    )


def evaluate_recording(
    transcript: str,
    frames: Sequence[Frame],
    duration_sec: Optional[float] = None,
    delivery_config: Optional[DeliveryConfig] = None,
    **kwargs,
) -> EvaluationRecord:
    """
    Evaluate an already captured answer (transcript + frame buffer).

    `duration_sec` overrides the frame-derived recording length used for the
    speaking rate. The frames are taken to be `delivery_config.tick_sec` apart.
    Remaining keyword arguments go to `evaluate_session`.
    """
    session = InterviewSession(delivery_config=delivery_config or default_delivery_config)
    for frame in frames:
        session.append_frame(frame)
    session.add_final(transcript or "")
    session.stop(duration_sec=duration_sec)
    return evaluate_session(session, **kwargs)
