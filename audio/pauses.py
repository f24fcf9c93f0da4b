"""
Pause segmentation over a session's volume series.
"""

import logging
from typing import Sequence

from .constants import MIN_PAUSE_FRAMES, SILENCE_THRESHOLD, TICK_MS
from .models import PauseStats

logger = logging.getLogger(__name__)


def count_pauses(
    volumes: Sequence[float],
    threshold: float = SILENCE_THRESHOLD,
    min_frames: int = MIN_PAUSE_FRAMES,
) -> int:
    """
    Count runs of at least `min_frames` consecutive silent frames.

    A frame is silent when its volume is below `threshold`. A run still open
    at the end of the series counts as well.
    """
    pauses = 0
    run = 0
    for v in volumes:
        if v < threshold:
            run += 1
            continue
        if run >= min_frames:
            pauses += 1
        run = 0
    if run >= min_frames:
        pauses += 1
    return pauses


def segment_pauses(
    volumes: Sequence[float],
    threshold: float = SILENCE_THRESHOLD,
    min_frames: int = MIN_PAUSE_FRAMES,
    tick_sec: float = TICK_MS / 1000.0,
) -> PauseStats:
    """
    Pause count and pauses-per-minute for a volume series.

    Args:
        volumes: Volume of each frame, in capture order
        threshold: Silence threshold
        min_frames: Minimum consecutive silent frames for one pause
        tick_sec: Seconds per frame

    Returns:
        PauseStats; total seconds is floored at 1 so an empty series gives 0/min
    """
    pause_count = count_pauses(volumes, threshold=threshold, min_frames=min_frames)
    total_seconds = max(1.0, len(volumes) * tick_sec)
    ppm = pause_count / total_seconds * 60.0
    logger.debug(f"Pauses: count={pause_count}, seconds={total_seconds:.1f}, per_min={ppm:.2f}")
    return PauseStats(
        pause_count=pause_count,
        total_seconds=total_seconds,
        pauses_per_minute=ppm,
    )
