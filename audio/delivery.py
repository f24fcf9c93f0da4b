"""
Delivery scoring over a sealed frame buffer.

Combines frame statistics, pause segmentation and score normalization into
a four-axis DeliveryReport (intonation, volume, pause, speed variation).
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .config import DeliveryConfig, config as default_config
from .constants import SCORE_MIN
from .models import DeliveryReport, Frame
from .pauses import segment_pauses
from .scoring import scale, score_pause_rate

logger = logging.getLogger(__name__)

# Metrics computed from fewer points than this score the minimum.
MIN_DATA_POINTS = 2


def pitch_range_hz(pitches: Sequence[float]) -> float:
    """Max minus min of voiced pitches (0 when fewer than two)."""
    voiced = [p for p in pitches if p > 0]
    if len(voiced) < MIN_DATA_POINTS:
        return 0.0
    return float(max(voiced) - min(voiced))


def score_delivery(
    frames: Sequence[Frame],
    cfg: Optional[DeliveryConfig] = None,
) -> DeliveryReport:
    """
    Score a session's frames on the four delivery axes.

    Args:
        frames: Frame buffer in capture order (not modified)
        cfg: Thresholds; defaults to the environment-derived DeliveryConfig

    Returns:
        DeliveryReport with 1-5 scores, raw metrics and the raw series
    """
    cfg = cfg or default_config

    volumes = [f.volume for f in frames]
    pitches = [f.pitch for f in frames]
    voiced_volumes = np.asarray([f.volume for f in frames if f.voiced], dtype=np.float64)
    enough_voiced = voiced_volumes.size >= MIN_DATA_POINTS

    # Intonation: spread of the voiced pitch contour
    p_range = pitch_range_hz(pitches)
    intonation = (
        scale(p_range, cfg.pitch_range_min_hz, cfg.pitch_range_max_hz)
        if enough_voiced else SCORE_MIN
    )

    # Volume: mean loudness while voicing
    mean_volume = float(np.mean(voiced_volumes)) if enough_voiced else 0.0
    volume = scale(mean_volume, cfg.volume_min, cfg.volume_max) if enough_voiced else SCORE_MIN

    # Speed variation: loudness spread while voicing
    volume_std = float(np.std(voiced_volumes)) if enough_voiced else 0.0
    speed_variation = (
        scale(volume_std, cfg.volume_std_min, cfg.volume_std_max)
        if enough_voiced else SCORE_MIN
    )

    # Pause: banded pauses per minute
    stats = segment_pauses(
        volumes,
        threshold=cfg.silence_threshold,
        min_frames=cfg.min_pause_frames,
        tick_sec=cfg.tick_sec,
    )
    if len(volumes) < MIN_DATA_POINTS:
        pause = SCORE_MIN
    else:
        pause = score_pause_rate(
            stats.pauses_per_minute,
            ideal_min=cfg.pause_rate_ideal_min,
            ideal_max=cfg.pause_rate_ideal_max,
            ceiling=cfg.pause_rate_ceiling,
        )

    logger.debug(
        f"Delivery: frames={len(frames)}, voiced={voiced_volumes.size}, "
        f"pitch_range={p_range:.1f}Hz, mean_vol={mean_volume:.3f}, "
        f"vol_std={volume_std:.3f}, pauses/min={stats.pauses_per_minute:.2f}"
    )

    return DeliveryReport(
        intonation=intonation,
        volume=volume,
        pause=pause,
        speed_variation=speed_variation,
        pitch_range_hz=p_range,
        mean_volume=mean_volume,
        volume_std=volume_std,
        pause_count=stats.pause_count,
        pauses_per_minute=stats.pauses_per_minute,
        volume_series=volumes,
        pitch_series=pitches,
    )
