"""Delivery analysis package for the interview coach.

This module exports the main delivery components:
- analyze_frame / analyze_samples: per-tick (volume, pitch) extraction
- segment_pauses: silence-run counting over a volume series
- scale / score_pause_rate: 1-5 score normalization
- score_delivery: four-axis delivery report (primary entry point)
"""

from .models import Frame, PauseStats, DeliveryReport
from .frame_analyzer import analyze_frame, analyze_samples, magnitude_spectrum
from .pauses import count_pauses, segment_pauses
from .scoring import scale, score_pause_rate
from .delivery import score_delivery

__all__ = [
    "Frame",
    "PauseStats",
    "DeliveryReport",
    "analyze_frame",
    "analyze_samples",
    "magnitude_spectrum",
    "count_pauses",
    "segment_pauses",
    "scale",
    "score_pause_rate",
    "score_delivery",
]
