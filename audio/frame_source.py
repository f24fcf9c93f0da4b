"""
File-based frame source.

Replays a recorded WAV file as the same tick-by-tick Frame stream a live
recording would produce.
"""

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np
import librosa

from .config import DeliveryConfig, config as default_config
from .constants import DEFAULT_SAMPLE_RATE
from .frame_analyzer import analyze_samples
from .models import Frame

logger = logging.getLogger(__name__)


def load_wav_mono(wav_path: str, sr: int = DEFAULT_SAMPLE_RATE) -> Tuple[np.ndarray, int, float]:
    """
    Load mono PCM resampled to `sr`.

    Args:
        wav_path: Path to WAV file
        sr: Target sample rate

    Returns:
        Tuple of (audio_array, sample_rate, duration_seconds)
    """
    y, sr = librosa.load(wav_path, sr=sr, mono=True)
    dur = len(y) / sr if sr > 0 else 0.0
    return y, sr, dur


def iter_frames(
    y: np.ndarray,
    sr: int,
    tick_sec: Optional[float] = None,
    cfg: Optional[DeliveryConfig] = None,
) -> Iterator[Frame]:
    """Yield one Frame per complete tick window of `y`, inside the configured voice band."""
    cfg = cfg or default_config
    tick_sec = tick_sec or cfg.tick_sec
    hop = int(round(sr * tick_sec))
    if hop <= 0:
        return
    for start in range(0, len(y) - hop + 1, hop):
        yield analyze_samples(
            y[start:start + hop],
            sample_rate=sr,
            min_hz=cfg.voice_min_hz,
            max_hz=cfg.voice_max_hz,
        )


def frames_from_wav(
    wav_path: str,
    tick_sec: Optional[float] = None,
    cfg: Optional[DeliveryConfig] = None,
) -> List[Frame]:
    """
    Build the frame buffer for a recorded answer.

    Args:
        wav_path: Path to WAV file
        tick_sec: Seconds per frame; defaults to cfg.tick_sec
        cfg: Delivery thresholds (tick and voice band)

    Returns:
        Frames in capture order
    """
    y, sr, dur = load_wav_mono(wav_path)
    frames = list(iter_frames(y, sr, tick_sec, cfg))
    logger.info(f"Loaded {len(frames)} frames ({dur:.1f}s) from {wav_path}")
    return frames
