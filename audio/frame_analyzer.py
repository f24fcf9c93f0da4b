"""
Per-tick frame analysis.

Turns one window of time-domain samples (and its magnitude spectrum) into a
(volume, pitch) Frame. Pure functions, safe to call once per tick while a
recording is active.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .constants import DEFAULT_SAMPLE_RATE, VOICE_MAX_HZ, VOICE_MIN_HZ
from .models import Frame

logger = logging.getLogger(__name__)


def _rms(x: np.ndarray) -> float:
    if x.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(x), dtype=np.float64)))


def magnitude_spectrum(samples: Sequence[float]) -> np.ndarray:
    """
    Magnitude spectrum of a sample window (real FFT).

    Args:
        samples: Time-domain samples normalized to [-1, 1]

    Returns:
        Array of bin magnitudes; bin i is centered on i * sr / len(samples) Hz
    """
    x = np.asarray(samples, dtype=np.float64)
    if x.size == 0:
        return np.zeros(0)
    return np.abs(np.fft.rfft(x))


def dominant_pitch_hz(
    spectrum: Sequence[float],
    sample_rate: int,
    window_size: int,
    min_hz: float = VOICE_MIN_HZ,
    max_hz: float = VOICE_MAX_HZ,
) -> float:
    """
    Frequency of the strongest spectrum bin, or 0.0 outside the voice band.

    The band check is a hard reject; octave errors are left to the
    aggregation step.
    """
    mags = np.asarray(spectrum, dtype=np.float64)
    if mags.size == 0 or window_size <= 0:
        return 0.0
    peak_bin = int(np.argmax(mags))
    pitch = peak_bin * sample_rate / window_size
    if pitch < min_hz or pitch > max_hz:
        return 0.0
    return float(pitch)


def analyze_frame(
    samples: Sequence[float],
    spectrum: Sequence[float],
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    window_size: Optional[int] = None,
    min_hz: float = VOICE_MIN_HZ,
    max_hz: float = VOICE_MAX_HZ,
) -> Frame:
    """
    Convert one raw audio window into a Frame.

    Args:
        samples: Time-domain samples normalized to [-1, 1]
        spectrum: Magnitude spectrum of the same window
        sample_rate: Sample rate in Hz
        window_size: FFT size used for the spectrum (defaults to len(samples))
        min_hz: Lowest accepted pitch
        max_hz: Highest accepted pitch

    Returns:
        Frame with RMS volume and dominant pitch (0 when unvoiced)
    """
    x = np.asarray(samples, dtype=np.float64)
    volume = min(1.0, _rms(x))
    size = window_size if window_size is not None else x.size
    pitch = dominant_pitch_hz(spectrum, sample_rate, size, min_hz=min_hz, max_hz=max_hz)
    return Frame(volume=volume, pitch=pitch)


def analyze_samples(
    samples: Sequence[float],
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    min_hz: float = VOICE_MIN_HZ,
    max_hz: float = VOICE_MAX_HZ,
) -> Frame:
    """Analyze a window when only the time-domain samples are available."""
    return analyze_frame(
        samples,
        magnitude_spectrum(samples),
        sample_rate=sample_rate,
        min_hz=min_hz,
        max_hz=max_hz,
    )
