# audio/constants.py
"""Centralized constants for the delivery analysis modules."""

# --- Frame analysis ---
DEFAULT_SAMPLE_RATE = 16000
TICK_MS = 100  # one frame per tick while recording
VOICE_MIN_HZ = 80.0
VOICE_MAX_HZ = 1000.0

# --- Pause segmentation ---
SILENCE_THRESHOLD = 0.02
MIN_PAUSE_FRAMES = 5  # 500 ms at the default tick

# --- Score scale ---
SCORE_MIN = 1
SCORE_MAX = 5
