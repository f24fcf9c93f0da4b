# transcript/constants.py
"""Centralized constants for the transcript modules."""

# --- Filler words ---
# Common Japanese fillers, longest variants first
FILLERS_JA = [
    "えーっと", "えーと", "えっと", "ええと",
    "あのー", "そのー", "うーん", "えー",
    "まあ", "なんか",
]

# --- Sentences ---
SENTENCE_TERMINATORS = "。？！"
DEFAULT_TERMINATOR = "。"

# --- Speaking rate (characters per minute) ---
GOOD_RATE_MIN = 280
GOOD_RATE_MAX = 320

# --- Proofreading service ---
MAX_SENTENCE_CHARS = 2000
