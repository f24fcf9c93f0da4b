"""
Configuration for delivery (vocal) analysis.

Provides validated, environment-aware thresholds for frame analysis,
pause segmentation and 1-5 score normalization.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import MIN_PAUSE_FRAMES, SILENCE_THRESHOLD, TICK_MS, VOICE_MAX_HZ, VOICE_MIN_HZ


class DeliveryConfig(BaseSettings):
    """Thresholds used to turn a frame buffer into a delivery report."""

    # --- Frame cadence ---
    tick_sec: float = Field(
        default=TICK_MS / 1000.0,
        gt=0.0,
        le=1.0,
        description="Seconds between two frames of the buffer"
    )

    # --- Frame analysis ---
    voice_min_hz: float = Field(
        default=VOICE_MIN_HZ,
        ge=20.0,
        description="Lowest pitch accepted as human voice"
    )

    voice_max_hz: float = Field(
        default=VOICE_MAX_HZ,
        le=4000.0,
        description="Highest pitch accepted as human voice"
    )

    # --- Pause segmentation ---
    silence_threshold: float = Field(
        default=SILENCE_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Frames with volume below this value are silent"
    )

    min_pause_frames: int = Field(
        default=MIN_PAUSE_FRAMES,
        ge=1,
        description="Consecutive silent frames that make up one pause"
    )

    # --- Score bounds (value mapped linearly onto 1..5) ---
    pitch_range_min_hz: float = Field(default=50.0, ge=0.0)
    pitch_range_max_hz: float = Field(default=250.0, gt=0.0)

    volume_min: float = Field(default=0.02, ge=0.0)
    volume_max: float = Field(default=0.10, gt=0.0)

    volume_std_min: float = Field(default=0.01, ge=0.0)
    volume_std_max: float = Field(default=0.05, gt=0.0)

    pause_rate_ideal_min: float = Field(
        default=5.0,
        ge=0.0,
        description="Pauses per minute at which the pause score peaks"
    )

    pause_rate_ideal_max: float = Field(
        default=15.0,
        gt=0.0,
        description="Pauses per minute above which the pause score drops"
    )

    pause_rate_ceiling: float = Field(
        default=30.0,
        gt=0.0,
        description="Pauses per minute where the over-pausing penalty saturates"
    )

    # Validators
    @field_validator('voice_max_hz')
    @classmethod
    def validate_voice_band(cls, v: float, info) -> float:
        """Ensure the voice band is not empty."""
        lo = info.data.get('voice_min_hz', 80.0)
        if v <= lo:
            raise ValueError(f"voice_max_hz ({v}) must be above voice_min_hz ({lo})")
        return v

    @field_validator('pause_rate_ideal_max', 'pause_rate_ceiling')
    @classmethod
    def validate_pause_bands(cls, v: float, info) -> float:
        """Pause bands must be increasing: ideal_min < ideal_max < ceiling."""
        if info.field_name == 'pause_rate_ideal_max':
            lower = info.data.get('pause_rate_ideal_min', 5.0)
        else:
            lower = info.data.get('pause_rate_ideal_max', 15.0)
        if v <= lower:
            raise ValueError(f"{info.field_name} ({v}) must be above {lower}")
        return v

    model_config = SettingsConfigDict(
        env_prefix="DELIVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Default configuration instance
config = DeliveryConfig()
