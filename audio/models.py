"""
Pydantic models for delivery analysis results.

Provides type-safe, validated data structures for frames and scores.
"""

from typing import List
from pydantic import BaseModel, Field, ConfigDict


class Frame(BaseModel):
    """One periodic (volume, pitch) measurement of a recording."""
    volume: float = Field(..., ge=0.0, le=1.0, description="RMS amplitude")
    pitch: float = Field(..., ge=0.0, description="Dominant frequency in Hz, 0 when unvoiced")

    model_config = ConfigDict(frozen=True)

    @property
    def voiced(self) -> bool:
        return self.pitch > 0


class PauseStats(BaseModel):
    """Pause segmentation over one session's volume series."""
    pause_count: int = Field(..., ge=0)
    total_seconds: float = Field(..., ge=1.0)
    pauses_per_minute: float = Field(..., ge=0.0)

    model_config = ConfigDict(frozen=True)


class DeliveryReport(BaseModel):
    """Four-axis vocal delivery report on a 1-5 scale."""
    intonation: int = Field(..., ge=1, le=5)
    volume: int = Field(..., ge=1, le=5)
    pause: int = Field(..., ge=1, le=5)
    speed_variation: int = Field(..., ge=1, le=5)

    # Raw metrics behind the scores
    pitch_range_hz: float = Field(0.0, ge=0.0)
    mean_volume: float = Field(0.0, ge=0.0)
    volume_std: float = Field(0.0, ge=0.0)
    pause_count: int = Field(0, ge=0)
    pauses_per_minute: float = Field(0.0, ge=0.0)

    # Raw series for display
    volume_series: List[float] = Field(default_factory=list)
    pitch_series: List[float] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
