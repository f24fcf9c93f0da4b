"""
Interview session context.

Holds the state of one recording: the append-only frame buffer and the
accumulating transcript. One writer appends while recording; `stop()`
seals the session and evaluation reads it afterwards.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from audio.config import DeliveryConfig, config as default_delivery_config
from audio.constants import DEFAULT_SAMPLE_RATE
from audio.frame_analyzer import analyze_frame, analyze_samples
from audio.models import Frame

from .exceptions import SessionSealedError

logger = logging.getLogger(__name__)


@dataclass
class InterviewSession:
    """State accumulated while one answer is recorded."""

    session_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    delivery_config: DeliveryConfig = field(default_factory=lambda: default_delivery_config)
    question: Optional[str] = None

    frames: List[Frame] = field(default_factory=list)
    final_segments: List[str] = field(default_factory=list)
    interim: str = ""

    started_at: float = field(default_factory=time.monotonic)
    stopped_at: Optional[float] = None
    recorded_sec: Optional[float] = None

    @property
    def tick_sec(self) -> float:
        """Seconds per frame; shared with pause segmentation."""
        return self.delivery_config.tick_sec

    @property
    def sealed(self) -> bool:
        return self.stopped_at is not None

    def _check_open(self) -> None:
        if self.sealed:
            raise SessionSealedError("Recording already stopped", self.session_id)

    # --- Frames ---
    def append_frame(self, frame: Frame) -> None:
        """Append one frame in capture order."""
        self._check_open()
        self.frames.append(frame)

    def push_window(
        self,
        samples: Sequence[float],
        spectrum: Optional[Sequence[float]] = None,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
    ) -> Frame:
        """Analyze one tick's audio window and append the resulting frame."""
        self._check_open()
        band = {
            "min_hz": self.delivery_config.voice_min_hz,
            "max_hz": self.delivery_config.voice_max_hz,
        }
        if spectrum is None:
            frame = analyze_samples(samples, sample_rate=sample_rate, **band)
        else:
            frame = analyze_frame(samples, spectrum, sample_rate=sample_rate, **band)
        self.frames.append(frame)
        return frame

    # --- Transcript ---
    def add_final(self, text: str) -> None:
        """Append a finalized recognition result and clear the interim text."""
        self._check_open()
        if text:
            self.final_segments.append(text)
        self.interim = ""

    def set_interim(self, text: str) -> None:
        """Replace the not-yet-final recognition text."""
        self._check_open()
        self.interim = text or ""

    @property
    def final_transcript(self) -> str:
        return "".join(self.final_segments).strip()

    @property
    def transcript(self) -> str:
        """Finalized plus interim text, as shown while recording."""
        return ("".join(self.final_segments) + self.interim).strip()

    # --- Lifecycle ---
    def stop(self, duration_sec: Optional[float] = None) -> None:
        """
        Seal the session; interim text that never became final is dropped.

        Args:
            duration_sec: Recording length measured by the capture side, if known
        """
        if self.sealed:
            return
        self.stopped_at = time.monotonic()
        self.recorded_sec = duration_sec
        self.interim = ""
        logger.info(
            f"Session {self.session_id} stopped: frames={len(self.frames)}, "
            f"chars={len(self.final_transcript)}"
        )

    @property
    def duration_sec(self) -> float:
        """
        Recording length.

        The capture-side length given to `stop()` wins; otherwise derived
        from the frame count, or from the wall clock when there are no frames.
        """
        if self.recorded_sec is not None:
            return self.recorded_sec
        if self.frames:
            return len(self.frames) * self.tick_sec
        end = self.stopped_at if self.stopped_at is not None else time.monotonic()
        return max(0.0, end - self.started_at)
