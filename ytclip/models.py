"""Shared data types used across ytclip."""

import math
from dataclasses import dataclass, field
from pathlib import Path

from ytclip.errors import NonPositiveDurationError, SpeedOutOfRangeError
from ytclip.timeparse import parse_time

MIN_SPEED = 0.5
MAX_SPEED = 4.0
UNITY_TOLERANCE = 0.01


@dataclass(frozen=True)
class ClipRange:
    """A validated start/end pair in seconds with ``end > start``."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    @classmethod
    def from_strings(cls, start_time: str, end_time: str) -> "ClipRange":
        return validate_range(parse_time(start_time), parse_time(end_time))


@dataclass
class ClipResult:
    """What a finished clip request produced."""

    output_path: Path
    video_id: str
    title: str
    start: float
    end: float
    speed: float = 1.0
    directives: list[str] = field(default_factory=list)

    @property
    def duration(self) -> float:
        return self.end - self.start


def validate_range(start: float, end: float) -> ClipRange:
    """Raise NonPositiveDurationError unless ``end`` is strictly after ``start``."""
    if end <= start:
        raise NonPositiveDurationError(
            f"End time must be after start time (start={start}s, end={end}s)"
        )
    return ClipRange(start=start, end=end)


def validate_speed(speed: float) -> float:
    if not math.isfinite(speed) or not MIN_SPEED <= speed <= MAX_SPEED:
        raise SpeedOutOfRangeError(
            f"Speed must be between {MIN_SPEED} and {MAX_SPEED} (got {speed})"
        )
    return speed


def is_unity_speed(speed: float) -> bool:
    """True when ``speed`` is within UNITY_TOLERANCE of 1.0, bounds included."""
    # Rounding absorbs float error so 0.99 and 1.01 count as unity.
    return round(abs(speed - 1.0), 9) <= UNITY_TOLERANCE
