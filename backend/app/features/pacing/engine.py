"""
Pace / Arrival Projection Engine

Turns a target finish time into per-segment paces and wall-clock arrival
estimates over a course's segments.

Model:
    avg_pace = target_minutes / course_distance_km
    segment_pace = avg_pace * segment.terrain_factor

Segment durations are accumulated in order from the race start, so elapsed
time is non-decreasing along the course. All functions are pure: the same
(segments, target, km) always gives the same result.

A target of zero minutes means "no target set": paces are left empty and
point queries return the "00:00" sentinel instead of dividing by zero.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time
from typing import Sequence

from app.features.course.models import Segment
from app.shared.formatters import format_clock, format_pace


RACE_START = time(6, 0)
NO_TARGET_CLOCK = "00:00"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*(?:[:hH]\s*(\d{1,2})?\s*(?:m|min)?)?\s*$")


@dataclass(frozen=True)
class TargetDuration:
    """Runner's goal finishing time."""

    hours: int = 0
    minutes: int = 0

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @property
    def is_set(self) -> bool:
        return self.total_minutes > 0

    @classmethod
    def parse(cls, value: str) -> "TargetDuration":
        """
        Parse '14:00', '14h30', '14h' or '14' (hours).

        Raises:
            ValueError: If the string is not a duration
        """
        match = _DURATION_RE.match(value or "")
        if not match:
            raise ValueError(f"Invalid target time: {value!r}")
        return cls(hours=int(match.group(1)), minutes=int(match.group(2) or 0))

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}"


@dataclass(frozen=True)
class ComputedSegment:
    """
    A segment with its projected pace and arrival.

    All computed fields are None when no target is set.
    """

    segment: Segment
    pace_decimal: float | None = None  # min/km
    pace: str | None = None  # "7:59"
    duration_minutes: float | None = None
    elapsed_minutes: float | None = None  # At the end of this segment
    arrival: str | None = None  # "08:24"

    @property
    def is_projected(self) -> bool:
        return self.pace_decimal is not None


def total_distance_km(segments: Sequence[Segment]) -> float:
    """Course distance, taken from the segments (never hard-coded)."""
    return segments[-1].end_km


def average_pace(segments: Sequence[Segment], target: TargetDuration) -> float | None:
    """Average pace in decimal min/km, or None if no target is set."""
    if not target.is_set:
        return None
    return target.total_minutes / total_distance_km(segments)


def compute_segment_paces(
    segments: Sequence[Segment],
    target: TargetDuration,
    start: time = RACE_START,
) -> list[ComputedSegment]:
    """
    Project pace, duration and arrival for every segment, in order.

    Args:
        segments: Validated, contiguous course segments
        target: Target finishing time
        start: Race start time of day

    Returns:
        One ComputedSegment per input segment, same order. Without a target
        the segments are passed through with empty computed fields.
    """
    avg_pace = average_pace(segments, target)
    if avg_pace is None:
        return [ComputedSegment(segment=seg) for seg in segments]

    result = []
    accumulated = 0.0

    for seg in segments:
        seg_pace = avg_pace * seg.terrain_factor
        duration = seg_pace * seg.distance_km
        accumulated += duration

        result.append(
            ComputedSegment(
                segment=seg,
                pace_decimal=seg_pace,
                pace=format_pace(seg_pace),
                duration_minutes=duration,
                elapsed_minutes=accumulated,
                arrival=format_clock(start, accumulated),
            )
        )

    return result


def compute_elapsed_at_distance(
    segments: Sequence[Segment],
    target: TargetDuration,
    km: float,
) -> float | None:
    """
    Minutes from the start until the runner reaches `km`.

    The segment containing `km` is consumed proportionally, so `km` does not
    need to fall on a boundary. Distances past the finish give the finish
    time; negative distances count as the start.

    Returns:
        Elapsed minutes, or None if no target is set
    """
    avg_pace = average_pace(segments, target)
    if avg_pace is None:
        return None

    accumulated = 0.0
    remaining = max(km, 0.0)

    for seg in segments:
        if remaining <= 0:
            break
        dist_in_seg = min(remaining, seg.distance_km)
        accumulated += dist_in_seg * avg_pace * seg.terrain_factor
        remaining -= dist_in_seg

    return accumulated


def compute_arrival_at_distance(
    segments: Sequence[Segment],
    target: TargetDuration,
    km: float,
    start: time = RACE_START,
) -> str:
    """
    Clock time ('HH:MM') at which the runner reaches `km`.

    Returns:
        Arrival clock time, or "00:00" if no target is set
    """
    elapsed = compute_elapsed_at_distance(segments, target, km)
    if elapsed is None:
        return NO_TARGET_CLOCK
    return format_clock(start, elapsed)
