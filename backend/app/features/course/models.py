"""Course data models (dataclasses, no DB dependency).

A course is authored data: an ordered, contiguous list of segments plus
the named checkpoints, elevation profile and regulations shown next to the
plan. Everything is validated once, when the Course is built, so the pacing
engine never has to defend against malformed data per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Sequence


class CourseError(Exception):
    """Base course error."""
    pass


class CourseValidationError(CourseError):
    """Course data violates the segment/checkpoint invariants."""
    pass


class CheckpointType(str, Enum):
    START = "start"
    AID = "aid"
    LANDMARK = "landmark"
    FINISH = "finish"


@dataclass(frozen=True)
class Segment:
    """A contiguous stretch of the course with its own difficulty."""

    id: int
    name: str
    start_km: float
    end_km: float
    terrain_factor: float  # 1.0 = avg, >1.0 = slower, <1.0 = faster
    terrain: str = ""  # "Montaña", "Arena", ...
    elevation: str = ""  # "+600m"
    strategy: str = ""
    color: str = ""

    @property
    def distance_km(self) -> float:
        return self.end_km - self.start_km


@dataclass(frozen=True)
class CheckpointSpec:
    """A named point at a fixed distance (start, aid station, finish)."""

    name: str
    km: float
    type: CheckpointType = CheckpointType.AID
    desc: str | None = None
    cutoff_hours: float | None = None  # Elapsed time limit, from regulations


@dataclass(frozen=True)
class ElevationPoint:
    km: float
    altitude: float
    label: str | None = None
    terrain: str | None = None


@dataclass(frozen=True)
class RegulationItem:
    item: str
    desc: str


@dataclass(frozen=True)
class Regulations:
    """Official rules: mandatory gear, cut-off times, aid-station contents."""

    gear: tuple[RegulationItem, ...] = ()
    times: tuple[RegulationItem, ...] = ()
    aid: tuple[RegulationItem, ...] = ()
    note: str | None = None


@dataclass(frozen=True)
class Course:
    """A race course. Total distance is derived from its segments."""

    id: str
    name: str
    segments: tuple[Segment, ...]
    location: str | None = None
    start_time: time = time(6, 0)
    checkpoints: tuple[CheckpointSpec, ...] = ()
    elevation_profile: tuple[ElevationPoint, ...] = ()
    regulations: Regulations = field(default_factory=Regulations)

    def __post_init__(self):
        validate_segments(self.segments)
        total = self.segments[-1].end_km
        for cp in self.checkpoints:
            if not 0 <= cp.km <= total:
                raise CourseValidationError(
                    f"Checkpoint {cp.name!r} at km {cp.km} is outside the course (0-{total})"
                )
            if cp.cutoff_hours is not None and not (
                isinstance(cp.cutoff_hours, (int, float)) and cp.cutoff_hours > 0
            ):
                raise CourseValidationError(
                    f"Checkpoint {cp.name!r}: cutoff_hours must be a positive number, got {cp.cutoff_hours!r}"
                )

    @property
    def total_distance_km(self) -> float:
        return self.segments[-1].end_km


def validate_segments(segments: Sequence[Segment]) -> None:
    """
    Check the segment invariants.

    Segments must be non-empty, start at km 0, be strictly increasing and
    contiguous, have unique ids, and carry a positive terrain factor.

    Raises:
        CourseValidationError: On the first violation found
    """
    if not segments:
        raise CourseValidationError("Course has no segments")

    if segments[0].start_km != 0:
        raise CourseValidationError(
            f"First segment must start at km 0, got {segments[0].start_km}"
        )

    seen_ids: set[int] = set()
    previous: Segment | None = None

    for seg in segments:
        if seg.id in seen_ids:
            raise CourseValidationError(f"Duplicate segment id: {seg.id}")
        seen_ids.add(seg.id)

        if seg.start_km < 0:
            raise CourseValidationError(f"Segment {seg.id}: negative start_km")
        if seg.start_km >= seg.end_km:
            raise CourseValidationError(
                f"Segment {seg.id}: start_km {seg.start_km} >= end_km {seg.end_km}"
            )
        if seg.terrain_factor <= 0:
            raise CourseValidationError(
                f"Segment {seg.id}: terrain_factor must be > 0, got {seg.terrain_factor}"
            )
        if previous is not None and seg.start_km != previous.end_km:
            raise CourseValidationError(
                f"Segment {seg.id} starts at km {seg.start_km} "
                f"but segment {previous.id} ends at km {previous.end_km}"
            )
        previous = seg
