"""
Checkpoint Assembler

Projects arrival times at the course's named checkpoints (start, aid
stations, finish) and compares them with the cut-off times from the
regulations.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.features.course.models import CheckpointSpec, CheckpointType, Course
from app.shared.formatters import format_clock

from .engine import TargetDuration, compute_arrival_at_distance, compute_elapsed_at_distance


@dataclass(frozen=True)
class Checkpoint:
    """A checkpoint with its projected arrival."""

    spec: CheckpointSpec
    arrival: str  # "HH:MM", "00:00" when no target is set
    elapsed_minutes: float | None = None
    cutoff_clock: str | None = None
    cutoff_margin_minutes: float | None = None  # < 0: projected to miss the cut-off

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def km(self) -> float:
        return self.spec.km

    @property
    def within_cutoff(self) -> bool | None:
        if self.cutoff_margin_minutes is None:
            return None
        return self.cutoff_margin_minutes >= 0


def assemble_checkpoints(course: Course, target: TargetDuration) -> list[Checkpoint]:
    """
    Build checkpoint records for a target time.

    The start checkpoint always shows the race start time; every other
    checkpoint is projected with the point query.
    """
    start_clock = format_clock(course.start_time, 0)
    checkpoints = []

    for spec in course.checkpoints:
        if spec.type == CheckpointType.START:
            arrival = start_clock
            elapsed = 0.0 if target.is_set else None
        else:
            arrival = compute_arrival_at_distance(
                course.segments, target, spec.km, start=course.start_time
            )
            elapsed = compute_elapsed_at_distance(course.segments, target, spec.km)

        cutoff_clock = None
        margin = None
        if spec.cutoff_hours is not None:
            cutoff_minutes = spec.cutoff_hours * 60
            cutoff_clock = format_clock(course.start_time, cutoff_minutes)
            if elapsed is not None:
                margin = cutoff_minutes - elapsed

        checkpoints.append(
            Checkpoint(
                spec=spec,
                arrival=arrival,
                elapsed_minutes=elapsed,
                cutoff_clock=cutoff_clock,
                cutoff_margin_minutes=margin,
            )
        )

    return checkpoints
