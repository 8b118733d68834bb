"""
Race Plan Service

Assembles everything the dashboard and the itinerary export show for one
target time: segment table, checkpoints and summary paces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.features.course.models import Course

from .checkpoints import Checkpoint, assemble_checkpoints
from .engine import (
    ComputedSegment,
    NO_TARGET_CLOCK,
    TargetDuration,
    compute_arrival_at_distance,
    compute_elapsed_at_distance,
    compute_segment_paces,
)
from .summary import RacePace, compute_race_pace

logger = logging.getLogger(__name__)

DEFAULT_RUNNER_NAME = "PRO"


def normalize_runner_name(name: str | None) -> str:
    """Runner names are displayed upper-cased."""
    return (name or "").strip().upper()


@dataclass(frozen=True)
class RacePlan:
    """Derived race plan. Rebuilt from scratch on every target change."""

    course: Course
    target: TargetDuration
    runner_name: str = ""
    segments: list[ComputedSegment] = field(default_factory=list)
    checkpoints: list[Checkpoint] = field(default_factory=list)
    paces: RacePace = field(default_factory=RacePace)
    finish_clock: str = NO_TARGET_CLOCK
    finish_elapsed_minutes: float | None = None

    @property
    def display_name(self) -> str:
        return self.runner_name or DEFAULT_RUNNER_NAME


class RacePlanService:
    """
    Builds race plans for one course.

    Example:
        service = RacePlanService(course)
        plan = service.build_plan(TargetDuration(14, 0), runner_name="ana")
        plan.segments[0].pace   # '7:59'
        plan.checkpoints[1].arrival  # '08:24'
    """

    def __init__(self, course: Course):
        self.course = course

    def build_plan(self, target: TargetDuration, runner_name: str | None = None) -> RacePlan:
        course = self.course
        total_km = course.total_distance_km

        plan = RacePlan(
            course=course,
            target=target,
            runner_name=normalize_runner_name(runner_name),
            segments=compute_segment_paces(course.segments, target, start=course.start_time),
            checkpoints=assemble_checkpoints(course, target),
            paces=compute_race_pace(target, total_km),
            finish_clock=compute_arrival_at_distance(
                course.segments, target, total_km, start=course.start_time
            ),
            finish_elapsed_minutes=compute_elapsed_at_distance(course.segments, target, total_km),
        )

        logger.debug(
            f"Plan for {course.id} target={target} finish={plan.finish_clock}"
        )
        return plan

    def arrival_at(self, target: TargetDuration, km: float) -> tuple[str, float | None]:
        """Arrival clock time and elapsed minutes at an arbitrary distance."""
        course = self.course
        return (
            compute_arrival_at_distance(course.segments, target, km, start=course.start_time),
            compute_elapsed_at_distance(course.segments, target, km),
        )
