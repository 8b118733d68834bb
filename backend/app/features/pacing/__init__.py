"""
Race pacing module.

Usage:
    from app.features.pacing import RacePlanService, TargetDuration

Components:
- engine: per-segment paces and arrival projection
- checkpoints: arrivals at named checkpoints, cut-off margins
- summary: flat/uphill/downhill summary paces
- RacePlanService: everything above for one course and target
"""

from .engine import (
    RACE_START,
    NO_TARGET_CLOCK,
    TargetDuration,
    ComputedSegment,
    average_pace,
    compute_segment_paces,
    compute_elapsed_at_distance,
    compute_arrival_at_distance,
)
from .checkpoints import Checkpoint, assemble_checkpoints
from .summary import RacePace, compute_race_pace
from .service import RacePlan, RacePlanService, normalize_runner_name

__all__ = [
    # Engine
    "RACE_START",
    "NO_TARGET_CLOCK",
    "TargetDuration",
    "ComputedSegment",
    "average_pace",
    "compute_segment_paces",
    "compute_elapsed_at_distance",
    "compute_arrival_at_distance",
    # Checkpoints
    "Checkpoint",
    "assemble_checkpoints",
    # Summary
    "RacePace",
    "compute_race_pace",
    # Service
    "RacePlan",
    "RacePlanService",
    "normalize_runner_name",
]
