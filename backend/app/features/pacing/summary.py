"""
Summary pace widget.

General-purpose paces for flat, uphill and downhill running at a target
time. Uses its own fixed heuristic factors, independent of the per-segment
terrain factors in the course.
"""

from dataclasses import dataclass

from app.shared.formatters import format_pace

from .engine import TargetDuration


SUMMARY_DISTANCE_KM = 100.0

# Heuristic factors for terrain
AVG_FACTOR = 1.0
FLAT_FACTOR = 0.95       # Slightly faster than avg
UPHILL_FACTOR = 1.30     # Significantly slower
DOWNHILL_FACTOR = 0.90   # Faster

EMPTY_PACE = "0:00"


@dataclass(frozen=True)
class RacePace:
    avg: str = EMPTY_PACE
    flat: str = EMPTY_PACE
    uphill: str = EMPTY_PACE
    downhill: str = EMPTY_PACE


def compute_race_pace(
    target: TargetDuration,
    distance_km: float = SUMMARY_DISTANCE_KM,
) -> RacePace:
    """
    Average, flat, uphill and downhill paces for a target time.

    Returns:
        RacePace of 'M:SS' strings; all '0:00' when no target is set
    """
    if not target.is_set or distance_km <= 0:
        return RacePace()

    avg_pace = target.total_minutes / distance_km

    return RacePace(
        avg=format_pace(avg_pace * AVG_FACTOR),
        flat=format_pace(avg_pace * FLAT_FACTOR),
        uphill=format_pace(avg_pace * UPHILL_FACTOR),
        downhill=format_pace(avg_pace * DOWNHILL_FACTOR),
    )
