"""
Tests for the checkpoint assembler.

Arrivals at SALIDA / aid stations / META and cut-off margins.
"""

import pytest

from app.features.course import CheckpointSpec, CheckpointType, Course, Segment
from app.features.pacing import TargetDuration, assemble_checkpoints, compute_arrival_at_distance


def by_name(checkpoints):
    return {cp.name: cp for cp in checkpoints}


# =============================================================================
# Test arrivals
# =============================================================================

class TestCheckpointArrivals:
    """Projected arrivals at named checkpoints."""

    def test_one_record_per_checkpoint_in_order(self, helike, target_14h):
        result = assemble_checkpoints(helike, target_14h)
        assert [cp.name for cp in result] == [cp.name for cp in helike.checkpoints]

    def test_start_is_race_start(self, helike, target_14h):
        start = assemble_checkpoints(helike, target_14h)[0]
        assert start.spec.type == CheckpointType.START
        assert start.arrival == "06:00"
        assert start.elapsed_minutes == 0

    def test_start_without_target(self, helike, no_target):
        start = assemble_checkpoints(helike, no_target)[0]
        assert start.arrival == "06:00"
        assert start.elapsed_minutes is None

    def test_matches_point_query(self, helike, target_14h):
        for cp in assemble_checkpoints(helike, target_14h)[1:]:
            assert cp.arrival == compute_arrival_at_distance(helike.segments, target_14h, cp.km)

    def test_expected_clock_times(self, helike, target_14h):
        cps = by_name(assemble_checkpoints(helike, target_14h))

        assert cps["PANTANO"].arrival == "08:24"
        assert cps["MARINA"].arrival == "13:09"
        assert cps["ALTET"].arrival == "16:12"
        assert cps["TORRELLANO"].arrival == "18:41"
        assert cps["META"].arrival == "21:14"

    def test_no_target(self, helike, no_target):
        for cp in assemble_checkpoints(helike, no_target)[1:]:
            assert cp.arrival == "00:00"
            assert cp.elapsed_minutes is None


# =============================================================================
# Test cut-offs
# =============================================================================

class TestCutoffs:
    """Cut-off clock times and margins from the regulations."""

    def test_cutoff_clock(self, helike, target_14h):
        cps = by_name(assemble_checkpoints(helike, target_14h))

        assert cps["PANTANO"].cutoff_clock is None
        assert cps["MARINA"].cutoff_clock == "16:30"
        assert cps["ALTET"].cutoff_clock == "21:30"
        assert cps["TORRELLANO"].cutoff_clock == "01:30"
        assert cps["META"].cutoff_clock == "06:00"

    def test_margins_for_14h(self, helike, target_14h):
        cps = by_name(assemble_checkpoints(helike, target_14h))

        assert cps["MARINA"].cutoff_margin_minutes == pytest.approx(630 - 428.82)
        assert cps["META"].cutoff_margin_minutes == pytest.approx(1440 - 913.92)
        assert all(cp.within_cutoff is not False for cp in cps.values())

    def test_no_cutoff_means_unknown(self, helike, target_14h):
        pantano = by_name(assemble_checkpoints(helike, target_14h))["PANTANO"]
        assert pantano.cutoff_margin_minutes is None
        assert pantano.within_cutoff is None

    def test_slow_target_misses_cutoff(self, helike):
        """24h target: weighted segments finish well past 24h."""
        cps = by_name(assemble_checkpoints(helike, TargetDuration(24, 0)))

        assert cps["META"].cutoff_margin_minutes < 0
        assert cps["META"].within_cutoff is False

    def test_no_target_keeps_cutoff_clock(self, helike, no_target):
        marina = by_name(assemble_checkpoints(helike, no_target))["MARINA"]
        assert marina.cutoff_clock == "16:30"
        assert marina.cutoff_margin_minutes is None

    def test_custom_course(self):
        course = Course(
            id="mini",
            name="Mini",
            segments=(Segment(id=1, name="A", start_km=0, end_km=10, terrain_factor=1.0),),
            checkpoints=(
                CheckpointSpec(name="IN", km=0, type=CheckpointType.START),
                CheckpointSpec(name="OUT", km=10, type=CheckpointType.FINISH, cutoff_hours=1),
            ),
        )
        out = assemble_checkpoints(course, TargetDuration(1, 40))[1]  # 10 min/km

        assert out.arrival == "07:40"
        assert out.cutoff_margin_minutes == pytest.approx(-40)
        assert out.within_cutoff is False
