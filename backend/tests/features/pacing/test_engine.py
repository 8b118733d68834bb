"""
Tests for the pace / arrival projection engine.

Reference scenario: Ultra Helike, 14h00 target, start 06:00.
Average pace 840 / 100 = 8.4 min/km.
"""

from datetime import time

import pytest

from app.features.course import Segment
from app.features.pacing import (
    NO_TARGET_CLOCK,
    TargetDuration,
    average_pace,
    compute_arrival_at_distance,
    compute_elapsed_at_distance,
    compute_segment_paces,
)


# =============================================================================
# Test TargetDuration
# =============================================================================

class TestTargetDuration:
    """Tests for TargetDuration."""

    def test_total_minutes(self):
        assert TargetDuration(14, 30).total_minutes == 870

    def test_is_set(self):
        assert TargetDuration(14, 0).is_set
        assert TargetDuration(0, 1).is_set
        assert not TargetDuration(0, 0).is_set

    @pytest.mark.parametrize("text,expected", [
        ("14:00", TargetDuration(14, 0)),
        ("14:30", TargetDuration(14, 30)),
        ("14h30", TargetDuration(14, 30)),
        ("14h", TargetDuration(14, 0)),
        ("14", TargetDuration(14, 0)),
        (" 9:05 ", TargetDuration(9, 5)),
    ])
    def test_parse(self, text, expected):
        assert TargetDuration.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "14:xx", "-3"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            TargetDuration.parse(text)

    def test_str(self):
        assert str(TargetDuration(14, 5)) == "14:05"


# =============================================================================
# Test compute_segment_paces
# =============================================================================

class TestComputeSegmentPaces:
    """Per-segment paces and arrivals."""

    def test_average_pace(self, helike, target_14h):
        assert average_pace(helike.segments, target_14h) == pytest.approx(8.4)

    def test_first_segment(self, helike, target_14h):
        first = compute_segment_paces(helike.segments, target_14h)[0]

        assert first.pace_decimal == pytest.approx(7.98)
        assert first.pace == "7:59"
        assert first.duration_minutes == pytest.approx(143.64)
        assert first.elapsed_minutes == pytest.approx(143.64)
        assert first.arrival == "08:24"

    def test_all_segments(self, helike, target_14h):
        result = compute_segment_paces(helike.segments, target_14h)

        assert [cs.pace for cs in result] == ["7:59", "11:20", "9:14", "8:49", "8:24"]
        assert [cs.arrival for cs in result] == ["08:24", "11:36", "15:27", "19:08", "21:14"]

    def test_segments_passed_through_unchanged(self, helike, target_14h):
        result = compute_segment_paces(helike.segments, target_14h)

        assert len(result) == len(helike.segments)
        assert [cs.segment for cs in result] == list(helike.segments)

    def test_durations_sum_to_finish(self, helike, target_14h):
        result = compute_segment_paces(helike.segments, target_14h)
        finish = compute_elapsed_at_distance(helike.segments, target_14h, 100)

        assert sum(cs.duration_minutes for cs in result) == pytest.approx(finish)
        assert result[-1].elapsed_minutes == pytest.approx(finish)

    def test_elapsed_is_non_decreasing(self, helike, target_14h):
        elapsed = [cs.elapsed_minutes for cs in compute_segment_paces(helike.segments, target_14h)]
        assert elapsed == sorted(elapsed)

    def test_no_target(self, helike, no_target):
        result = compute_segment_paces(helike.segments, no_target)

        assert len(result) == 5
        for cs in result:
            assert not cs.is_projected
            assert cs.pace is None
            assert cs.arrival is None
            assert cs.elapsed_minutes is None

    def test_other_start_time(self, helike, target_14h):
        first = compute_segment_paces(helike.segments, target_14h, start=time(7, 0))[0]
        assert first.arrival == "09:24"


# =============================================================================
# Test point queries
# =============================================================================

class TestArrivalAtDistance:
    """Elapsed time and clock time at an arbitrary km."""

    def test_start(self, helike, target_14h):
        assert compute_elapsed_at_distance(helike.segments, target_14h, 0) == 0
        assert compute_arrival_at_distance(helike.segments, target_14h, 0) == "06:00"

    def test_segment_boundary_matches_segment_table(self, helike, target_14h):
        assert compute_elapsed_at_distance(helike.segments, target_14h, 18) == pytest.approx(143.64)
        assert compute_arrival_at_distance(helike.segments, target_14h, 18) == "08:24"

    def test_inside_a_segment(self, helike, target_14h):
        """km 45 = 0-35 (336.42) + 10 km at 9.24."""
        assert compute_elapsed_at_distance(helike.segments, target_14h, 45) == pytest.approx(428.82)
        assert compute_arrival_at_distance(helike.segments, target_14h, 45) == "13:09"

    def test_finish(self, helike, target_14h):
        assert compute_elapsed_at_distance(helike.segments, target_14h, 100) == pytest.approx(913.92)
        assert compute_arrival_at_distance(helike.segments, target_14h, 100) == "21:14"

    def test_monotonic(self, helike, target_14h):
        kms = [0, 5, 17.9, 18, 18.1, 35, 45, 60, 82, 99.5, 100]
        elapsed = [compute_elapsed_at_distance(helike.segments, target_14h, km) for km in kms]
        assert elapsed == sorted(elapsed)

    def test_beyond_finish_clamps(self, helike, target_14h):
        finish = compute_elapsed_at_distance(helike.segments, target_14h, 100)
        assert compute_elapsed_at_distance(helike.segments, target_14h, 150) == pytest.approx(finish)

    def test_negative_km_is_start(self, helike, target_14h):
        assert compute_elapsed_at_distance(helike.segments, target_14h, -5) == 0
        assert compute_arrival_at_distance(helike.segments, target_14h, -5) == "06:00"

    def test_no_target_sentinel(self, helike, no_target):
        assert compute_elapsed_at_distance(helike.segments, no_target, 50) is None
        assert compute_arrival_at_distance(helike.segments, no_target, 50) == NO_TARGET_CLOCK

    def test_idempotent(self, helike, target_14h):
        first = compute_arrival_at_distance(helike.segments, target_14h, 63.2)
        second = compute_arrival_at_distance(helike.segments, target_14h, 63.2)
        assert first == second

    def test_uniform_course(self):
        """Factor 1.0 everywhere: elapsed is exactly avg pace × km."""
        segments = (
            Segment(id=1, name="A", start_km=0, end_km=10, terrain_factor=1.0),
            Segment(id=2, name="B", start_km=10, end_km=20, terrain_factor=1.0),
        )
        target = TargetDuration(2, 0)  # 6 min/km

        assert compute_elapsed_at_distance(segments, target, 15) == pytest.approx(90)
        assert compute_arrival_at_distance(segments, target, 15) == "07:30"
