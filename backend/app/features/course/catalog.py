"""Course catalog loader: reads courses/*.yaml and provides access to courses."""

from __future__ import annotations

import logging
from datetime import time
from pathlib import Path

import yaml

from .models import (
    CheckpointSpec,
    CheckpointType,
    Course,
    CourseError,
    ElevationPoint,
    RegulationItem,
    Regulations,
    Segment,
)

logger = logging.getLogger(__name__)


class CourseCatalog:
    """Loads and provides access to course definitions from YAML."""

    def __init__(self, content_dir: Path, default_course_id: str | None = None):
        self.content_dir = content_dir
        self.default_course_id = default_course_id
        self._courses: list[Course] | None = None

    def load(self) -> list[Course]:
        """Load every course file. Invalid files are logged and skipped."""
        courses_dir = self.content_dir / "courses"
        if not courses_dir.is_dir():
            logger.warning(f"Course directory not found: {courses_dir}")
            self._courses = []
            return []

        courses = []
        for path in sorted(courses_dir.glob("*.yaml")):
            try:
                with open(path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                courses.append(parse_course(data))
            except (yaml.YAMLError, CourseError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Skipping invalid course file {path.name}: {e}")

        logger.info(f"Loaded {len(courses)} course(s) from {courses_dir}")
        self._courses = courses
        return courses

    @property
    def courses(self) -> list[Course]:
        if self._courses is None:
            self.load()
        return self._courses or []

    def get_course(self, course_id: str) -> Course | None:
        return next((c for c in self.courses if c.id == course_id), None)

    @property
    def default_course(self) -> Course | None:
        if self.default_course_id:
            course = self.get_course(self.default_course_id)
            if course:
                return course
        return self.courses[0] if self.courses else None


def parse_course(data: dict) -> Course:
    """Build a validated Course from its YAML mapping."""
    if not isinstance(data, dict):
        raise CourseError("Course file must contain a mapping")

    segments = tuple(
        Segment(
            id=int(s["id"]),
            name=s["name"],
            start_km=float(s["start_km"]),
            end_km=float(s["end_km"]),
            terrain_factor=float(s["terrain_factor"]),
            terrain=s.get("terrain", ""),
            elevation=s.get("elevation", ""),
            strategy=s.get("strategy", ""),
            color=s.get("color", ""),
        )
        for s in data.get("segments", [])
    )
    checkpoints = tuple(
        CheckpointSpec(
            name=c["name"],
            km=float(c["km"]),
            type=CheckpointType(c.get("type", "aid")),
            desc=c.get("desc"),
            cutoff_hours=_optional_float(c.get("cutoff_hours")),
        )
        for c in data.get("checkpoints", [])
    )
    elevation = tuple(
        ElevationPoint(
            km=float(p["km"]),
            altitude=float(p["altitude"]),
            label=p.get("label"),
            terrain=p.get("terrain"),
        )
        for p in data.get("elevation_profile", [])
    )

    return Course(
        id=data["id"],
        name=data["name"],
        location=data.get("location"),
        start_time=_parse_clock(data.get("start_time", "06:00")),
        segments=segments,
        checkpoints=checkpoints,
        elevation_profile=elevation,
        regulations=_parse_regulations(data.get("regulations") or {}),
    )


def _parse_regulations(raw: dict) -> Regulations:
    def items(key: str) -> tuple[RegulationItem, ...]:
        return tuple(
            RegulationItem(item=r["item"], desc=r.get("desc", ""))
            for r in raw.get(key, [])
        )

    return Regulations(
        gear=items("gear"),
        times=items("times"),
        aid=items("aid"),
        note=raw.get("note"),
    )


def _parse_clock(value) -> time:
    """'06:00' → time(6, 0). YAML may also hand over minutes as int (sexagesimal)."""
    if isinstance(value, time):
        return value
    if isinstance(value, int):
        return time(value // 60, value % 60)
    hours, minutes = str(value).split(":")
    return time(int(hours), int(minutes))


def _optional_float(value) -> float | None:
    return None if value is None else float(value)
