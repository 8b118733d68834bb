"""Course feature module: segment model, validation, YAML catalog."""

from .models import (
    CheckpointSpec,
    CheckpointType,
    Course,
    CourseError,
    CourseValidationError,
    ElevationPoint,
    RegulationItem,
    Regulations,
    Segment,
    validate_segments,
)
from .catalog import CourseCatalog, parse_course

__all__ = [
    "CheckpointSpec",
    "CheckpointType",
    "Course",
    "CourseError",
    "CourseValidationError",
    "ElevationPoint",
    "RegulationItem",
    "Regulations",
    "Segment",
    "validate_segments",
    "CourseCatalog",
    "parse_course",
]
