"""Shared fixtures: the bundled Ultra Helike course and targets."""

import pytest

from app.config import CONTENT_DIR
from app.features.course import CourseCatalog
from app.features.pacing import TargetDuration


@pytest.fixture
def catalog():
    return CourseCatalog(CONTENT_DIR, default_course_id="ultra_helike")


@pytest.fixture
def helike(catalog):
    """Ultra Helike 100 km as shipped in content/courses/."""
    course = catalog.get_course("ultra_helike")
    assert course is not None
    return course


@pytest.fixture
def target_14h():
    return TargetDuration(hours=14, minutes=0)


@pytest.fixture
def no_target():
    return TargetDuration(hours=0, minutes=0)
