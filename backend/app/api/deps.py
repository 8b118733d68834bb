"""
Shared API dependencies.

Process-wide singletons (course catalog, chat sessions, exporter), created
lazily and injectable with `app.dependency_overrides` in tests.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException

from app.config import settings
from app.features.chat import ChatSessionStore, GeminiRelay
from app.features.course import Course, CourseCatalog
from app.features.export import ItineraryExporter


@lru_cache
def get_catalog() -> CourseCatalog:
    return CourseCatalog(settings.content_dir, settings.default_course_id)


@lru_cache
def get_chat_store() -> ChatSessionStore:
    relay = GeminiRelay(api_key=settings.gemini_api_key, model=settings.gemini_model)
    return ChatSessionStore(relay, max_strikes=settings.chat_max_strikes)


@lru_cache
def get_exporter() -> ItineraryExporter:
    return ItineraryExporter(dpi=settings.export_dpi)


def resolve_course(catalog: CourseCatalog, course_id: Optional[str]) -> Course:
    """Named course, or the default one. 404 if missing."""
    course = catalog.get_course(course_id) if course_id else catalog.default_course
    if not course:
        raise HTTPException(status_code=404, detail=f"Course not found: {course_id or 'default'}")
    return course


def get_course(
    course_id: Optional[str] = None,
    catalog: CourseCatalog = Depends(get_catalog),
) -> Course:
    """Query-parameter dependency: ?course_id=..."""
    return resolve_course(catalog, course_id)
