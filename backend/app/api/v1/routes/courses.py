"""
Course Routes

Endpoints for the course catalog: segments, checkpoints, elevation
profile and regulations.
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_catalog, resolve_course
from app.features.course import Course, CourseCatalog
from app.features.course.schemas import (
    CheckpointSpecSchema,
    CourseSchema,
    CourseSummarySchema,
    ElevationPointSchema,
    RegulationItemSchema,
    RegulationsSchema,
    SegmentSchema,
)
from app.shared.formatters import format_clock

router = APIRouter()


def segment_schema(seg) -> SegmentSchema:
    return SegmentSchema(
        id=seg.id,
        name=seg.name,
        start_km=seg.start_km,
        end_km=seg.end_km,
        distance_km=seg.distance_km,
        terrain=seg.terrain,
        terrain_factor=seg.terrain_factor,
        elevation=seg.elevation,
        strategy=seg.strategy,
        color=seg.color,
    )


def _summary_fields(course: Course) -> dict:
    return dict(
        id=course.id,
        name=course.name,
        location=course.location,
        distance_km=course.total_distance_km,
        start_time=format_clock(course.start_time, 0),
        segment_count=len(course.segments),
    )


@router.get("", response_model=list[CourseSummarySchema])
async def list_courses(catalog: CourseCatalog = Depends(get_catalog)):
    """Get all available courses."""
    return [CourseSummarySchema(**_summary_fields(c)) for c in catalog.courses]


@router.get("/{course_id}", response_model=CourseSchema)
async def get_course_detail(course_id: str, catalog: CourseCatalog = Depends(get_catalog)):
    """Get course details: segments, checkpoints, elevation profile."""
    course = resolve_course(catalog, course_id)

    return CourseSchema(
        **_summary_fields(course),
        segments=[segment_schema(s) for s in course.segments],
        checkpoints=[
            CheckpointSpecSchema(
                name=cp.name,
                km=cp.km,
                type=cp.type.value,
                desc=cp.desc,
                cutoff_hours=cp.cutoff_hours,
            )
            for cp in course.checkpoints
        ],
        elevation_profile=[
            ElevationPointSchema(km=p.km, altitude=p.altitude, label=p.label, terrain=p.terrain)
            for p in course.elevation_profile
        ],
    )


@router.get("/{course_id}/regulations", response_model=RegulationsSchema)
async def get_regulations(course_id: str, catalog: CourseCatalog = Depends(get_catalog)):
    """Get official regulations: mandatory gear, cut-offs, aid stations."""
    regs = resolve_course(catalog, course_id).regulations

    def items(rows):
        return [RegulationItemSchema(item=r.item, desc=r.desc) for r in rows]

    return RegulationsSchema(
        gear=items(regs.gear),
        times=items(regs.times),
        aid=items(regs.aid),
        note=regs.note,
    )
