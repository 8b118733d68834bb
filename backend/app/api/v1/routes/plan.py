"""
Race Plan Routes

Endpoints for per-segment paces, checkpoint arrivals, summary paces and
the PDF itinerary export. Everything is recomputed on each request.
"""

import asyncio
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from app.api.deps import get_catalog, get_course, get_exporter, resolve_course
from app.api.v1.routes.courses import segment_schema
from app.features.course import Course, CourseCatalog
from app.features.export import ExportError, ItineraryExporter
from app.features.pacing import RacePlan, RacePlanService, TargetDuration, compute_race_pace
from app.features.pacing.schemas import (
    ArrivalSchema,
    CheckpointSchema,
    ComputedSegmentSchema,
    ExportRequest,
    RacePaceSchema,
    RacePlanSchema,
    TargetSchema,
)
from app.shared.formatters import format_clock

logger = logging.getLogger(__name__)

router = APIRouter()


def target_params(
    hours: int = Query(default=14, ge=0, le=48),
    minutes: int = Query(default=0, ge=0, le=59),
) -> TargetDuration:
    return TargetDuration(hours=hours, minutes=minutes)


def plan_schema(plan: RacePlan) -> RacePlanSchema:
    course = plan.course
    return RacePlanSchema(
        course_id=course.id,
        course_name=course.name,
        distance_km=course.total_distance_km,
        runner_name=plan.display_name,
        target=TargetSchema(hours=plan.target.hours, minutes=plan.target.minutes),
        target_set=plan.target.is_set,
        start_time=format_clock(course.start_time, 0),
        finish_clock=plan.finish_clock,
        finish_elapsed_minutes=plan.finish_elapsed_minutes,
        segments=[
            ComputedSegmentSchema(
                **segment_schema(cs.segment).model_dump(),
                pace_decimal=cs.pace_decimal,
                pace=cs.pace,
                duration_minutes=cs.duration_minutes,
                elapsed_minutes=cs.elapsed_minutes,
                arrival=cs.arrival,
            )
            for cs in plan.segments
        ],
        checkpoints=[
            CheckpointSchema(
                name=cp.name,
                km=cp.km,
                type=cp.spec.type.value,
                desc=cp.spec.desc,
                arrival=cp.arrival,
                elapsed_minutes=cp.elapsed_minutes,
                cutoff_clock=cp.cutoff_clock,
                cutoff_margin_minutes=cp.cutoff_margin_minutes,
                within_cutoff=cp.within_cutoff,
            )
            for cp in plan.checkpoints
        ],
        paces=RacePaceSchema(**vars(plan.paces)),
    )


@router.get("", response_model=RacePlanSchema)
async def get_plan(
    runner_name: str = Query(default="", max_length=60),
    target: TargetDuration = Depends(target_params),
    course: Course = Depends(get_course),
):
    """
    Full race plan for a target time.

    With a 0:00 target the segments are returned without paces or arrivals.
    """
    plan = RacePlanService(course).build_plan(target, runner_name=runner_name)
    return plan_schema(plan)


@router.get("/arrival", response_model=ArrivalSchema)
async def get_arrival(
    km: float = Query(..., ge=0),
    target: TargetDuration = Depends(target_params),
    course: Course = Depends(get_course),
):
    """Projected clock time at any distance ("00:00" without a target)."""
    arrival, elapsed = RacePlanService(course).arrival_at(target, km)
    return ArrivalSchema(km=km, arrival=arrival, elapsed_minutes=elapsed)


@router.get("/paces", response_model=RacePaceSchema)
async def get_paces(
    target: TargetDuration = Depends(target_params),
    course: Course = Depends(get_course),
):
    """Summary paces: average, flat, uphill, downhill."""
    paces = compute_race_pace(target, course.total_distance_km)
    return RacePaceSchema(**vars(paces))


@router.post("/export")
async def export_plan(
    request: ExportRequest,
    catalog: CourseCatalog = Depends(get_catalog),
    exporter: ItineraryExporter = Depends(get_exporter),
):
    """Download the race plan as an A4 PDF itinerary."""
    course = resolve_course(catalog, request.course_id)
    target = TargetDuration(hours=request.hours, minutes=request.minutes)
    plan = RacePlanService(course).build_plan(target, runner_name=request.runner_name)

    try:
        artifact = await asyncio.to_thread(exporter.export, plan)
    except ExportError as e:
        raise HTTPException(status_code=500, detail=f"Export failed: {e}")

    ascii_name = artifact.filename.encode("ascii", "replace").decode().replace("?", "_")
    disposition = (
        f'attachment; filename="{ascii_name}"; '
        f"filename*=UTF-8''{quote(artifact.filename)}"
    )
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": disposition},
    )
