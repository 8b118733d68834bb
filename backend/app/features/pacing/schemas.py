"""
Race plan schemas.

Pydantic schemas for API request/response serialization.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from app.features.course.schemas import SegmentSchema


class TargetSchema(BaseModel):
    """Target finishing time."""
    hours: int = Field(default=14, ge=0, le=48)
    minutes: int = Field(default=0, ge=0, le=59)


class ComputedSegmentSchema(SegmentSchema):
    """Segment with projected pace and arrival (empty without a target)."""
    pace_decimal: Optional[float] = None
    pace: Optional[str] = None
    duration_minutes: Optional[float] = None
    elapsed_minutes: Optional[float] = None
    arrival: Optional[str] = None


class CheckpointSchema(BaseModel):
    name: str
    km: float
    type: str
    desc: Optional[str] = None
    arrival: str
    elapsed_minutes: Optional[float] = None
    cutoff_clock: Optional[str] = None
    cutoff_margin_minutes: Optional[float] = None
    within_cutoff: Optional[bool] = None


class RacePaceSchema(BaseModel):
    avg: str
    flat: str
    uphill: str
    downhill: str


class RacePlanSchema(BaseModel):
    course_id: str
    course_name: str
    distance_km: float
    runner_name: str
    target: TargetSchema
    target_set: bool
    start_time: str
    finish_clock: str
    finish_elapsed_minutes: Optional[float] = None
    segments: List[ComputedSegmentSchema] = []
    checkpoints: List[CheckpointSchema] = []
    paces: RacePaceSchema


class ArrivalSchema(BaseModel):
    km: float
    arrival: str
    elapsed_minutes: Optional[float] = None


class ExportRequest(TargetSchema):
    course_id: Optional[str] = None
    runner_name: str = Field(default="", max_length=60)
