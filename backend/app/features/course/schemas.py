"""
Course schemas.

Pydantic schemas for API response serialization.
"""

from typing import List, Optional

from pydantic import BaseModel


class SegmentSchema(BaseModel):
    id: int
    name: str
    start_km: float
    end_km: float
    distance_km: float
    terrain: str
    terrain_factor: float
    elevation: str
    strategy: str
    color: str


class CheckpointSpecSchema(BaseModel):
    name: str
    km: float
    type: str
    desc: Optional[str] = None
    cutoff_hours: Optional[float] = None


class ElevationPointSchema(BaseModel):
    km: float
    altitude: float
    label: Optional[str] = None
    terrain: Optional[str] = None


class CourseSummarySchema(BaseModel):
    id: str
    name: str
    location: Optional[str] = None
    distance_km: float
    start_time: str
    segment_count: int


class CourseSchema(CourseSummarySchema):
    segments: List[SegmentSchema] = []
    checkpoints: List[CheckpointSpecSchema] = []
    elevation_profile: List[ElevationPointSchema] = []


class RegulationItemSchema(BaseModel):
    item: str
    desc: str


class RegulationsSchema(BaseModel):
    gear: List[RegulationItemSchema] = []
    times: List[RegulationItemSchema] = []
    aid: List[RegulationItemSchema] = []
    note: Optional[str] = None
