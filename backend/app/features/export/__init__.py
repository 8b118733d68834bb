"""Itinerary export: race plan rendered to a downloadable A4 PDF."""

from .renderer import ItineraryRenderer, A4_INCHES
from .service import (
    ExportArtifact,
    ExportError,
    ExportState,
    ItineraryExporter,
    encode_pdf,
    export_filename,
    export_itinerary,
    rasterize,
)

__all__ = [
    "ItineraryRenderer",
    "A4_INCHES",
    "ExportArtifact",
    "ExportError",
    "ExportState",
    "ItineraryExporter",
    "encode_pdf",
    "export_filename",
    "export_itinerary",
    "rasterize",
]
