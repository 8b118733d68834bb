"""
Itinerary Export

Pipeline:
1. Mark the export as running
2. Render the itinerary figure and rasterize it at 2x the base DPI
3. Slice the raster into A4 portrait pages and write them as a PDF
4. Hand back the bytes and a download filename
5. Always clear the running flag, even if rendering failed
"""

from __future__ import annotations

import io
import logging
import re
import threading
from contextlib import contextmanager
from dataclasses import dataclass

import numpy as np
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure
from matplotlib.image import imread

from app.features.pacing.service import RacePlan

from .renderer import A4_INCHES, ItineraryRenderer

logger = logging.getLogger(__name__)

RASTER_SCALE = 2
PDF_MEDIA_TYPE = "application/pdf"


class ExportError(Exception):
    """Itinerary could not be rendered or encoded."""
    pass


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: bytes
    pages: int
    media_type: str = PDF_MEDIA_TYPE


class ExportState:
    """
    Counts exports in progress.

    One exporter serves concurrent requests from worker threads, so the
    flag is a lock-guarded counter: it stays set until the last export ends.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._active = 0

    @property
    def active(self) -> int:
        with self._lock:
            return self._active

    @property
    def exporting(self) -> bool:
        return self.active > 0

    @contextmanager
    def running(self):
        with self._lock:
            self._active += 1
        try:
            yield
        finally:
            with self._lock:
                self._active -= 1


def export_filename(plan: RacePlan) -> str:
    """'RacePlan_UltraHelike_<NAME or PRO>.pdf'."""
    race = re.sub(r"\W+", "", plan.course.name)
    runner = re.sub(r"[^\w-]+", "_", plan.display_name).strip("_") or "PRO"
    return f"RacePlan_{race}_{runner}.pdf"


def rasterize(fig, dpi: int) -> np.ndarray:
    """Render a figure to an RGBA pixel array."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, facecolor="white")
    buf.seek(0)
    return imread(buf, format="png")


def encode_pdf(image: np.ndarray, page_size: tuple[float, float] = A4_INCHES) -> tuple[bytes, int]:
    """
    Lay a raster image out on fixed-size pages, top to bottom.

    The image is scaled to the page width; anything taller than one page
    continues on the next.

    Returns:
        (pdf bytes, page count)
    """
    height_px, width_px = image.shape[:2]
    page_w, page_h = page_size
    page_height_px = max(1, round(width_px * page_h / page_w))

    buf = io.BytesIO()
    pages = 0
    with PdfPages(buf) as pdf:
        for top in range(0, height_px, page_height_px):
            chunk = image[top:top + page_height_px]
            fig = Figure(figsize=page_size)
            ax = fig.add_axes([0, 0, 1, 1])
            ax.axis("off")
            ax.set_xlim(0, width_px)
            ax.set_ylim(page_height_px, 0)
            ax.imshow(
                chunk,
                extent=(0, width_px, chunk.shape[0], 0),
                interpolation="none",
            )
            pdf.savefig(fig)
            pages += 1

    return buf.getvalue(), pages


class ItineraryExporter:
    """
    Produces the downloadable PDF itinerary for a race plan.

    Example:
        exporter = ItineraryExporter(dpi=100)
        artifact = exporter.export(plan)
        Path(artifact.filename).write_bytes(artifact.content)
    """

    def __init__(
        self,
        dpi: int = 100,
        renderer: ItineraryRenderer | None = None,
        state: ExportState | None = None,
    ):
        self.dpi = dpi
        self.renderer = renderer or ItineraryRenderer()
        self.state = state or ExportState()

    def export(self, plan: RacePlan) -> ExportArtifact:
        """
        Raises:
            ExportError: Rendering, rasterizing or PDF encoding failed
        """
        filename = export_filename(plan)

        with self.state.running():
            try:
                fig = self.renderer.render(plan)
                image = rasterize(fig, self.dpi * RASTER_SCALE)
                content, pages = encode_pdf(image)
            except Exception as e:
                logger.error(f"Export failed for {filename}: {e}")
                raise ExportError(str(e)) from e

        logger.info(f"Exported {filename} ({pages} page(s), {len(content)} bytes)")
        return ExportArtifact(filename=filename, content=content, pages=pages)


def export_itinerary(plan: RacePlan, dpi: int = 100) -> ExportArtifact:
    """One-shot export with a fresh exporter."""
    return ItineraryExporter(dpi=dpi).export(plan)
