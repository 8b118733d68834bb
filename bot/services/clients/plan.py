"""Race plan API client."""

import logging
from typing import Optional

from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class PlanClient(BaseAPIClient):
    """Client for /plan endpoints."""

    def __init__(self, base_url: str, course_id: Optional[str] = None, export_timeout: float = 120.0):
        super().__init__(base_url)
        self.course_id = course_id
        self.export_timeout = export_timeout

    def _params(self, hours: int, minutes: int, **extra) -> dict:
        params = {"hours": hours, "minutes": minutes, **extra}
        if self.course_id:
            params["course_id"] = self.course_id
        return params

    async def get_plan(self, hours: int, minutes: int, runner_name: str = "") -> dict:
        """Full plan: segments, checkpoints, paces."""
        return await self._get(
            "/api/v1/plan", params=self._params(hours, minutes, runner_name=runner_name)
        )

    async def get_paces(self, hours: int, minutes: int) -> dict:
        """Summary paces (avg/flat/uphill/downhill)."""
        return await self._get("/api/v1/plan/paces", params=self._params(hours, minutes))

    async def export_pdf(self, hours: int, minutes: int, runner_name: str = "") -> tuple[bytes, str]:
        """
        Download the PDF itinerary.

        Returns:
            (pdf bytes, filename)
        """
        payload = {"hours": hours, "minutes": minutes, "runner_name": runner_name}
        if self.course_id:
            payload["course_id"] = self.course_id
        return await self._post_bytes(
            "/api/v1/plan/export", json=payload, timeout=self.export_timeout
        )
