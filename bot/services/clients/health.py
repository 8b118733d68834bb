"""Health check API client."""
import logging

from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class HealthClient(BaseAPIClient):
    """Client for the backend /health endpoint."""

    def __init__(self, base_url: str):
        super().__init__(base_url, timeout=5.0)

    async def check(self) -> bool:
        """Check if backend is healthy."""
        try:
            data = await self._get("/health")
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return False
        return data.get("status") == "healthy"
