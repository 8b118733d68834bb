"""API clients for backend communication."""
from typing import Optional

from .base import BaseAPIClient, APIError
from .chat import ChatClient
from .health import HealthClient
from .plan import PlanClient


class APIClient:
    """Unified API client with all sub-clients."""

    def __init__(
        self,
        base_url: str,
        course_id: Optional[str] = None,
        export_timeout: float = 120.0,
    ):
        self.base_url = base_url
        self.plan = PlanClient(base_url, course_id=course_id, export_timeout=export_timeout)
        self.chat = ChatClient(base_url)
        self.health = HealthClient(base_url)

    async def close(self):
        """Close all client sessions."""
        await self.plan.close()
        await self.chat.close()
        await self.health.close()

    async def health_check(self) -> bool:
        return await self.health.check()


__all__ = [
    "APIClient",
    "APIError",
    "BaseAPIClient",
    "ChatClient",
    "HealthClient",
    "PlanClient",
]
