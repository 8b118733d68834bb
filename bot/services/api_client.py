"""
Backend API Client

Global client instance shared by all handlers.
"""

from config import settings
from services.clients import APIClient, APIError

api_client = APIClient(
    settings.backend_url,
    course_id=settings.course_id,
    export_timeout=settings.export_timeout_s,
)

__all__ = ["api_client", "APIClient", "APIError"]
