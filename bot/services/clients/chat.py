"""Chat API client."""

import logging

from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class ChatClient(BaseAPIClient):
    """Client for /chat endpoints."""

    def __init__(self, base_url: str):
        # Gemini round-trips are slow
        super().__init__(base_url, timeout=90.0)

    async def create_session(self) -> dict:
        """Open a session. Response includes the greeting message."""
        return await self._post("/api/v1/chat/sessions")

    async def get_session(self, session_id: str) -> dict:
        return await self._get(f"/api/v1/chat/sessions/{session_id}")

    async def send(self, session_id: str, text: str) -> dict:
        """
        Send one message.

        Returns:
            {"reply": {...}, "strikes": int, "blocked": bool}

        Raises:
            APIError: 403 blocked, 404 unknown session, 409 busy
        """
        return await self._post(
            f"/api/v1/chat/sessions/{session_id}/messages", json={"message": text}
        )
