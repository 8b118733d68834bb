"""Base API client with common HTTP logic."""
import logging
from typing import Any, Optional

import aiohttp

logger = logging.getLogger(__name__)


class APIError(Exception):
    """API error."""

    def __init__(self, status: int, detail: str):
        self.status = status
        self.detail = detail
        super().__init__(f"API error {status}: {detail}")


class BaseAPIClient:
    """Base class for API clients."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    @staticmethod
    async def _raise_for_status(resp: aiohttp.ClientResponse) -> None:
        if resp.status == 200:
            return
        try:
            data = await resp.json()
            detail = data.get("detail", "Unknown error")
        except (aiohttp.ContentTypeError, ValueError):
            detail = await resp.text() or "Unknown error"
        raise APIError(resp.status, str(detail))

    async def _get(self, path: str, **kwargs) -> Any:
        """Make GET request."""
        session = await self._get_session()
        url = f"{self.base_url}{path}"

        async with session.get(url, **kwargs) as resp:
            await self._raise_for_status(resp)
            return await resp.json()

    async def _post(self, path: str, **kwargs) -> Any:
        """Make POST request."""
        session = await self._get_session()
        url = f"{self.base_url}{path}"

        async with session.post(url, **kwargs) as resp:
            await self._raise_for_status(resp)
            return await resp.json()

    async def _post_bytes(self, path: str, timeout: Optional[float] = None, **kwargs) -> tuple[bytes, str]:
        """
        Make POST request for a binary download.

        Returns:
            (body, filename from Content-Disposition or "")
        """
        session = await self._get_session()
        url = f"{self.base_url}{path}"
        if timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        async with session.post(url, **kwargs) as resp:
            await self._raise_for_status(resp)
            filename = resp.content_disposition.filename if resp.content_disposition else ""
            return await resp.read(), filename or ""

    async def close(self):
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
