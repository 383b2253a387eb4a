"""HTTP client helper."""

from __future__ import annotations

import aiohttp

from ...config import DEFAULT_TIMEOUT, USER_AGENT


class HTTPClient:
    """Async HTTP client wrapper owning one ``aiohttp.ClientSession``."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers: dict[str, str] = {"User-Agent": USER_AGENT}
        if headers:
            self.headers.update(headers)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
