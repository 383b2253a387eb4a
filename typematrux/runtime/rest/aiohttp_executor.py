"""aiohttp-backed request executor."""

from __future__ import annotations

import asyncio

import aiohttp
from yarl import URL

from ...config import DEFAULT_TIMEOUT
from ...core.enums import HttpMethod
from ...core.exceptions import BodyDecodeError, SendError, UnknownMethodError
from ...core.primitives import BaseUrl, ResponseParts
from .executor import RequestExecutor
from .http_client import HTTPClient

SUPPORTED_METHODS = frozenset({HttpMethod.GET, HttpMethod.POST})


class AiohttpExecutor(RequestExecutor):
    """Executor sending requests through a shared ``aiohttp`` session.

    Only GET and POST are supported. The session is created on first use and
    must be released with ``close()`` (or ``async with``).
    """

    def __init__(
        self,
        base: BaseUrl,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(base)
        self._http = HTTPClient(timeout=timeout, headers=headers)

    async def send_inner(self, url: URL, method: HttpMethod) -> ResponseParts:
        if method not in SUPPORTED_METHODS:
            raise UnknownMethodError(method)

        try:
            async with self._http.session.request(method.value, url) as response:
                status = response.status
                try:
                    body = await response.text()
                except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as err:
                    raise BodyDecodeError(f"Error while decoding response: {err}") from err
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise SendError(f"Error while performing request: {err}") from err

        return ResponseParts(status_code=status, body=body)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> AiohttpExecutor:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
