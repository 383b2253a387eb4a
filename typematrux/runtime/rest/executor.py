"""Request executor abstraction.

Architecture:
    ``RequestExecutor`` is the single place where a ``Request`` meets the
    network. ``send`` is written once here; transports only implement
    ``send_inner``, which turns a finished URL and a verb into
    ``ResponseParts``.

    send(request):
        1. copy the base URL
        2. append ``request.endpoint()`` segments
        3. append ``request.query_params()`` pairs, duplicates kept
        4. ``send_inner(url, method)``            -> ExecutionError on failure
        5. ``request.generate_response(parts)``   -> ResponseError on failure

Design Decisions:
    - One network call per send: no retries, no caching
    - Status codes pass through: only ``generate_response`` interprets them
    - Two error classes: callers may retry ``ExecutionError`` but retrying a
      ``ResponseError`` reproduces the same result
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from time import perf_counter
from typing import TypeVar

from yarl import URL

from ...core.enums import HttpMethod
from ...core.exceptions import (
    ExecutionError,
    ResponseDecodeError,
    ResponseError,
    TransportError,
    UnknownMethodError,
)
from ...core.primitives import BaseUrl, ResponseParts
from ...core.request import Request
from .telemetry import log_request_failed, log_request_sent

ResponseT = TypeVar("ResponseT")
ExecutorT = TypeVar("ExecutorT", bound="RequestExecutor")


class RequestExecutor(ABC):
    """Low-level request executor, created from a base site URL."""

    def __init__(self, base: BaseUrl) -> None:
        self._base = base

    @classmethod
    def create(cls: type[ExecutorT], base: BaseUrl) -> ExecutorT:
        """Create an executor for ``base``.

        Subclasses that validate the site on creation raise their own error
        here. The default never fails.
        """
        return cls(base)

    @property
    def base_url(self) -> BaseUrl:
        return self._base

    @abstractmethod
    async def send_inner(self, url: URL, method: HttpMethod) -> ResponseParts:
        """Perform the network call.

        Raises:
            TransportError: If the call cannot be performed
        """

    async def send(self, request: Request[ResponseT]) -> ResponseT:
        """Execute ``request`` and decode its response.

        Raises:
            ExecutionError: Transport failure, wraps a ``TransportError``
            ResponseError: Decode failure, wraps a ``ResponseDecodeError``
            ValueError: If the request declares an invalid path segment
        """
        url = self._base.join(request.endpoint(), request.query_params())
        verb = request.method()
        try:
            method = HttpMethod(verb)
        except ValueError:
            unknown = UnknownMethodError(verb)
            log_request_failed(
                method=str(verb),
                url=str(url),
                stage="execution",
                error_type=type(unknown).__name__,
                error_message=str(unknown),
            )
            raise ExecutionError(unknown) from unknown

        start = perf_counter()
        try:
            parts = await self.send_inner(url, method)
        except TransportError as err:
            log_request_failed(
                method=method.value,
                url=str(url),
                stage="execution",
                error_type=type(err).__name__,
                error_message=str(err),
            )
            raise ExecutionError(err) from err
        log_request_sent(
            method=method.value,
            url=str(url),
            status_code=parts.status_code,
            latency_ms=(perf_counter() - start) * 1000.0,
        )

        try:
            return request.generate_response(parts)
        except ResponseDecodeError as err:
            log_request_failed(
                method=method.value,
                url=str(url),
                stage="response",
                error_type=type(err).__name__,
                error_message=str(err),
            )
            raise ResponseError(err) from err
