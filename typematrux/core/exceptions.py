"""Custom exception hierarchy.

Failures are split by where they happen:

- ``TransportError``: the network call itself failed, or the transport
  refused the request (e.g. an unsupported HTTP method).
- ``ResponseDecodeError``: the call completed but the response could not be
  interpreted (schema drift, malformed JSON, a status meaning "not found").
- ``ExecutorError``: what ``RequestExecutor.send`` raises. Its two
  subclasses wrap one of the above so callers can tell them apart without
  inspecting the wrapped error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import HttpMethod


class MatruxError(Exception):
    """Base exception for all library errors."""

    pass


class CannotBeABase(MatruxError, ValueError):
    """URL cannot serve as a base for API requests (relative or hostless)."""

    def __init__(self, url: str) -> None:
        super().__init__(f"URL cannot be used as a base: {url!r}")
        self.url = url


# Transport-level failures


class TransportError(MatruxError):
    """Transport could not perform the request."""

    pass


class UnknownMethodError(TransportError):
    """HTTP method is not supported by the transport."""

    def __init__(self, method: HttpMethod | str) -> None:
        super().__init__(f"Unknown request method: {method}")
        self.method = method


class SendError(TransportError):
    """Error while performing the request."""

    pass


class BodyDecodeError(TransportError):
    """Response body could not be read as text."""

    pass


# Response interpretation failures


class ResponseDecodeError(MatruxError):
    """Response could not be interpreted as the expected result."""

    pass


class BadJsonError(ResponseDecodeError):
    """JSON deserializing has failed.

    This usually means the remote API has changed. ``context`` holds a short
    excerpt of the body around the failing position, when one is known.
    """

    def __init__(self, message: str, context: str | None = None) -> None:
        super().__init__(message)
        self.context = context

    def __str__(self) -> str:
        message = super().__str__()
        if self.context is None:
            return message
        return f"{message} (near: {self.context!r})"


class NotFoundError(ResponseDecodeError):
    """Queried object (user, article, tag, etc) does not exist."""

    def __init__(self, message: str = "Queried object does not exist", status_code: int = 404) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedStatusError(ResponseDecodeError):
    """Response status code is not one the operation accepts."""

    def __init__(self, status_code: int, expected: tuple[int, ...] = (200,)) -> None:
        super().__init__(f"Unexpected status code {status_code}, expected one of {expected}")
        self.status_code = status_code
        self.expected = expected


# Executor wrappers


class ExecutorError(MatruxError):
    """Failure raised by ``RequestExecutor.send``.

    Never raised directly: see ``ExecutionError`` and ``ResponseError``.
    The wrapped error is kept in ``error`` and chained as ``__cause__``.
    """

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


class ExecutionError(ExecutorError):
    """Request execution failed at the transport. Usually worth retrying."""

    pass


class ResponseError(ExecutorError):
    """Response could not be interpreted. Retrying reproduces the same result."""

    pass
