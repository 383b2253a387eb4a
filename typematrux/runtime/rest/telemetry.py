"""Structured logging for request execution."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_sent(
    *,
    method: str,
    url: str,
    status_code: int,
    latency_ms: float | None = None,
) -> None:
    """Log a completed transport call.

    Args:
        method: HTTP verb
        url: Full request URL
        status_code: Status returned by the server
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "request_sent",
        extra={
            "method": method,
            "url": url,
            "status_code": status_code,
            "latency_ms": latency_ms,
        },
    )


def log_request_failed(
    *,
    method: str,
    url: str,
    stage: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed send.

    Args:
        method: HTTP verb
        url: Full request URL
        stage: "execution" for transport failures, "response" for decode failures
        error_type: Class name of the wrapped error
        error_message: Error message
    """
    logger.warning(
        "request_failed",
        extra={
            "method": method,
            "url": url,
            "stage": stage,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
