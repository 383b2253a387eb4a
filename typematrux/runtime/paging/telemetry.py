"""Structured logging for page streams."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(*, page_index: int, items: int) -> None:
    """Log a non-empty page delivered by a stream.

    Args:
        page_index: One-based index of the page
        items: Number of items on the page
    """
    logger.debug(
        "page_fetched",
        extra={
            "page_index": page_index,
            "items": items,
        },
    )


def log_stream_exhausted(*, page_index: int) -> None:
    """Log natural end of results.

    Args:
        page_index: Index of the empty page that ended the stream
    """
    logger.debug(
        "page_stream_exhausted",
        extra={
            "page_index": page_index,
        },
    )


def log_stream_errored(
    *,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log the error that terminated a stream.

    Args:
        page_index: Index of the page that failed
        error_type: Class name of the error
        error_message: Error message
    """
    logger.warning(
        "page_stream_errored",
        extra={
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
