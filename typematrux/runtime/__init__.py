"""Runtime layer: request execution and pagination."""

from .paging import PageSearchStream, SearchStream, StreamState
from .rest import AiohttpExecutor, HTTPClient, RequestExecutor

__all__ = [
    "RequestExecutor",
    "AiohttpExecutor",
    "HTTPClient",
    "PageSearchStream",
    "SearchStream",
    "StreamState",
]
