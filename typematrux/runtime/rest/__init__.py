"""REST runtime abstractions."""

from .aiohttp_executor import SUPPORTED_METHODS, AiohttpExecutor
from .executor import RequestExecutor
from .http_client import HTTPClient

__all__ = [
    "HTTPClient",
    "RequestExecutor",
    "AiohttpExecutor",
    "SUPPORTED_METHODS",
]
