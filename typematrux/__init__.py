"""Typematrux - async client for the Drukarnia API with paginated streams."""

from .clients import DrukarniaClient
from .config import __version__
from .core import (
    FIRST_PAGE,
    BadJsonError,
    BaseUrl,
    BodyDecodeError,
    CannotBeABase,
    ExecutionError,
    ExecutorError,
    HttpMethod,
    MatruxError,
    NotFoundError,
    PageIndex,
    Request,
    ResponseDecodeError,
    ResponseError,
    ResponseParts,
    SendError,
    TransportError,
    UnexpectedStatusError,
    UnknownMethodError,
)
from .runtime import (
    AiohttpExecutor,
    PageSearchStream,
    RequestExecutor,
    SearchStream,
    StreamState,
)

__all__ = [
    "__version__",
    "DrukarniaClient",
    "BaseUrl",
    "PageIndex",
    "FIRST_PAGE",
    "ResponseParts",
    "HttpMethod",
    "Request",
    "RequestExecutor",
    "AiohttpExecutor",
    "PageSearchStream",
    "SearchStream",
    "StreamState",
    "MatruxError",
    "CannotBeABase",
    "TransportError",
    "UnknownMethodError",
    "SendError",
    "BodyDecodeError",
    "ResponseDecodeError",
    "BadJsonError",
    "NotFoundError",
    "UnexpectedStatusError",
    "ExecutorError",
    "ExecutionError",
    "ResponseError",
]
