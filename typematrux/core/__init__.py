"""Core components."""

from .enums import HttpMethod
from .exceptions import (
    BadJsonError,
    BodyDecodeError,
    CannotBeABase,
    ExecutionError,
    ExecutorError,
    MatruxError,
    NotFoundError,
    ResponseDecodeError,
    ResponseError,
    SendError,
    TransportError,
    UnexpectedStatusError,
    UnknownMethodError,
)
from .primitives import FIRST_PAGE, MAX_PAGE_INDEX, BaseUrl, PageIndex, ResponseParts
from .request import Request

__all__ = [
    "BaseUrl",
    "PageIndex",
    "FIRST_PAGE",
    "MAX_PAGE_INDEX",
    "ResponseParts",
    "HttpMethod",
    "Request",
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
