"""Response decoding helpers shared by request implementations."""

from __future__ import annotations

import json
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import BadJsonError, NotFoundError, UnexpectedStatusError
from ..core.primitives import ResponseParts

T = TypeVar("T")

# Characters of body shown on each side of a JSON syntax error
CONTEXT_SIZE = 30


def error_context(body: str, lineno: int, colno: int) -> str:
    """Return the part of ``body`` around a one-based line/column position."""
    lines = body.splitlines() or [""]
    line = lines[min(max(lineno, 1), len(lines)) - 1]
    column = colno - 1
    return line[max(column - CONTEXT_SIZE, 0) : column + CONTEXT_SIZE]


def decode_json(body: str, adapter: TypeAdapter[T]) -> T:
    """Parse ``body`` as JSON and validate it with ``adapter``.

    Raises:
        BadJsonError: If the body is not JSON or does not match the schema
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as err:
        raise BadJsonError(
            f"JSON deserializing has failed, this is most likely a bug: {err.msg}",
            context=error_context(body, err.lineno, err.colno),
        ) from err

    try:
        return adapter.validate_python(data)
    except ValidationError as err:
        raise BadJsonError(
            f"JSON deserializing has failed, the API has most likely changed: {err}"
        ) from err


def check_not_found(parts: ResponseParts, codes: tuple[int, ...] = (404,)) -> None:
    """Raise ``NotFoundError`` if the status means the entity does not exist."""
    if parts.status_code in codes:
        raise NotFoundError(status_code=parts.status_code)


def check_status(parts: ResponseParts, expected: tuple[int, ...] = (200,)) -> None:
    """Raise ``UnexpectedStatusError`` unless the status is one of ``expected``."""
    if parts.status_code not in expected:
        raise UnexpectedStatusError(parts.status_code, expected)
