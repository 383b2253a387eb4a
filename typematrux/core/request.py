"""Request contract.

A request describes *what* one API operation is: where it lives, which verb
it uses, which query it carries and how its response is decoded. *How* it is
sent is the executor's business (see ``typematrux.runtime.rest.executor``).

Every concrete request in ``typematrux.requests`` implements this protocol.
They share the contract only, there is no common base class.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

from .enums import HttpMethod
from .primitives import ResponseParts

ResponseT_co = TypeVar("ResponseT_co", covariant=True)


@runtime_checkable
class Request(Protocol[ResponseT_co]):
    """One API operation.

    Implementations must be side-effect free: ``RequestExecutor.send`` may
    call each method once per send, in any order.
    """

    def endpoint(self) -> Iterable[str]:
        """Path segments to append to the base URL, in order.

        Segments must be non-empty and must not contain "/".
        """
        ...

    def method(self) -> HttpMethod | str:
        """HTTP verb of the operation.

        A verb outside ``HttpMethod`` fails the send with ``ExecutionError``
        wrapping ``UnknownMethodError``.
        """
        ...

    def query_params(self) -> Iterable[tuple[str, str]]:
        """Query pairs in order. Duplicate names are allowed."""
        ...

    def generate_response(self, parts: ResponseParts) -> ResponseT_co:
        """Decode the response.

        Status codes are not checked beforehand, so this is where a request
        maps e.g. 404 to ``NotFoundError``.

        Raises:
            ResponseDecodeError: If the response cannot be interpreted
        """
        ...
