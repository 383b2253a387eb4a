"""Core enumerations."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs a request may declare.

    Whether a verb can actually be sent is up to the executor.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value
