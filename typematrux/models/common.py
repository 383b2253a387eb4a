"""Shared record building blocks."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)

# 12-byte object identifier, hex encoded
ObjectId = Annotated[str, Field(pattern=r"^[0-9a-fA-F]{24}$")]

_URL_ADAPTER = TypeAdapter(AnyUrl)


class Record(BaseModel):
    """Base for API records: immutable, aliased, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Relationships(Record):
    """Whether the current user follows and/or blocked an object."""

    is_subscribed: bool = Field(..., alias="isSubscribed")
    is_blocked: bool = Field(..., alias="isBlocked")


class MaybeUrl(Record):
    """URL from user content.

    Users can put invalid links into their profiles, so a bad URL is kept
    as its raw string together with the parse error instead of failing the
    whole record.
    """

    raw: str
    error: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        try:
            _URL_ADAPTER.validate_python(data)
        except ValidationError as err:
            return {"raw": data, "error": err.errors()[0]["msg"]}
        return {"raw": data}

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.raw
