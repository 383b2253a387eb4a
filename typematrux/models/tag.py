"""Tag records."""

from datetime import datetime

from pydantic import Field

from .common import ObjectId, Record


class UserTag(Record):
    """Tag as listed on a user profile or feed article."""

    id: ObjectId = Field(..., alias="_id")
    name: str
    slug: str


class PopularTag(UserTag):
    """Currently popular tag."""

    mentions_num: int = Field(..., ge=0, alias="mentionsNum")


class ArticleTag(PopularTag):
    """Tag attached to a full article."""

    created_at: datetime = Field(..., alias="createdAt")
    default: bool = False
    ignore: bool = False
