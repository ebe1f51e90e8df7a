import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PostMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    title: str
    date: str
    shortDesc: str
    featuredImage: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _convert_date(cls, value):
        # YAML turns unquoted dates into date/datetime objects
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("date")
    @classmethod
    def _check_iso_date(cls, value: str) -> str:
        parse_post_date(value)
        return value


class ParsedDocument(BaseModel):
    attributes: PostMetadata
    body: str


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    readingTime: float
    description: str
    featuredImage: Optional[str] = None


class PostDetail(PostSummary):
    body: str


def parse_post_date(value: str) -> datetime.datetime:
    """Parse an ISO-like date string into a naive UTC datetime.

    Raises ValueError for anything ``datetime.fromisoformat`` rejects.
    """
    parsed = datetime.datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed
