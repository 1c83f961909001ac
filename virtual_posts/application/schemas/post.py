"""Pydantic DTOs (Data Transfer Objects) for posts and partial post specifications."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

OpenClosed = Literal["open", "closed"]


class PostSpec(BaseModel):
    """Partial post specification — every field optional.

    Absent (or ``None``) fields are filled in by ``VirtualPosts.add_post``.
    Unknown keys are rejected.
    """

    id: int | None = Field(None, alias="ID", ge=0, strict=True)
    post_author: int | None = Field(None, ge=0, strict=True)
    post_date: datetime | None = Field(None, examples=["2016-05-04 12:00:00"])
    post_date_gmt: datetime | None = None
    post_content: str | None = None
    post_content_filtered: str | None = None
    post_title: str | None = Field(None, examples=["Hello"])
    post_excerpt: str | None = None
    post_status: str | None = None
    post_type: str | None = None
    comment_status: OpenClosed | None = None
    ping_status: OpenClosed | None = None
    post_password: str | None = None
    post_name: str | None = Field(None, examples=["hello"])
    to_ping: str | None = None
    pinged: str | None = None
    post_modified: datetime | None = None
    post_modified_gmt: datetime | None = None
    post_parent: int | None = Field(None, ge=0, strict=True)
    menu_order: int | None = Field(None, strict=True)
    post_mime_type: str | None = None
    guid: str | None = None

    model_config = {"extra": "forbid", "populate_by_name": True}


class PostResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    post_author: int
    post_date: datetime
    post_date_gmt: datetime
    post_content: str
    post_content_filtered: str
    post_title: str
    post_excerpt: str
    post_status: str
    post_type: str
    comment_status: str
    ping_status: str
    post_name: str
    to_ping: str
    pinged: str
    post_modified: datetime
    post_modified_gmt: datetime
    post_parent: int
    menu_order: int
    post_mime_type: str
    guid: str

    model_config = {"from_attributes": True}
