"""Pydantic schemas for virtual page definition files."""

from pydantic import BaseModel, Field, StrictBool

from .post import PostSpec


class VirtualPageDefinition(BaseModel):
    """One virtual page: the slug it answers for, its posts and flag overrides."""

    slug: str = Field(..., min_length=1)
    posts: list[PostSpec] = []
    flags: dict[str, StrictBool] = {}

    model_config = {"extra": "forbid"}


class VirtualPagesDocument(BaseModel):
    """Top-level structure of a virtual pages YAML file."""

    virtual_pages: list[VirtualPageDefinition] = []


class VirtualPageSummary(BaseModel):
    """A registered virtual page, as listed by the API."""

    slug: str
    post_count: int
    flags: dict[str, bool]
