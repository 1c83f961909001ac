"""Pydantic schemas for post query responses."""

from pydantic import BaseModel, Field

from .post import PostResponse


class QueryVarsSchema(BaseModel):
    """Query variables the request was resolved to."""

    name: str | None = None
    post_type: str | None = None
    limit: int = Field(default=10, ge=1, le=100)


class QueryStateSchema(BaseModel):
    """Final state of a query: request-type flags plus the result list."""

    query_vars: QueryVarsSchema
    flags: dict[str, bool]
    post_count: int = 0
    found_posts: int = 0
    posts: list[PostResponse] = []
