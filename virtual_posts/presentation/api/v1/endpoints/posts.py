"""Post query endpoint — runs the query pipeline, virtual pages included."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from virtual_posts.application.schemas import PostResponse, QueryStateSchema, QueryVarsSchema
from virtual_posts.application.services import PostQueryService
from virtual_posts.config import get_settings
from virtual_posts.domain.entities import QueryState, QueryVars
from virtual_posts.infrastructure.dependencies import get_post_query_service

router = APIRouter(prefix="/posts", tags=["Posts"])


def _to_state_schema(state: QueryState) -> QueryStateSchema:
    """Map domain QueryState to response schema."""
    return QueryStateSchema(
        query_vars=QueryVarsSchema(
            name=state.query_vars.name,
            post_type=state.query_vars.post_type,
            limit=state.query_vars.limit,
        ),
        flags=state.flags.to_dict(),
        post_count=state.post_count,
        found_posts=state.found_posts,
        posts=[PostResponse.model_validate(p, from_attributes=True) for p in state.posts],
    )


@router.get("", response_model=QueryStateSchema)
async def query_posts(
    name: str | None = Query(None, description="Post slug to look up"),
    post_type: str | None = Query(None, description="Restrict to a post type"),
    limit: int | None = Query(None, ge=1, le=100),
    service: PostQueryService = Depends(get_post_query_service),
) -> QueryStateSchema:
    """Resolve a post query; lookups that end with no posts respond 404."""
    query_vars = QueryVars(
        name=name,
        post_type=post_type,
        limit=limit or get_settings().default_query_limit,
    )
    state = await service.query(query_vars)
    if state.flags.is_404:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No posts found for name='{name}'",
        )
    return _to_state_schema(state)
