"""Virtual page endpoints — read-only view of the registry."""

from fastapi import APIRouter, Depends, HTTPException, status

from virtual_posts.application.schemas import PostResponse, VirtualPageSummary
from virtual_posts.application.services import VirtualPageRegistry
from virtual_posts.domain.exceptions import EntityNotFoundError
from virtual_posts.infrastructure.dependencies import get_virtual_page_registry

router = APIRouter(prefix="/virtual-pages", tags=["Virtual Pages"])


@router.get("", response_model=list[VirtualPageSummary])
async def list_virtual_pages(
    registry: VirtualPageRegistry = Depends(get_virtual_page_registry),
) -> list[VirtualPageSummary]:
    """List registered virtual pages."""
    summaries = []
    for slug in registry.slugs:
        page = registry.get(slug)
        summaries.append(
            VirtualPageSummary(slug=slug, post_count=len(page.posts), flags=page.query_flags)
        )
    return summaries


@router.get("/{slug}/posts", response_model=list[PostResponse])
async def get_virtual_page_posts(
    slug: str,
    registry: VirtualPageRegistry = Depends(get_virtual_page_registry),
) -> list[PostResponse]:
    """Return the posts a virtual page substitutes into its queries."""
    try:
        page = registry.get(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [PostResponse.model_validate(p, from_attributes=True) for p in page.posts]
