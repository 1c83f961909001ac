"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from virtual_posts.config import get_settings
from virtual_posts.application.services import PostQueryService, VirtualPageRegistry
from virtual_posts.domain.entities import SiteContext
from virtual_posts.infrastructure.database.session import get_db_session
from virtual_posts.infrastructure.database.repositories import SQLAlchemyPostRepository


@lru_cache
def get_site_context() -> SiteContext:
    """Site context built from settings — home URL and local timezone."""
    settings = get_settings()
    return SiteContext(home_url=settings.home_url, timezone=settings.tzinfo)


@lru_cache
def get_virtual_page_registry() -> VirtualPageRegistry:
    """Process-wide virtual page registry, filled at startup."""
    return VirtualPageRegistry()


async def get_post_query_service(
    session: AsyncSession = Depends(get_db_session),
    site: SiteContext = Depends(get_site_context),
    registry: VirtualPageRegistry = Depends(get_virtual_page_registry),
) -> AsyncGenerator[PostQueryService, None]:
    """Provides a PostQueryService with the post repository and virtual pages wired up."""
    repository = SQLAlchemyPostRepository(session, site_timezone=site.timezone)
    yield PostQueryService(repository, providers=[registry])
