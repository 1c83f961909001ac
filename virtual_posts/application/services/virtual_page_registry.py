"""Registry of virtual pages keyed by slug."""

import logging

from virtual_posts.application.interfaces import ResultProvider
from virtual_posts.domain.entities import Post, QueryState
from virtual_posts.domain.exceptions import DuplicateEntityError, EntityNotFoundError

from .virtual_posts import VirtualPosts

logger = logging.getLogger(__name__)


class VirtualPageRegistry(ResultProvider):
    """Routes queries for a registered slug to that page's ``VirtualPosts``.

    Queries for any other name pass through unchanged.
    """

    def __init__(self):
        self._pages: dict[str, VirtualPosts] = {}

    def register(self, slug: str, virtual_posts: VirtualPosts) -> None:
        if slug in self._pages:
            raise DuplicateEntityError("VirtualPage", "slug", slug)
        self._pages[slug] = virtual_posts
        logger.debug("Registered virtual page '%s' (%d posts)", slug, len(virtual_posts.posts))

    def get(self, slug: str) -> VirtualPosts:
        try:
            return self._pages[slug]
        except KeyError:
            raise EntityNotFoundError("VirtualPage", slug) from None

    @property
    def slugs(self) -> list[str]:
        return list(self._pages)

    def __contains__(self, slug: object) -> bool:
        return slug in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def provide(self, posts: list[Post], query: QueryState) -> list[Post]:
        name = query.query_vars.name
        page = self._pages.get(name) if name else None
        if page is None:
            return posts
        logger.info("Serving virtual page '%s'", name)
        return page.provide(posts, query)
