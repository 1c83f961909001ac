"""Abstract repository interface (port) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from virtual_posts.domain.entities import Post, QueryVars


class PostRepository(ABC):
    """Port for post persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find(self, query_vars: QueryVars) -> list[Post]:
        """Return published posts matching the query variables."""
        ...

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Persist a new post and return it with the generated ID."""
        ...
