"""Abstract result provider interface (port) — the post-query extension point."""

from abc import ABC, abstractmethod

from virtual_posts.domain.entities import Post, QueryState


class ResultProvider(ABC):
    """Port through which a plugin can rewrite a query's final result list.

    Providers are handed to the query pipeline explicitly and run in
    registration order, each receiving the previous provider's output.
    """

    @abstractmethod
    def provide(self, posts: list[Post], query: QueryState) -> list[Post]:
        """Return the result list that should replace ``posts``.

        ``query`` is the live query state; providers may adjust its flags
        through ``QueryState.set_flag`` / ``QueryState.apply_flags``.
        """
        ...
