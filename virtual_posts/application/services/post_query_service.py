"""Post query pipeline — resolves request flags, fetches posts, runs result providers.

Pipeline:
    1. Build the query state and set request-type flags from the query vars
    2. Fetch matching posts from the repository
    3. Pass the result list through every registered result provider, in order
    4. Store the final list and counts on the query state
    5. Flag the query as 404 when a lookup (not a listing) has nothing left to show
"""

from collections.abc import Iterable

from virtual_posts.application.interfaces import PostRepository, ResultProvider
from virtual_posts.domain.entities import QueryState, QueryVars
from virtual_posts.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("PostQueryService")


class PostQueryService:
    """Runs post queries. Depends on the repository port and result providers (DI)."""

    def __init__(
        self,
        repository: PostRepository,
        providers: Iterable[ResultProvider] = (),
    ):
        self._repository = repository
        self._providers: list[ResultProvider] = list(providers)

    @property
    def providers(self) -> list[ResultProvider]:
        return list(self._providers)

    def add_provider(self, provider: ResultProvider) -> None:
        """Register a result provider; it runs after those already registered."""
        self._providers.append(provider)

    async def query(self, query_vars: QueryVars) -> QueryState:
        state = QueryState(query_vars=query_vars)
        self._parse_request_flags(state)
        plog.step_start(
            PipelineStage.QUERY, "Resolving post query",
            name=query_vars.name, post_type=query_vars.post_type, limit=query_vars.limit,
        )

        with plog.timed_step(PipelineStage.REPOSITORY, "Fetching posts"):
            posts = await self._repository.find(query_vars)
        plog.detail(f"{len(posts)} post(s) from repository")

        for provider in self._providers:
            flags_before = state.flags.to_dict()
            posts = provider.provide(posts, state)
            plog.step_complete(
                PipelineStage.PROVIDER, type(provider).__name__, posts=len(posts),
            )
            changed = {
                name: value
                for name, value in state.flags.to_dict().items()
                if flags_before[name] != value
            }
            if changed:
                plog.detail("Flags overridden", **changed)

        state.set_posts(list(posts))
        if not state.posts and not self._is_listing(state):
            state.set_flag("is_404", True)
            plog.step_complete(PipelineStage.FLAGS, "No posts — flagged as 404")

        plog.step_complete(
            PipelineStage.COMPLETE, "Query resolved",
            post_count=state.post_count, is_404=state.flags.is_404,
        )
        return state

    @staticmethod
    def _is_listing(state: QueryState) -> bool:
        """Listings may legitimately be empty; only lookups become 404s."""
        flags = state.flags
        return flags.is_home or flags.is_archive or flags.is_search

    @staticmethod
    def _parse_request_flags(state: QueryState) -> None:
        """Set the request-type flags implied by the query vars."""
        query_vars = state.query_vars
        if query_vars.name:
            state.set_flag("is_singular", True)
            if query_vars.post_type == "page":
                state.set_flag("is_page", True)
            else:
                state.set_flag("is_single", True)
        elif query_vars.post_type and query_vars.post_type != "post":
            state.set_flag("is_archive", True)
            state.set_flag("is_post_type_archive", True)
        else:
            state.set_flag("is_home", True)
