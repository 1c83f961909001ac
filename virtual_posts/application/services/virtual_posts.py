"""Virtual posts — on-the-fly post records substituted into a query's result.

A ``VirtualPosts`` instance holds an ordered collection of synthetic posts
and a partial map of query flag overrides. Handed to the query pipeline as a
result provider, it replaces whatever the repository returned with its own
posts and rewrites the request-type flags, so the request renders through
the normal templates instead of falling through to "not found".

Usage:
    virtual = VirtualPosts(
        [{"post_title": "Hello", "post_name": "hello"}],
        {"is_page": True, "is_singular": True},
        site=SiteContext(home_url="https://example.org", timezone=ZoneInfo("UTC")),
    )
    service = PostQueryService(repository, providers=[virtual])
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from virtual_posts.application.interfaces import ResultProvider
from virtual_posts.application.schemas import PostSpec
from virtual_posts.domain.entities import Post, QueryState, SiteContext, validate_query_flag
from virtual_posts.domain.exceptions import InvalidPostSpecError

logger = logging.getLogger(__name__)

_DERIVED_FIELDS = (
    "id",
    "post_date",
    "post_date_gmt",
    "post_modified",
    "post_modified_gmt",
    "guid",
)


class VirtualPosts(ResultProvider):
    """Builds synthetic posts and substitutes them for a query's results."""

    def __init__(
        self,
        posts: Iterable[PostSpec | Mapping[str, Any]] = (),
        query_flags: Mapping[str, bool] | None = None,
        *,
        site: SiteContext,
        now: Callable[[], datetime] | None = None,
    ):
        self._site = site
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._posts: list[Post] = []
        self._query_flags: dict[str, bool] = {}

        for spec in posts:
            self.add_post(spec)

        for name, value in (query_flags or {}).items():
            self.add_query_flag(name, value)

    @property
    def posts(self) -> list[Post]:
        """The finalized posts, in the order they were added."""
        return self._posts

    @property
    def query_flags(self) -> dict[str, bool]:
        return dict(self._query_flags)

    # ── Posts ────────────────────────────────────────────────────────

    def add_post(self, spec: PostSpec | Mapping[str, Any]) -> Post:
        """Fill in defaults for a partial specification and append the post.

        Derived defaults:
            id                 current UNIX time plus the number of posts already added
            post_date          current site-local time
            post_date_gmt      post_date converted to UTC
            post_modified      post_date
            post_modified_gmt  post_date_gmt
            guid               home URL with post_name appended
        """
        values = _validate_spec(spec).model_dump(exclude_none=True)
        derived = {key: values.pop(key) for key in _DERIVED_FIELDS if key in values}
        now = self._now()

        if "post_date" in derived:
            post_date = self._to_site_time(derived["post_date"])
        else:
            post_date = now.astimezone(self._site.timezone).replace(microsecond=0)

        if "post_date_gmt" in derived:
            post_date_gmt = _to_utc(derived["post_date_gmt"])
        else:
            post_date_gmt = post_date.astimezone(timezone.utc)

        if "post_modified" in derived:
            post_modified = self._to_site_time(derived["post_modified"])
        else:
            post_modified = post_date

        if "post_modified_gmt" in derived:
            post_modified_gmt = _to_utc(derived["post_modified_gmt"])
        else:
            post_modified_gmt = post_date_gmt

        if "id" in derived:
            post_id = derived["id"]
        else:
            post_id = int(now.timestamp()) + len(self._posts)

        if "guid" in derived:
            guid = derived["guid"]
        else:
            guid = self._site.home_url_for(values.get("post_name", ""))

        post = Post(
            id=post_id,
            post_date=post_date,
            post_date_gmt=post_date_gmt,
            post_modified=post_modified,
            post_modified_gmt=post_modified_gmt,
            guid=guid,
            **values,
        )
        self._posts.append(post)
        logger.debug("Added virtual post id=%s name='%s'", post.id, post.post_name)
        return post

    # ── Query flags ──────────────────────────────────────────────────

    def add_query_flag(self, name: str, value: bool) -> None:
        """Set the override for one query flag."""
        self._query_flags[name] = validate_query_flag(name, value)

    def fill_query_flags(self, query: QueryState) -> None:
        """Write every flag override onto the query, replacing current values."""
        query.apply_flags(self._query_flags)

    # ── ResultProvider ───────────────────────────────────────────────

    def provide(self, posts: list[Post], query: QueryState) -> list[Post]:
        """Apply the flag overrides and return the virtual posts instead of ``posts``."""
        self.fill_query_flags(query)
        if posts:
            logger.debug("Discarding %d queried post(s) in favour of virtual posts", len(posts))
        return self._posts

    # ── Helpers ──────────────────────────────────────────────────────

    def _to_site_time(self, value: datetime) -> datetime:
        """Naive datetimes are taken as site-local time."""
        if value.tzinfo is None:
            return value.replace(tzinfo=self._site.timezone)
        return value.astimezone(self._site.timezone)


def _to_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _validate_spec(spec: PostSpec | Mapping[str, Any]) -> PostSpec:
    if isinstance(spec, PostSpec):
        return spec
    try:
        return PostSpec.model_validate(dict(spec))
    except ValidationError as exc:
        raise InvalidPostSpecError(
            f"Invalid post specification: {exc.error_count()} error(s)",
            errors=exc.errors(),
        ) from exc
