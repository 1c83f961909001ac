"""Domain entities for post queries — request-type flags and live query state."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields

from virtual_posts.domain.entities.post import Post
from virtual_posts.domain.exceptions import InvalidQueryFlagError, UnknownQueryFlagError


@dataclass
class QueryFlags:
    """Boolean flags describing what kind of request a query answers.

    Templates branch on these (single page, archive, 404, ...), so
    overriding them is how a virtual result is made to look like a real one.
    """

    is_single: bool = False
    is_preview: bool = False
    is_page: bool = False
    is_archive: bool = False
    is_date: bool = False
    is_year: bool = False
    is_month: bool = False
    is_day: bool = False
    is_time: bool = False
    is_author: bool = False
    is_category: bool = False
    is_tag: bool = False
    is_tax: bool = False
    is_search: bool = False
    is_feed: bool = False
    is_comment_feed: bool = False
    is_trackback: bool = False
    is_home: bool = False
    is_404: bool = False
    is_embed: bool = False
    is_paged: bool = False
    is_admin: bool = False
    is_attachment: bool = False
    is_singular: bool = False
    is_robots: bool = False
    is_posts_page: bool = False
    is_post_type_archive: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


QUERY_FLAG_NAMES: frozenset[str] = frozenset(f.name for f in fields(QueryFlags))


def validate_query_flag(name: str, value: object) -> bool:
    """Check that ``name`` is a known flag and ``value`` a bool; return the value."""
    if name not in QUERY_FLAG_NAMES:
        raise UnknownQueryFlagError(name)
    if not isinstance(value, bool):
        raise InvalidQueryFlagError(name, value)
    return value


@dataclass
class QueryVars:
    """Public query variables a request was resolved to."""

    name: str | None = None
    post_type: str | None = None
    limit: int = 10


@dataclass
class QueryState:
    """Live state of one query execution.

    Owned by the query pipeline; result providers may change the flags only
    through ``set_flag`` / ``apply_flags``.
    """

    query_vars: QueryVars = field(default_factory=QueryVars)
    flags: QueryFlags = field(default_factory=QueryFlags)
    posts: list[Post] = field(default_factory=list)
    post_count: int = 0
    found_posts: int = 0

    def set_flag(self, name: str, value: bool) -> None:
        """Set a single request-type flag."""
        setattr(self.flags, name, validate_query_flag(name, value))

    def apply_flags(self, overrides: Mapping[str, bool]) -> None:
        """Overwrite every flag named in ``overrides``; others are left as they are."""
        for name, value in overrides.items():
            self.set_flag(name, value)

    def set_posts(self, posts: list[Post]) -> None:
        self.posts = posts
        self.post_count = len(posts)
        self.found_posts = len(posts)
