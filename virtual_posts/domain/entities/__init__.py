from .post import Post
from .query import (
    QUERY_FLAG_NAMES,
    QueryFlags,
    QueryState,
    QueryVars,
    validate_query_flag,
)
from .site import SiteContext

__all__ = [
    "Post",
    "QUERY_FLAG_NAMES",
    "QueryFlags",
    "QueryState",
    "QueryVars",
    "validate_query_flag",
    "SiteContext",
]
