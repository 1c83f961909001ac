from .post_query_service import PostQueryService
from .virtual_page_registry import VirtualPageRegistry
from .virtual_posts import VirtualPosts

__all__ = [
    "PostQueryService",
    "VirtualPageRegistry",
    "VirtualPosts",
]
