from .post_repository import PostRepository
from .result_provider import ResultProvider

__all__ = [
    "PostRepository",
    "ResultProvider",
]
