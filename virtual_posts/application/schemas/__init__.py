from .post import PostSpec, PostResponse
from .query import QueryVarsSchema, QueryStateSchema
from .virtual_page import VirtualPageDefinition, VirtualPagesDocument, VirtualPageSummary

__all__ = [
    "PostSpec",
    "PostResponse",
    "QueryVarsSchema",
    "QueryStateSchema",
    "VirtualPageDefinition",
    "VirtualPagesDocument",
    "VirtualPageSummary",
]
