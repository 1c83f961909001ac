"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any


@dataclass
class Post:
    """A content item as seen by the query pipeline and the templates.

    Virtual posts and database-backed posts share this shape, so a virtual
    record can stand in for a real one anywhere a result list is consumed.
    """

    id: int
    post_date: datetime
    post_date_gmt: datetime
    post_modified: datetime
    post_modified_gmt: datetime
    guid: str
    post_author: int = 0
    post_content: str = ""
    post_content_filtered: str = ""
    post_title: str = ""
    post_excerpt: str = ""
    post_status: str = "publish"
    post_type: str = "page"
    comment_status: str = "closed"
    ping_status: str = "closed"
    post_password: str = ""
    post_name: str = ""
    to_ping: str = ""
    pinged: str = ""
    post_parent: int = 0
    menu_order: int = 0
    post_mime_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
