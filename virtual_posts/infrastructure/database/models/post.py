"""SQLAlchemy ORM model for the Post entity."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from virtual_posts.infrastructure.database.base import Base


class PostModel(Base):
    """ORM model — maps to the 'posts' table."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    post_author: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    post_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    post_date_gmt: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    post_content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_content_filtered: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_excerpt: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_status: Mapped[str] = mapped_column(String(20), default="publish", nullable=False, index=True)
    post_type: Mapped[str] = mapped_column(String(20), default="post", nullable=False, index=True)
    comment_status: Mapped[str] = mapped_column(String(20), default="open", nullable=False)
    ping_status: Mapped[str] = mapped_column(String(20), default="open", nullable=False)
    post_password: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    post_name: Mapped[str] = mapped_column(String(200), default="", nullable=False, index=True)
    to_ping: Mapped[str] = mapped_column(Text, default="", nullable=False)
    pinged: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_modified: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    post_modified_gmt: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    post_parent: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
    menu_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    post_mime_type: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    guid: Mapped[str] = mapped_column(String(255), default="", nullable=False)

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, post_name='{self.post_name}', post_type='{self.post_type}')>"
