"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone, tzinfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from virtual_posts.application.interfaces import PostRepository
from virtual_posts.domain.entities import Post, QueryVars
from virtual_posts.infrastructure.database.models import PostModel


def _as_zone(value: datetime, tz: tzinfo) -> datetime:
    """Attach ``tz`` to naive values (SQLite drops offsets), convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


class SQLAlchemyPostRepository(PostRepository):
    """Implements the PostRepository port using SQLAlchemy async sessions.

    ``site_timezone`` is the zone local dates (``post_date``,
    ``post_modified``) are stored in.
    """

    def __init__(self, session: AsyncSession, site_timezone: tzinfo = timezone.utc):
        self._session = session
        self._tz = site_timezone

    def _to_entity(self, model: PostModel) -> Post:
        """Map ORM model → domain entity."""
        return Post(
            id=model.id,
            post_author=model.post_author,
            post_date=_as_zone(model.post_date, self._tz),
            post_date_gmt=_as_zone(model.post_date_gmt, timezone.utc),
            post_content=model.post_content,
            post_content_filtered=model.post_content_filtered,
            post_title=model.post_title,
            post_excerpt=model.post_excerpt,
            post_status=model.post_status,
            post_type=model.post_type,
            comment_status=model.comment_status,
            ping_status=model.ping_status,
            post_password=model.post_password,
            post_name=model.post_name,
            to_ping=model.to_ping,
            pinged=model.pinged,
            post_modified=_as_zone(model.post_modified, self._tz),
            post_modified_gmt=_as_zone(model.post_modified_gmt, timezone.utc),
            post_parent=model.post_parent,
            menu_order=model.menu_order,
            post_mime_type=model.post_mime_type,
            guid=model.guid,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Map domain entity → ORM model (for creation; the ID is generated)."""
        values = entity.to_dict()
        values.pop("id")
        return PostModel(**values)

    async def find(self, query_vars: QueryVars) -> list[Post]:
        stmt = select(PostModel).where(PostModel.post_status == "publish")
        if query_vars.name:
            stmt = stmt.where(PostModel.post_name == query_vars.name)
        if query_vars.post_type:
            stmt = stmt.where(PostModel.post_type == query_vars.post_type)
        stmt = stmt.order_by(
            PostModel.menu_order.asc(),
            PostModel.post_date_gmt.desc(),
        ).limit(query_vars.limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, post: Post) -> Post:
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
