"""PostgreSQL implementations of the engagement ledgers (likes and views)."""

from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Like, View
from portal.domain.repository import LikeRepository, ViewRepository
from portal.domain.value import BlogPostId, LikeTargetType, UserId
from portal.persistence.mappers import like_to_dict, view_to_dict
from portal.persistence.tables import blog_views_table, likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    ``add`` relies on the (user_id, target_type, target_id) unique
    constraint, so concurrent likes by the same user create one row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, like: Like) -> bool:
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="uq_user_like")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def remove(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_liked_target_ids(
        self, user_id: UserId, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> set[UUID]:
        """Find which of the given targets a user has liked (batch query)."""
        if not target_ids:
            return set()

        stmt = select(likes_table.c.target_id).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {row.target_id for row in result.fetchall()}

    async def count_by_target(self, target_type: LikeTargetType) -> dict[UUID, int]:
        stmt = (
            select(likes_table.c.target_id, func.count())
            .where(likes_table.c.target_type == target_type.value)
            .group_by(likes_table.c.target_id)
        )
        result = await self.session.execute(stmt)
        return {target_id: count for target_id, count in result.all()}

    async def delete_by_targets(
        self, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> None:
        if not target_ids:
            return
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(target_ids),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()


class PostgresViewRepository(ViewRepository):
    """PostgreSQL implementation of ViewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, view: View) -> bool:
        stmt = (
            insert(blog_views_table)
            .values(**view_to_dict(view))
            .on_conflict_do_nothing(constraint="uq_user_blog_view")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def count_by_blog_post(self) -> dict[UUID, int]:
        stmt = select(blog_views_table.c.blog_post_id, func.count()).group_by(
            blog_views_table.c.blog_post_id
        )
        result = await self.session.execute(stmt)
        return {post_id: count for post_id, count in result.all()}

    async def delete_by_blog_post(self, blog_post_id: BlogPostId) -> None:
        stmt = delete(blog_views_table).where(
            blog_views_table.c.blog_post_id == blog_post_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
