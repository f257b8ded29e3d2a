"""PostgreSQL implementation of Comment repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import case, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Comment
from portal.domain.repository import CommentRepository
from portal.domain.value import BlogPostId, CommentId
from portal.persistence.mappers import comment_to_dict, row_to_comment
from portal.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_blog_post(self, blog_post_id: BlogPostId) -> list[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_post_id == blog_post_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_all(self) -> list[Comment]:
        stmt = select(comments_table).order_by(comments_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update content)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_ids: list[CommentId]) -> None:
        if not comment_ids:
            return
        stmt = delete(comments_table).where(comments_table.c.id.in_(comment_ids))
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_likes(self, comment_id: CommentId) -> int:
        """Atomically increment the like counter and return the new value."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(likes=comments_table.c.likes + 1)
            .returning(comments_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() or 0

    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Atomically decrement the like counter (minimum 0)."""
        likes = comments_table.c.likes
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(likes=case((likes > 0, likes - 1), else_=0))
            .returning(likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() or 0

    async def set_likes(self, comment_id: CommentId, likes: int) -> None:
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(likes=likes)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_author(self) -> dict[UUID, int]:
        stmt = select(comments_table.c.author_id, func.count()).group_by(
            comments_table.c.author_id
        )
        result = await self.session.execute(stmt)
        return {author_id: count for author_id, count in result.all()}
