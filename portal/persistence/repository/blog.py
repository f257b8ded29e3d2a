"""PostgreSQL implementation of BlogPost repository."""

from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import case, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import BlogPost
from portal.domain.repository import BlogPostRepository
from portal.domain.value import BlogPostId
from portal.persistence.mappers import blog_post_to_dict, row_to_blog_post
from portal.persistence.tables import blog_posts_table


class PostgresBlogPostRepository(BlogPostRepository):
    """PostgreSQL implementation of BlogPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: BlogPostId) -> Optional[BlogPost]:
        """Find a blog post by ID."""
        with logfire.span("blog_post_repository.find_by_id", blog_post_id=str(post_id)):
            stmt = select(blog_posts_table).where(blog_posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_blog_post(dict(row)) if row else None

    async def find_all(
        self,
        include_unpublished: bool = False,
        category: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[BlogPost]:
        stmt = select(blog_posts_table)
        if not include_unpublished:
            stmt = stmt.where(blog_posts_table.c.published.is_(True))
        if category:
            stmt = stmt.where(blog_posts_table.c.category == category)
        stmt = stmt.order_by(blog_posts_table.c.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_blog_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: BlogPost) -> BlogPost:
        """Save a post (create or update content fields).

        Returns:
            The stored post, with counters as currently persisted
        """
        existing = await self.find_by_id(post.id)
        post_dict = blog_post_to_dict(post)

        if existing:
            stmt = (
                blog_posts_table.update()
                .where(blog_posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = blog_posts_table.insert().values(**post_dict)
        await self.session.execute(stmt)
        await self.session.flush()

        saved = await self.find_by_id(post.id)
        return saved or post

    async def delete(self, post_id: BlogPostId) -> None:
        stmt = delete(blog_posts_table).where(blog_posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_likes(self, post_id: BlogPostId) -> int:
        """Atomically increment the like counter and return the new value."""
        stmt = (
            blog_posts_table.update()
            .where(blog_posts_table.c.id == post_id)
            .values(likes=blog_posts_table.c.likes + 1)
            .returning(blog_posts_table.c.likes)
        )
        return await self._scalar(stmt)

    async def decrement_likes(self, post_id: BlogPostId) -> int:
        """Atomically decrement the like counter (minimum 0)."""
        likes = blog_posts_table.c.likes
        stmt = (
            blog_posts_table.update()
            .where(blog_posts_table.c.id == post_id)
            .values(likes=case((likes > 0, likes - 1), else_=0))
            .returning(likes)
        )
        return await self._scalar(stmt)

    async def increment_views(self, post_id: BlogPostId) -> int:
        stmt = (
            blog_posts_table.update()
            .where(blog_posts_table.c.id == post_id)
            .values(views=blog_posts_table.c.views + 1)
            .returning(blog_posts_table.c.views)
        )
        return await self._scalar(stmt)

    async def set_counters(self, post_id: BlogPostId, likes: int, views: int) -> None:
        stmt = (
            blog_posts_table.update()
            .where(blog_posts_table.c.id == post_id)
            .values(likes=likes, views=views)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_published(self) -> dict[bool, int]:
        stmt = select(blog_posts_table.c.published, func.count()).group_by(
            blog_posts_table.c.published
        )
        result = await self.session.execute(stmt)
        counts = {True: 0, False: 0}
        for published, count in result.all():
            counts[bool(published)] = count
        return counts

    async def sum_counters(self) -> tuple[int, int]:
        stmt = select(
            func.coalesce(func.sum(blog_posts_table.c.likes), 0),
            func.coalesce(func.sum(blog_posts_table.c.views), 0),
        )
        result = await self.session.execute(stmt)
        likes, views = result.one()
        return int(likes), int(views)

    async def find_most_viewed(self, limit: int) -> list[BlogPost]:
        stmt = (
            select(blog_posts_table)
            .where(blog_posts_table.c.published.is_(True))
            .order_by(blog_posts_table.c.views.desc(), blog_posts_table.c.likes.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_blog_post(dict(row)) for row in result.mappings().all()]

    async def count_by_author(self) -> dict[UUID, int]:
        stmt = select(blog_posts_table.c.author_id, func.count()).group_by(
            blog_posts_table.c.author_id
        )
        result = await self.session.execute(stmt)
        return {author_id: count for author_id, count in result.all()}

    async def _scalar(self, stmt) -> int:  # type: ignore[no-untyped-def]
        result = await self.session.execute(stmt)
        await self.session.flush()
        value = result.scalar_one_or_none()
        return value if value is not None else 0
