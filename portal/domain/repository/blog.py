"""Blog post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from portal.domain.model.blog import BlogPost
from portal.domain.value import BlogPostId


class BlogPostRepository(ABC):
    """Repository for BlogPost entity.

    Counter methods apply the change in storage (``likes = likes + 1``) and
    return the new value, so concurrent requests never overwrite each other.
    """

    @abstractmethod
    async def find_by_id(self, post_id: BlogPostId) -> Optional[BlogPost]:
        pass

    @abstractmethod
    async def find_all(
        self,
        include_unpublished: bool = False,
        category: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[BlogPost]:
        """Find posts, newest first.

        Args:
            include_unpublished: Whether to include posts awaiting moderation
            category: Optional category filter
            limit: Maximum number of posts (None for all)
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def save(self, post: BlogPost) -> BlogPost:
        """Save a post (create or update content fields).

        Counters are not written by ``save``; use the counter methods.
        """
        pass

    @abstractmethod
    async def delete(self, post_id: BlogPostId) -> None:
        pass

    @abstractmethod
    async def increment_likes(self, post_id: BlogPostId) -> int:
        pass

    @abstractmethod
    async def decrement_likes(self, post_id: BlogPostId) -> int:
        pass

    @abstractmethod
    async def increment_views(self, post_id: BlogPostId) -> int:
        pass

    @abstractmethod
    async def set_counters(self, post_id: BlogPostId, likes: int, views: int) -> None:
        """Overwrite both counters (reconciliation only)."""
        pass

    @abstractmethod
    async def count_by_published(self) -> dict[bool, int]:
        """Count posts by published flag."""
        pass

    @abstractmethod
    async def sum_counters(self) -> tuple[int, int]:
        """Total (likes, views) across all posts."""
        pass

    @abstractmethod
    async def find_most_viewed(self, limit: int) -> list[BlogPost]:
        """Find published posts with the most views, ties broken by likes."""
        pass

    @abstractmethod
    async def count_by_author(self) -> dict[UUID, int]:
        """Count posts per author, published or not."""
        pass
