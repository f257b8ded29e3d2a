"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from portal.domain.model.comment import Comment
from portal.domain.value import BlogPostId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        pass

    @abstractmethod
    async def find_by_blog_post(self, blog_post_id: BlogPostId) -> list[Comment]:
        """Find all comments on a post, oldest first."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Comment]:
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def delete(self, comment_ids: list[CommentId]) -> None:
        """Delete comments by ID."""
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> int:
        pass

    @abstractmethod
    async def decrement_likes(self, comment_id: CommentId) -> int:
        pass

    @abstractmethod
    async def set_likes(self, comment_id: CommentId, likes: int) -> None:
        """Overwrite the like counter (reconciliation only)."""
        pass

    @abstractmethod
    async def count_by_author(self) -> dict[UUID, int]:
        """Count comments per author."""
        pass
