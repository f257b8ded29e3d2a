"""In-memory comment repository for testing."""

from collections import Counter
from typing import Optional
from uuid import UUID

from portal.domain.model import Comment
from portal.domain.repository import CommentRepository
from portal.domain.value import BlogPostId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_blog_post(self, blog_post_id: BlogPostId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.blog_post_id == blog_post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def find_all(self) -> list[Comment]:
        return sorted(self._comments.values(), key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        existing = self._comments.get(comment.id)
        likes = existing.likes if existing else 0
        comment = comment.model_copy(update={"likes": likes})
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_ids: list[CommentId]) -> None:
        for comment_id in comment_ids:
            self._comments.pop(comment_id, None)

    async def increment_likes(self, comment_id: CommentId) -> int:
        return self._bump(comment_id, 1)

    async def decrement_likes(self, comment_id: CommentId) -> int:
        return self._bump(comment_id, -1)

    async def set_likes(self, comment_id: CommentId, likes: int) -> None:
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(update={"likes": likes})

    def _bump(self, comment_id: CommentId, delta: int) -> int:
        comment = self._comments.get(comment_id)
        if not comment:
            return 0
        likes = max(comment.likes + delta, 0)
        self._comments[comment_id] = comment.model_copy(update={"likes": likes})
        return likes

    async def count_by_author(self) -> dict[UUID, int]:
        return dict(Counter(c.author_id for c in self._comments.values()))
