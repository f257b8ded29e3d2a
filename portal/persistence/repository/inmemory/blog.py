"""In-memory blog post repository for testing."""

from collections import Counter
from typing import Optional
from uuid import UUID

from portal.domain.model import BlogPost
from portal.domain.repository import BlogPostRepository
from portal.domain.value import BlogPostId


class InMemoryBlogPostRepository(BlogPostRepository):
    """In-memory implementation of BlogPostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[BlogPostId, BlogPost] = {}

    async def find_by_id(self, post_id: BlogPostId) -> Optional[BlogPost]:
        return self._posts.get(post_id)

    async def find_all(
        self,
        include_unpublished: bool = False,
        category: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[BlogPost]:
        posts = [
            p
            for p in self._posts.values()
            if (include_unpublished or p.published)
            and (category is None or p.category == category)
        ]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        end = offset + limit if limit is not None else None
        return posts[offset:end]

    async def save(self, post: BlogPost) -> BlogPost:
        """Save a post, keeping the stored counters of an existing one."""
        existing = self._posts.get(post.id)
        if existing:
            post = post.model_copy(
                update={"likes": existing.likes, "views": existing.views}
            )
        else:
            post = post.model_copy(update={"likes": 0, "views": 0})
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: BlogPostId) -> None:
        self._posts.pop(post_id, None)

    async def increment_likes(self, post_id: BlogPostId) -> int:
        return self._bump(post_id, "likes", 1)

    async def decrement_likes(self, post_id: BlogPostId) -> int:
        return self._bump(post_id, "likes", -1)

    async def increment_views(self, post_id: BlogPostId) -> int:
        return self._bump(post_id, "views", 1)

    async def set_counters(self, post_id: BlogPostId, likes: int, views: int) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update={"likes": likes, "views": views})

    async def count_by_published(self) -> dict[bool, int]:
        counts = {True: 0, False: 0}
        for post in self._posts.values():
            counts[post.published] += 1
        return counts

    async def sum_counters(self) -> tuple[int, int]:
        posts = self._posts.values()
        return sum(p.likes for p in posts), sum(p.views for p in posts)

    async def find_most_viewed(self, limit: int) -> list[BlogPost]:
        posts = [p for p in self._posts.values() if p.published]
        posts.sort(key=lambda p: (p.views, p.likes), reverse=True)
        return posts[:limit]

    async def count_by_author(self) -> dict[UUID, int]:
        return dict(Counter(p.author_id for p in self._posts.values()))

    def _bump(self, post_id: BlogPostId, field: str, delta: int) -> int:
        post = self._posts.get(post_id)
        if not post:
            return 0
        value = max(getattr(post, field) + delta, 0)
        self._posts[post_id] = post.model_copy(update={field: value})
        return value
