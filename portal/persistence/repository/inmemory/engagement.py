"""In-memory like and view ledgers for testing."""

from typing import Sequence
from uuid import UUID

from portal.domain.model import Like, View
from portal.domain.repository import LikeRepository, ViewRepository
from portal.domain.value import BlogPostId, LikeTargetType, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: dict[tuple[UUID, LikeTargetType, UUID], Like] = {}

    async def add(self, like: Like) -> bool:
        key = (like.user_id, like.target_type, UUID(str(like.target_id)))
        if key in self._likes:
            return False
        self._likes[key] = like
        return True

    async def remove(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        return self._likes.pop((user_id, target_type, UUID(str(target_id))), None) is not None

    async def find_liked_target_ids(
        self, user_id: UserId, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> set[UUID]:
        """Find which of the given targets a user has liked (batch query)."""
        wanted = {UUID(str(target_id)) for target_id in target_ids}
        return {
            target_id
            for (liker, kind, target_id) in self._likes
            if liker == user_id and kind == target_type and target_id in wanted
        }

    async def count_by_target(self, target_type: LikeTargetType) -> dict[UUID, int]:
        counts: dict[UUID, int] = {}
        for _, kind, target_id in self._likes:
            if kind == target_type:
                counts[target_id] = counts.get(target_id, 0) + 1
        return counts

    async def delete_by_targets(
        self, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> None:
        doomed = {UUID(str(target_id)) for target_id in target_ids}
        self._likes = {
            key: like
            for key, like in self._likes.items()
            if not (key[1] == target_type and key[2] in doomed)
        }


class InMemoryViewRepository(ViewRepository):
    """In-memory implementation of ViewRepository for testing."""

    def __init__(self) -> None:
        self._views: dict[tuple[UUID, UUID], View] = {}

    async def add(self, view: View) -> bool:
        key = (view.user_id, view.blog_post_id)
        if key in self._views:
            return False
        self._views[key] = view
        return True

    async def count_by_blog_post(self) -> dict[UUID, int]:
        counts: dict[UUID, int] = {}
        for _, post_id in self._views:
            counts[post_id] = counts.get(post_id, 0) + 1
        return counts

    async def delete_by_blog_post(self, blog_post_id: BlogPostId) -> None:
        self._views = {
            key: view for key, view in self._views.items() if key[1] != blog_post_id
        }
