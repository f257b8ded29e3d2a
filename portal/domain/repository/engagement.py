"""Engagement ledger repository interfaces."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from portal.domain.model.engagement import Like, View
from portal.domain.value import BlogPostId, LikeTargetType, UserId


class LikeRepository(ABC):
    """Repository for Like facts.

    Uniqueness of (user, target type, target) is enforced by storage, not
    by a read before the write.
    """

    @abstractmethod
    async def add(self, like: Like) -> bool:
        """Insert a like unless the user already liked the target.

        Args:
            like: The like fact to insert

        Returns:
            True if a row was created, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Delete a user's like on a target.

        Args:
            user_id: The user's ID
            target_type: Type of target (blog post or comment)
            target_id: ID of the target

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_liked_target_ids(
        self, user_id: UserId, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> set[UUID]:
        """Find which of the given targets a user has liked (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of targets
            target_ids: Target IDs to check

        Returns:
            Subset of ``target_ids`` the user has liked
        """
        pass

    @abstractmethod
    async def count_by_target(self, target_type: LikeTargetType) -> dict[UUID, int]:
        """Count likes per target for a target type (used for reconciliation)."""
        pass

    @abstractmethod
    async def delete_by_targets(
        self, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> None:
        """Delete every like on the given targets."""
        pass


class ViewRepository(ABC):
    """Repository for View facts, unique per (user, blog post)."""

    @abstractmethod
    async def add(self, view: View) -> bool:
        """Insert a view unless the user already viewed the post.

        Returns:
            True if a row was created, False if it already existed
        """
        pass

    @abstractmethod
    async def count_by_blog_post(self) -> dict[UUID, int]:
        """Count views per blog post (used for reconciliation)."""
        pass

    @abstractmethod
    async def delete_by_blog_post(self, blog_post_id: BlogPostId) -> None:
        pass
