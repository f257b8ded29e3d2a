"""Engagement ledger domain service.

Likes and views are facts unique per (user, target). Storage enforces the
uniqueness; a repeated action is absorbed as a no-op and the derived
counter moves only when a fact is actually created or deleted.
"""

from typing import Sequence
from uuid import UUID, uuid4

import logfire

from portal.domain.error import NotFoundError
from portal.domain.model import Like, View
from portal.domain.repository import (
    BlogPostRepository,
    CommentRepository,
    LearningResourceRepository,
    LikeRepository,
    PollRepository,
    PollVoteRepository,
    ResourceDownloadRepository,
    ViewRepository,
)
from portal.domain.value import (
    BlogPostId,
    CommentId,
    LikeId,
    LikeTargetType,
    ResourceId,
    UserId,
    ViewId,
)
from portal.domain.value.common import ValueObject

from .base import Service


class ReconciliationReport(ValueObject):
    """Counters corrected by an offline reconciliation run."""

    blog_posts_checked: int = 0
    blog_posts_fixed: int = 0
    comments_checked: int = 0
    comments_fixed: int = 0
    poll_options_checked: int = 0
    poll_options_fixed: int = 0
    resources_checked: int = 0
    resources_fixed: int = 0

    @property
    def total_fixed(self) -> int:
        return (
            self.blog_posts_fixed
            + self.comments_fixed
            + self.poll_options_fixed
            + self.resources_fixed
        )


class EngagementService(Service):
    """Domain service for likes, views and counter reconciliation."""

    def __init__(
        self,
        like_repository: LikeRepository,
        view_repository: ViewRepository,
        blog_post_repository: BlogPostRepository,
        comment_repository: CommentRepository,
        poll_repository: PollRepository,
        poll_vote_repository: PollVoteRepository,
        resource_repository: LearningResourceRepository,
        download_repository: ResourceDownloadRepository,
    ) -> None:
        self.like_repository = like_repository
        self.view_repository = view_repository
        self.blog_post_repository = blog_post_repository
        self.comment_repository = comment_repository
        self.poll_repository = poll_repository
        self.poll_vote_repository = poll_vote_repository
        self.resource_repository = resource_repository
        self.download_repository = download_repository

    async def like(
        self, target_type: LikeTargetType, target_id: UUID, user_id: UserId
    ) -> int:
        """Like a blog post or comment.

        Idempotent: liking twice leaves one fact and one increment.

        Args:
            target_type: Type of target
            target_id: Target ID
            user_id: Liking user

        Returns:
            The target's like count after the call

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "engagement_service.like",
            target_type=target_type.value,
            target_id=str(target_id),
            user_id=str(user_id),
        ):
            current = await self._current_likes(target_type, target_id)

            created = await self.like_repository.add(
                Like(
                    id=LikeId(uuid4()),
                    user_id=user_id,
                    target_type=target_type,
                    target_id=target_id,
                )
            )
            if not created:
                logfire.info("Like already recorded")
                return current

            if target_type == LikeTargetType.BLOG_POST:
                return await self.blog_post_repository.increment_likes(
                    BlogPostId(target_id)
                )
            return await self.comment_repository.increment_likes(CommentId(target_id))

    async def unlike(
        self, target_type: LikeTargetType, target_id: UUID, user_id: UserId
    ) -> int:
        """Remove a like. No-op if the user had not liked the target.

        Returns:
            The target's like count after the call

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "engagement_service.unlike",
            target_type=target_type.value,
            target_id=str(target_id),
            user_id=str(user_id),
        ):
            current = await self._current_likes(target_type, target_id)

            deleted = await self.like_repository.remove(user_id, target_type, target_id)
            if not deleted:
                logfire.info("No like to remove")
                return current

            if target_type == LikeTargetType.BLOG_POST:
                return await self.blog_post_repository.decrement_likes(
                    BlogPostId(target_id)
                )
            return await self.comment_repository.decrement_likes(CommentId(target_id))

    async def record_view(
        self, blog_post_id: BlogPostId, user_id: UserId | None
    ) -> bool:
        """Record the first view of a post by an authenticated user.

        Anonymous views are never counted: there is no identity to
        deduplicate on.

        Returns:
            True if the view counter was incremented
        """
        if user_id is None:
            return False

        created = await self.view_repository.add(
            View(id=ViewId(uuid4()), user_id=user_id, blog_post_id=blog_post_id)
        )
        if created:
            await self.blog_post_repository.increment_views(blog_post_id)
        return created

    async def liked_targets(
        self,
        user_id: UserId | None,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, bool]:
        """Map each target to whether the user has liked it.

        Anonymous callers have liked nothing.
        """
        if not target_ids:
            return {}
        if user_id is None:
            return {target_id: False for target_id in target_ids}

        # Batch query to avoid N+1
        liked = await self.like_repository.find_liked_target_ids(
            user_id, target_type, target_ids
        )
        return {target_id: target_id in liked for target_id in target_ids}

    async def reconcile_counters(self) -> ReconciliationReport:
        """Recompute every derived counter from its facts.

        Offline repair only; the request path never scans.

        Returns:
            Report of checked and corrected entities
        """
        with logfire.span("engagement_service.reconcile_counters"):
            report: dict[str, int] = {}

            post_likes = await self.like_repository.count_by_target(
                LikeTargetType.BLOG_POST
            )
            post_views = await self.view_repository.count_by_blog_post()
            posts = await self.blog_post_repository.find_all(include_unpublished=True)
            fixed = 0
            for post in posts:
                likes = post_likes.get(post.id, 0)
                views = post_views.get(post.id, 0)
                if post.likes != likes or post.views != views:
                    logfire.warn(
                        "Blog post counter drift",
                        blog_post_id=str(post.id),
                        likes=post.likes,
                        expected_likes=likes,
                        views=post.views,
                        expected_views=views,
                    )
                    await self.blog_post_repository.set_counters(post.id, likes, views)
                    fixed += 1
            report["blog_posts_checked"] = len(posts)
            report["blog_posts_fixed"] = fixed

            comment_likes = await self.like_repository.count_by_target(
                LikeTargetType.COMMENT
            )
            comments = await self.comment_repository.find_all()
            fixed = 0
            for comment in comments:
                likes = comment_likes.get(comment.id, 0)
                if comment.likes != likes:
                    logfire.warn(
                        "Comment counter drift",
                        comment_id=str(comment.id),
                        likes=comment.likes,
                        expected_likes=likes,
                    )
                    await self.comment_repository.set_likes(comment.id, likes)
                    fixed += 1
            report["comments_checked"] = len(comments)
            report["comments_fixed"] = fixed

            option_votes = await self.poll_vote_repository.count_by_option()
            checked = fixed = 0
            for poll in await self.poll_repository.find_all():
                for option in poll.options:
                    checked += 1
                    votes = option_votes.get(option.id, 0)
                    if option.votes != votes:
                        logfire.warn(
                            "Poll option counter drift",
                            poll_id=str(poll.id),
                            option_id=str(option.id),
                            votes=option.votes,
                            expected_votes=votes,
                        )
                        await self.poll_repository.set_option_votes(
                            poll.id, option.id, votes
                        )
                        fixed += 1
            report["poll_options_checked"] = checked
            report["poll_options_fixed"] = fixed

            resource_downloads = await self.download_repository.count_by_resource()
            stored = await self.resource_repository.downloads_by_resource()
            fixed = 0
            for resource_id, downloads in stored.items():
                expected = resource_downloads.get(resource_id, 0)
                if downloads != expected:
                    logfire.warn(
                        "Resource download counter drift",
                        resource_id=str(resource_id),
                        downloads=downloads,
                        expected_downloads=expected,
                    )
                    await self.resource_repository.set_downloads(
                        ResourceId(resource_id), expected
                    )
                    fixed += 1
            report["resources_checked"] = len(stored)
            report["resources_fixed"] = fixed

            result = ReconciliationReport(**report)
            logfire.info("Counters reconciled", **report)
            return result

    async def _current_likes(self, target_type: LikeTargetType, target_id: UUID) -> int:
        if target_type == LikeTargetType.BLOG_POST:
            post = await self.blog_post_repository.find_by_id(BlogPostId(target_id))
            if not post:
                logfire.warn("Like on non-existent blog post", target_id=str(target_id))
                raise NotFoundError("Blog post", str(target_id))
            return post.likes

        comment = await self.comment_repository.find_by_id(CommentId(target_id))
        if not comment:
            logfire.warn("Like on non-existent comment", target_id=str(target_id))
            raise NotFoundError("Comment", str(target_id))
        return comment.likes
