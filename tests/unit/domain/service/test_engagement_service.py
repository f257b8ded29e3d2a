"""Unit tests for EngagementService."""

from uuid import uuid4

import pytest

from portal.domain.error import NotFoundError
from portal.domain.repository import (
    BlogPostRepository,
    CommentRepository,
    LearningResourceRepository,
    PollRepository,
)
from portal.domain.service import (
    BlogService,
    CommentService,
    EngagementService,
    PollService,
    ResourceService,
)
from portal.domain.value import LikeTargetType, ResourceType, Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


async def published_post(env):
    admin = await seed_account(env, role=Role.ADMIN)
    blog = await env.get(BlogService)
    return await blog.create_post(
        principal_for(admin), title="Welcome", content="First post"
    )


class TestLike:
    """Tests for like and unlike."""

    @pytest.mark.asyncio
    async def test_like_increments_counter_once(self, unit_env):
        """Liking twice records one fact and one increment."""
        # Arrange
        engagement = await unit_env.get(EngagementService)
        posts = await unit_env.get(BlogPostRepository)
        post = await published_post(unit_env)
        user = await seed_account(unit_env)

        # Act
        first = await engagement.like(LikeTargetType.BLOG_POST, post.id, user.id)
        second = await engagement.like(LikeTargetType.BLOG_POST, post.id, user.id)

        # Assert
        assert first == 1
        assert second == 1
        assert (await posts.find_by_id(post.id)).likes == 1

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        post = await published_post(unit_env)
        alice = await seed_account(unit_env)
        bob = await seed_account(unit_env)

        await engagement.like(LikeTargetType.BLOG_POST, post.id, alice.id)
        count = await engagement.like(LikeTargetType.BLOG_POST, post.id, bob.id)

        assert count == 2

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_noop(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        post = await published_post(unit_env)
        alice = await seed_account(unit_env)
        bob = await seed_account(unit_env)
        await engagement.like(LikeTargetType.BLOG_POST, post.id, alice.id)

        count = await engagement.unlike(LikeTargetType.BLOG_POST, post.id, bob.id)

        assert count == 1

    @pytest.mark.asyncio
    async def test_unlike_removes_fact_and_decrements(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        post = await published_post(unit_env)
        user = await seed_account(unit_env)
        await engagement.like(LikeTargetType.BLOG_POST, post.id, user.id)

        count = await engagement.unlike(LikeTargetType.BLOG_POST, post.id, user.id)
        liked = await engagement.liked_targets(
            user.id, LikeTargetType.BLOG_POST, [post.id]
        )

        assert count == 0
        assert liked == {post.id: False}

    @pytest.mark.asyncio
    async def test_like_comment(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        comments = await unit_env.get(CommentService)
        post = await published_post(unit_env)
        user = await seed_account(unit_env)
        comment = await comments.create_comment(post.id, principal_for(user), "Nice")

        count = await engagement.like(LikeTargetType.COMMENT, comment.id, user.id)

        assert count == 1

    @pytest.mark.asyncio
    async def test_like_missing_target(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        user = await seed_account(unit_env)

        with pytest.raises(NotFoundError):
            await engagement.like(LikeTargetType.BLOG_POST, uuid4(), user.id)
        with pytest.raises(NotFoundError):
            await engagement.unlike(LikeTargetType.COMMENT, uuid4(), user.id)


class TestRecordView:
    @pytest.mark.asyncio
    async def test_view_counted_once_per_user(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        posts = await unit_env.get(BlogPostRepository)
        post = await published_post(unit_env)
        user = await seed_account(unit_env)

        assert await engagement.record_view(post.id, user.id) is True
        assert await engagement.record_view(post.id, user.id) is False

        assert (await posts.find_by_id(post.id)).views == 1

    @pytest.mark.asyncio
    async def test_anonymous_view_not_counted(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        posts = await unit_env.get(BlogPostRepository)
        post = await published_post(unit_env)

        assert await engagement.record_view(post.id, None) is False
        assert (await posts.find_by_id(post.id)).views == 0


class TestLikedTargets:
    @pytest.mark.asyncio
    async def test_anonymous_has_liked_nothing(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        post = await published_post(unit_env)

        liked = await engagement.liked_targets(None, LikeTargetType.BLOG_POST, [post.id])

        assert liked == {post.id: False}

    @pytest.mark.asyncio
    async def test_liked_state_is_per_user(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        post = await published_post(unit_env)
        liker = await seed_account(unit_env)
        other = await seed_account(unit_env)
        await engagement.like(LikeTargetType.BLOG_POST, post.id, liker.id)

        mine = await engagement.liked_targets(liker.id, LikeTargetType.BLOG_POST, [post.id])
        theirs = await engagement.liked_targets(
            other.id, LikeTargetType.BLOG_POST, [post.id]
        )

        assert mine[post.id] is True
        assert theirs[post.id] is False


class TestReconcileCounters:
    """Tests for offline counter reconciliation."""

    @pytest.mark.asyncio
    async def test_consistent_counters_are_left_alone(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        post = await published_post(unit_env)
        user = await seed_account(unit_env)
        await engagement.like(LikeTargetType.BLOG_POST, post.id, user.id)

        report = await engagement.reconcile_counters()

        assert report.blog_posts_checked == 1
        assert report.total_fixed == 0

    @pytest.mark.asyncio
    async def test_drifted_counters_are_recomputed_from_facts(self, unit_env):
        # Arrange
        engagement = await unit_env.get(EngagementService)
        posts = await unit_env.get(BlogPostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        poll_repo = await unit_env.get(PollRepository)
        polls = await unit_env.get(PollService)
        comments = await unit_env.get(CommentService)

        admin = await seed_account(unit_env, role=Role.ADMIN)
        user = await seed_account(unit_env)
        post = await published_post(unit_env)
        comment = await comments.create_comment(post.id, principal_for(user), "Hi")
        poll = await polls.create_poll(principal_for(admin), "Best day?", ["Mon", "Fri"])

        await engagement.like(LikeTargetType.BLOG_POST, post.id, user.id)
        await engagement.record_view(post.id, user.id)
        await polls.vote(poll.id, poll.options[0].id, user)

        await posts.set_counters(post.id, likes=7, views=0)
        await comment_repo.set_likes(comment.id, 3)
        await poll_repo.set_option_votes(poll.id, poll.options[1].id, 4)

        # Act
        report = await engagement.reconcile_counters()

        # Assert
        assert report.blog_posts_fixed == 1
        assert report.comments_fixed == 1
        assert report.poll_options_fixed == 1
        assert report.total_fixed == 3

        repaired = await posts.find_by_id(post.id)
        assert (repaired.likes, repaired.views) == (1, 1)
        assert (await comment_repo.find_by_id(comment.id)).likes == 0
        repaired_poll = await poll_repo.find_by_id(poll.id)
        assert [o.votes for o in repaired_poll.options] == [1, 0]

    @pytest.mark.asyncio
    async def test_drifted_download_counter_is_recomputed_from_ledger(self, unit_env):
        engagement = await unit_env.get(EngagementService)
        resources = await unit_env.get(ResourceService)
        resource_repo = await unit_env.get(LearningResourceRepository)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        student = await seed_account(unit_env)
        resource = await resources.create_resource(
            principal_for(admin),
            title="Past papers",
            type=ResourceType.DOCUMENT,
            file_url="https://files.example.edu/papers.doc",
        )
        await resources.record_download(resource.id, student.id)
        await resource_repo.set_downloads(resource.id, 9)

        report = await engagement.reconcile_counters()

        assert report.resources_checked == 1
        assert report.resources_fixed == 1
        assert (await resource_repo.find_by_id(resource.id)).downloads == 1
