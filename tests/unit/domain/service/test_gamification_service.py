"""Unit tests for GamificationService."""

from uuid import uuid4

import pytest

from portal.domain.error import AuthorizationError, NotFoundError
from portal.domain.service import (
    BlogService,
    CommentService,
    EventService,
    GamificationService,
    ResourceService,
)
from portal.domain.service.gamification_service import (
    ActivityCounts,
    badges_for,
    level_for,
)
from portal.domain.value import ApprovalStatus, EventType, ResourceType, Role, UserId
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


async def write_posts(env, author, count):
    blog = await env.get(BlogService)
    return [
        await blog.create_post(principal_for(author), title=f"Post {n}", content="Body")
        for n in range(count)
    ]


class TestLevelsAndBadges:
    def test_level_rises_every_two_hundred_xp(self):
        assert level_for(0) == 1
        assert level_for(199) == 1
        assert level_for(200) == 2
        assert level_for(1050) == 6

    def test_badges_follow_activity(self):
        badges = badges_for(ActivityCounts(blog_posts=2, comments=1, downloads=10))

        earned = {badge.name for badge in badges if badge.earned}

        assert len(badges) == 6
        assert earned == {"First Comment", "Resource Explorer", "Popular Contributor"}

    def test_no_activity_earns_nothing(self):
        assert not any(badge.earned for badge in badges_for(ActivityCounts()))


class TestProgress:
    @pytest.mark.asyncio
    async def test_progress_from_activity(self, unit_env):
        # Arrange
        gamification = await unit_env.get(GamificationService)
        comments = await unit_env.get(CommentService)
        resources = await unit_env.get(ResourceService)
        events = await unit_env.get(EventService)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        student = await seed_account(unit_env)

        posts = await write_posts(unit_env, student, 2)
        await comments.create_comment(posts[0].id, principal_for(student), "Nice")
        resource = await resources.create_resource(
            principal_for(admin),
            title="Slides",
            type=ResourceType.PDF,
            file_url="https://files.example.edu/slides.pdf",
        )
        await resources.record_download(resource.id, student.id)
        event = await events.create_event(
            principal_for(admin),
            title="Meetup",
            date=resource.created_at,
            time="18:00",
            location="Atrium",
            type=EventType.SOCIAL,
            capacity=10,
        )
        await events.register(event.id, student.id)

        # Act
        progress = await gamification.progress(principal_for(student), student.id)

        # Assert
        assert progress.xp == 2 * 50 + 15 + 5
        assert progress.level == 1
        assert progress.xp_to_next == 1000 - progress.xp
        assert progress.activity == ActivityCounts(
            blog_posts=2, comments=1, downloads=1, events=1
        )
        assert progress.total_badges == 2

    @pytest.mark.asyncio
    async def test_admin_may_read_anyone(self, unit_env):
        gamification = await unit_env.get(GamificationService)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        student = await seed_account(unit_env)
        await write_posts(unit_env, student, 5)

        badges = await gamification.badges(principal_for(admin), student.id)

        assert {b.name for b in badges if b.earned} == {"Popular Contributor", "Scholar"}

    @pytest.mark.asyncio
    async def test_members_cannot_read_each_other(self, unit_env):
        gamification = await unit_env.get(GamificationService)
        student = await seed_account(unit_env)
        other = await seed_account(unit_env)

        with pytest.raises(AuthorizationError):
            await gamification.progress(principal_for(student), other.id)

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        gamification = await unit_env.get(GamificationService)
        admin = await seed_account(unit_env, role=Role.ADMIN)

        with pytest.raises(NotFoundError):
            await gamification.progress(principal_for(admin), UserId(uuid4()))


class TestLeaderboard:
    @pytest.mark.asyncio
    async def test_students_ranked_by_content_xp(self, unit_env):
        gamification = await unit_env.get(GamificationService)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        quiet = await seed_account(unit_env)
        busy = await seed_account(unit_env)
        await seed_account(unit_env, approval_status=ApprovalStatus.PENDING)
        await write_posts(unit_env, admin, 3)
        await write_posts(unit_env, busy, 2)

        leaders = await gamification.leaderboard()

        assert [entry.user_id for entry in leaders] == [busy.id, quiet.id]
        assert leaders[0].xp == 100
        assert leaders[0].initials == "TS"
        assert leaders[1].level == 1
