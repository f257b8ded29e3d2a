"""Unit tests for the admin use cases."""

import pytest

from portal.adapter.email import MockEmailSender
from portal.application.usecase.admin import (
    AnalyticsOverviewUseCase,
    ChangeRoleUseCase,
    ListAccountsUseCase,
    RecentActivityUseCase,
    ReviewAccountUseCase,
    TopBlogsUseCase,
)
from portal.application.usecase.admin.analytics_overview import AnalyticsOverviewRequest
from portal.application.usecase.admin.change_role import ChangeRoleRequest
from portal.application.usecase.admin.list_accounts import ListAccountsRequest
from portal.application.usecase.admin.recent_activity import RecentActivityRequest
from portal.application.usecase.admin.review_account import ReviewAccountRequest
from portal.application.usecase.admin.top_blogs import TopBlogsRequest
from portal.domain.error import AuthorizationError
from portal.domain.service import (
    BlogService,
    EngagementService,
    EventService,
    PollService,
    ResourceService,
)
from portal.domain.value import (
    ApprovalStatus,
    EventType,
    LikeTargetType,
    ResourceType,
    Role,
)
from tests.harness import create_env_fixture, principal_for, run_after_commit, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestReviewAccountUseCase:
    @pytest.mark.asyncio
    async def test_approval_notifies_account_holder(self, unit_env):
        use_case = await unit_env.get(ReviewAccountUseCase)
        sender = await unit_env.get(MockEmailSender)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        pending = await seed_account(
            unit_env, email="wait@example.com", approval_status=ApprovalStatus.PENDING
        )

        response = await use_case.execute(
            ReviewAccountRequest(
                actor=principal_for(admin),
                account_id=str(pending.id),
                status=ApprovalStatus.APPROVED,
            )
        )

        assert response.changed is True
        assert response.message == "Account approved"
        await run_after_commit(unit_env)
        assert [m.to for m in sender.outbox] == ["wait@example.com"]

    @pytest.mark.asyncio
    async def test_noop_review_sends_nothing(self, unit_env):
        use_case = await unit_env.get(ReviewAccountUseCase)
        sender = await unit_env.get(MockEmailSender)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        approved = await seed_account(unit_env)

        response = await use_case.execute(
            ReviewAccountRequest(
                actor=principal_for(admin),
                account_id=str(approved.id),
                status=ApprovalStatus.APPROVED,
            )
        )

        assert response.changed is False
        assert response.message == "Account already approved"
        await run_after_commit(unit_env)
        assert sender.outbox == []


class TestListAccountsUseCase:
    @pytest.mark.asyncio
    async def test_lists_pending_accounts(self, unit_env):
        use_case = await unit_env.get(ListAccountsUseCase)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        pending = await seed_account(unit_env, approval_status=ApprovalStatus.PENDING)
        await seed_account(unit_env)

        response = await use_case.execute(ListAccountsRequest(actor=principal_for(admin)))

        assert response.total == 1
        assert response.users[0].id == str(pending.id)

    @pytest.mark.asyncio
    async def test_members_cannot_list(self, unit_env):
        use_case = await unit_env.get(ListAccountsUseCase)
        alumnus = await seed_account(unit_env, role=Role.ALUMNUS)

        with pytest.raises(AuthorizationError):
            await use_case.execute(ListAccountsRequest(actor=principal_for(alumnus)))


class TestChangeRoleUseCase:
    @pytest.mark.asyncio
    async def test_role_change_notifies(self, unit_env):
        use_case = await unit_env.get(ChangeRoleUseCase)
        sender = await unit_env.get(MockEmailSender)
        super_admin = await seed_account(unit_env, role=Role.SUPER_ADMIN)
        student = await seed_account(unit_env, email="grad@example.com")

        response = await use_case.execute(
            ChangeRoleRequest(
                actor=principal_for(super_admin),
                account_id=str(student.id),
                role=Role.ALUMNUS,
            )
        )

        assert response.user.role == Role.ALUMNUS
        await run_after_commit(unit_env)
        assert [m.to for m in sender.outbox] == ["grad@example.com"]


class TestAnalyticsOverviewUseCase:
    @pytest.mark.asyncio
    async def test_overview_counts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AnalyticsOverviewUseCase)
        blog = await unit_env.get(BlogService)
        polls = await unit_env.get(PollService)
        engagement = await unit_env.get(EngagementService)

        admin = await seed_account(unit_env, role=Role.ADMIN)
        student = await seed_account(unit_env)
        await seed_account(unit_env, approval_status=ApprovalStatus.PENDING)

        post = await blog.create_post(principal_for(admin), title="News", content="Body")
        await blog.create_post(principal_for(student), title="Draft", content="Body")
        await engagement.like(LikeTargetType.BLOG_POST, post.id, student.id)
        await engagement.record_view(post.id, student.id)
        poll = await polls.create_poll(principal_for(admin), "Q?", ["A", "B"])
        await polls.vote(poll.id, poll.options[0].id, student)

        # Act
        overview = await use_case.execute(
            AnalyticsOverviewRequest(actor=principal_for(admin))
        )

        # Assert
        assert overview.total_accounts == 3
        assert overview.accounts_by_status[ApprovalStatus.PENDING] == 1
        assert (overview.published_blogs, overview.unpublished_blogs) == (1, 1)
        assert (overview.total_blog_likes, overview.total_blog_views) == (1, 1)
        assert (overview.active_polls, overview.closed_polls) == (1, 0)
        assert overview.total_poll_votes == 1
        assert overview.learning_resources == 0
        assert overview.total_resource_downloads == 0
        assert (overview.total_events, overview.total_event_registrations) == (0, 0)

    @pytest.mark.asyncio
    async def test_members_cannot_view_analytics(self, unit_env):
        use_case = await unit_env.get(AnalyticsOverviewUseCase)
        student = await seed_account(unit_env)

        with pytest.raises(AuthorizationError):
            await use_case.execute(AnalyticsOverviewRequest(actor=principal_for(student)))

    @pytest.mark.asyncio
    async def test_overview_counts_downloads_and_events(self, unit_env):
        use_case = await unit_env.get(AnalyticsOverviewUseCase)
        resources = await unit_env.get(ResourceService)
        events = await unit_env.get(EventService)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        student = await seed_account(unit_env)
        resource = await resources.create_resource(
            principal_for(admin),
            title="Lecture notes",
            type=ResourceType.PDF,
            file_url="https://files.example.edu/notes.pdf",
        )
        await resources.record_download(resource.id, student.id)
        await resources.record_download(resource.id, admin.id)
        event = await events.create_event(
            principal_for(admin),
            title="Careers fair",
            date=resource.created_at,
            time="09:00",
            location="Main hall",
            type=EventType.CONFERENCE,
            capacity=100,
        )
        await events.register(event.id, student.id)

        overview = await use_case.execute(
            AnalyticsOverviewRequest(actor=principal_for(admin))
        )

        assert overview.total_resource_downloads == 2
        assert overview.total_events == 1
        assert overview.total_event_registrations == 1


class TestTopBlogsUseCase:
    @pytest.mark.asyncio
    async def test_published_posts_by_views(self, unit_env):
        use_case = await unit_env.get(TopBlogsUseCase)
        blog = await unit_env.get(BlogService)
        engagement = await unit_env.get(EngagementService)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        student = await seed_account(unit_env)
        quiet = await blog.create_post(principal_for(admin), title="Quiet", content="Body")
        popular = await blog.create_post(
            principal_for(admin), title="Popular", content="Body"
        )
        await blog.create_post(principal_for(student), title="Unreviewed", content="Body")
        await engagement.record_view(popular.id, student.id)
        await engagement.record_view(popular.id, admin.id)
        await engagement.record_view(quiet.id, student.id)

        response = await use_case.execute(TopBlogsRequest(actor=principal_for(admin)))

        assert [(b.title, b.views) for b in response.blogs] == [
            ("Popular", 2),
            ("Quiet", 1),
        ]

    @pytest.mark.asyncio
    async def test_members_cannot_view_top_blogs(self, unit_env):
        use_case = await unit_env.get(TopBlogsUseCase)
        student = await seed_account(unit_env)

        with pytest.raises(AuthorizationError):
            await use_case.execute(TopBlogsRequest(actor=principal_for(student)))


class TestRecentActivityUseCase:
    @pytest.mark.asyncio
    async def test_feed_merges_sources_newest_first(self, unit_env):
        use_case = await unit_env.get(RecentActivityUseCase)
        blog = await unit_env.get(BlogService)
        events = await unit_env.get(EventService)
        admin = await seed_account(unit_env, role=Role.ADMIN)
        await seed_account(unit_env, approval_status=ApprovalStatus.PENDING)
        post = await blog.create_post(principal_for(admin), title="Welcome", content="Hi")
        await events.create_event(
            principal_for(admin),
            title="Hackathon",
            date=post.created_at,
            time="09:00",
            location="Lab 1",
            type=EventType.ACADEMIC,
            capacity=40,
        )

        response = await use_case.execute(
            RecentActivityRequest(actor=principal_for(admin))
        )

        actions = {(a.action, a.subject) for a in response.activities}
        assert actions == {
            ("Event created", "Hackathon"),
            ("Blog post created", "Welcome"),
            ("New member joined", admin.full_name),
        }
        times = [a.time for a in response.activities]
        assert times == sorted(times, reverse=True)
