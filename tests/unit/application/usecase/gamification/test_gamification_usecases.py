"""Unit tests for the gamification use cases."""

import pytest

from portal.application.usecase.gamification import (
    BadgesUseCase,
    LeaderboardUseCase,
    UserProgressUseCase,
)
from portal.application.usecase.gamification.badges import BadgesRequest
from portal.application.usecase.gamification.leaderboard import LeaderboardRequest
from portal.application.usecase.gamification.user_progress import UserProgressRequest
from portal.domain.service import BlogService
from portal.domain.value import Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestGamificationUseCases:
    @pytest.mark.asyncio
    async def test_own_stats(self, unit_env):
        use_case = await unit_env.get(UserProgressUseCase)
        blog = await unit_env.get(BlogService)
        student = await seed_account(unit_env)
        await blog.create_post(principal_for(student), title="Notes", content="Body")

        stats = await use_case.execute(
            UserProgressRequest(actor=principal_for(student), user_id=str(student.id))
        )

        assert (stats.level, stats.xp, stats.blog_posts) == (1, 50, 1)
        assert stats.events_attended == 0

    @pytest.mark.asyncio
    async def test_badges_count_earned(self, unit_env):
        use_case = await unit_env.get(BadgesUseCase)
        student = await seed_account(unit_env)

        response = await use_case.execute(
            BadgesRequest(actor=principal_for(student), user_id=str(student.id))
        )

        assert len(response.badges) == 6
        assert response.earned == 0

    @pytest.mark.asyncio
    async def test_leaderboard_is_ranked_from_one(self, unit_env):
        use_case = await unit_env.get(LeaderboardUseCase)
        await seed_account(unit_env)
        await seed_account(unit_env)
        await seed_account(unit_env, role=Role.ADMIN)

        response = await use_case.execute(LeaderboardRequest())

        assert [leader.rank for leader in response.leaders] == [1, 2]
