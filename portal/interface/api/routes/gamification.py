"""Gamification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from portal.application.usecase.gamification import (
    BadgesUseCase,
    LeaderboardUseCase,
    UserProgressUseCase,
)
from portal.application.usecase.gamification.badges import (
    BadgesRequest,
    BadgesResponse,
)
from portal.application.usecase.gamification.leaderboard import (
    LeaderboardRequest,
    LeaderboardResponse,
)
from portal.application.usecase.gamification.user_progress import (
    UserProgressRequest,
    UserProgressResponse,
)
from portal.interface.api.security import RequestSession

router = APIRouter(prefix="/gamification", tags=["gamification"], route_class=DishkaRoute)


@router.get("/user-stats/{user_id}", response_model=UserProgressResponse)
async def user_stats(
    user_id: UUID,
    user_progress_use_case: FromDishka[UserProgressUseCase],
    session: FromDishka[RequestSession],
) -> UserProgressResponse:
    """Level and experience of a user (self or admin tier)."""
    actor = await session.principal()
    return await user_progress_use_case.execute(
        UserProgressRequest(actor=actor, user_id=str(user_id))
    )


@router.get("/badges/{user_id}", response_model=BadgesResponse)
async def badges(
    user_id: UUID,
    badges_use_case: FromDishka[BadgesUseCase],
    session: FromDishka[RequestSession],
) -> BadgesResponse:
    """Every badge with whether the user earned it (self or admin tier)."""
    actor = await session.principal()
    return await badges_use_case.execute(
        BadgesRequest(actor=actor, user_id=str(user_id))
    )


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def leaderboard(
    leaderboard_use_case: FromDishka[LeaderboardUseCase],
    session: FromDishka[RequestSession],
) -> LeaderboardResponse:
    """Top students by experience. Any signed-in member may read it."""
    await session.principal()
    return await leaderboard_use_case.execute(LeaderboardRequest())
