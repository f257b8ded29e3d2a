"""Leaderboard use case."""

from pydantic import BaseModel

from portal.domain.service import GamificationService
from portal.domain.value import UserId


class LeaderboardRequest(BaseModel):
    pass


class LeaderboardItem(BaseModel):
    rank: int
    user_id: UserId
    name: str
    initials: str
    level: int
    xp: int


class LeaderboardResponse(BaseModel):
    leaders: list[LeaderboardItem]


class LeaderboardUseCase:
    """Use case for the student leaderboard."""

    def __init__(self, gamification_service: GamificationService) -> None:
        self.gamification_service = gamification_service

    async def execute(self, request: LeaderboardRequest) -> LeaderboardResponse:
        entries = await self.gamification_service.leaderboard()
        return LeaderboardResponse(
            leaders=[
                LeaderboardItem(rank=rank, **entry.model_dump())
                for rank, entry in enumerate(entries, start=1)
            ]
        )
