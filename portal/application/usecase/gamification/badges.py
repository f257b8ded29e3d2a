"""Badges use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import GamificationService
from portal.domain.value import UserId


class BadgesRequest(BaseModel):
    actor: Principal
    user_id: str  # UUID string


class BadgeItem(BaseModel):
    name: str
    description: str
    earned: bool


class BadgesResponse(BaseModel):
    badges: list[BadgeItem]
    earned: int


class BadgesUseCase:
    def __init__(self, gamification_service: GamificationService) -> None:
        self.gamification_service = gamification_service

    async def execute(self, request: BadgesRequest) -> BadgesResponse:
        badges = await self.gamification_service.badges(
            request.actor, UserId(UUID(request.user_id))
        )
        return BadgesResponse(
            badges=[BadgeItem(**badge.model_dump()) for badge in badges],
            earned=sum(1 for badge in badges if badge.earned),
        )
