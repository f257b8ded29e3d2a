"""Unlike use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.engagement.like import LikeResponse
from portal.domain.model import Principal
from portal.domain.service import EngagementService
from portal.domain.value import LikeTargetType


class UnlikeRequest(BaseModel):
    actor: Principal
    target_type: LikeTargetType
    target_id: str  # UUID string


class UnlikeUseCase:
    """Use case for removing a like. Removing an absent like is a no-op."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: UnlikeRequest) -> LikeResponse:
        likes = await self.engagement_service.unlike(
            request.target_type, UUID(request.target_id), request.actor.id
        )
        return LikeResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            likes_count=likes,
            is_liked_by_user=False,
        )
