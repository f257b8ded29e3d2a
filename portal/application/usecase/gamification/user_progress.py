"""User progress use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import GamificationService
from portal.domain.value import UserId


class UserProgressRequest(BaseModel):
    actor: Principal
    user_id: str  # UUID string


class UserProgressResponse(BaseModel):
    user_id: UserId
    level: int
    xp: int
    xp_to_next: int
    total_badges: int
    blog_posts: int
    comments: int
    downloads: int
    events_attended: int


class UserProgressUseCase:
    """Use case for a user's level and experience."""

    def __init__(self, gamification_service: GamificationService) -> None:
        self.gamification_service = gamification_service

    async def execute(self, request: UserProgressRequest) -> UserProgressResponse:
        progress = await self.gamification_service.progress(
            request.actor, UserId(UUID(request.user_id))
        )
        return UserProgressResponse(
            user_id=progress.user_id,
            level=progress.level,
            xp=progress.xp,
            xp_to_next=progress.xp_to_next,
            total_badges=progress.total_badges,
            blog_posts=progress.activity.blog_posts,
            comments=progress.activity.comments,
            downloads=progress.activity.downloads,
            events_attended=progress.activity.events,
        )
