"""Like use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import BlogService, EngagementService
from portal.domain.value import BlogPostId, LikeTargetType


class LikeRequest(BaseModel):
    """Like request."""

    actor: Principal
    target_type: LikeTargetType
    target_id: str  # UUID string


class LikeResponse(BaseModel):
    """Like state after the call."""

    target_type: LikeTargetType
    target_id: str
    likes_count: int
    is_liked_by_user: bool


class LikeUseCase:
    """Use case for liking a blog post or comment. Repeating it is a no-op."""

    def __init__(
        self, engagement_service: EngagementService, blog_service: BlogService
    ) -> None:
        """Initialize like use case.

        Args:
            engagement_service: Engagement ledger service
            blog_service: Blog service (visibility of unpublished posts)
        """
        self.engagement_service = engagement_service
        self.blog_service = blog_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the target does not exist or is not visible
        """
        target_id = UUID(request.target_id)
        if request.target_type == LikeTargetType.BLOG_POST:
            await self.blog_service.get_visible_post(BlogPostId(target_id), request.actor)

        likes = await self.engagement_service.like(
            request.target_type, target_id, request.actor.id
        )
        return LikeResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            likes_count=likes,
            is_liked_by_user=True,
        )
