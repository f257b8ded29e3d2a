"""Get blog post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import BlogPostItem
from portal.domain.model import Principal
from portal.domain.service import BlogService, EngagementService
from portal.domain.value import BlogPostId, LikeTargetType


class GetBlogRequest(BaseModel):
    """Get blog post request."""

    post_id: str  # UUID string
    viewer: Optional[Principal] = None  # None for anonymous callers


class GetBlogResponse(BaseModel):
    post: BlogPostItem


class GetBlogUseCase:
    """Use case for reading a blog post."""

    def __init__(
        self, blog_service: BlogService, engagement_service: EngagementService
    ) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
            engagement_service: Engagement ledger service
        """
        self.blog_service = blog_service
        self.engagement_service = engagement_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Execute get blog flow.

        Steps:
        1. Load the post if the viewer may see it
        2. Record the view (first view per authenticated user counts)
        3. Reload counters and the viewer's like state

        Raises:
            NotFoundError: If the post does not exist or is not visible
        """
        post_id = BlogPostId(UUID(request.post_id))
        post = await self.blog_service.get_visible_post(post_id, request.viewer)

        viewer_id = request.viewer.id if request.viewer else None
        if await self.engagement_service.record_view(post.id, viewer_id):
            post = await self.blog_service.get_post(post.id)

        liked = await self.engagement_service.liked_targets(
            viewer_id, LikeTargetType.BLOG_POST, [post.id]
        )
        return GetBlogResponse(
            post=BlogPostItem.from_post(post, liked.get(post.id, False))
        )
