"""List blog posts use case."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.application.usecase.common import BlogPostItem
from portal.domain.model import Principal
from portal.domain.service import BlogService, EngagementService
from portal.domain.value import LikeTargetType


class ListBlogsRequest(BaseModel):
    """List blog posts request."""

    viewer: Optional[Principal] = None
    include_unpublished: bool = False
    category: Optional[str] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListBlogsResponse(BaseModel):
    posts: list[BlogPostItem]


class ListBlogsUseCase:
    """Use case for listing blog posts, newest first."""

    def __init__(
        self, blog_service: BlogService, engagement_service: EngagementService
    ) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
            engagement_service: Engagement service (like state lookup)
        """
        self.blog_service = blog_service
        self.engagement_service = engagement_service

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        """Execute list blogs flow.

        Steps:
        1. Load the page of posts visible to the viewer
        2. Batch-load which of them the viewer liked
        """
        posts = await self.blog_service.list_posts(
            request.viewer,
            include_unpublished=request.include_unpublished,
            category=request.category,
            limit=request.limit,
            offset=request.offset,
        )

        viewer_id = request.viewer.id if request.viewer else None
        liked = await self.engagement_service.liked_targets(
            viewer_id, LikeTargetType.BLOG_POST, [post.id for post in posts]
        )
        return ListBlogsResponse(
            posts=[
                BlogPostItem.from_post(post, liked.get(post.id, False))
                for post in posts
            ]
        )
