"""List comments use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import CommentItem
from portal.domain.model import Principal
from portal.domain.service import BlogService, CommentService, EngagementService
from portal.domain.value import BlogPostId, LikeTargetType


class ListCommentsRequest(BaseModel):
    blog_post_id: str  # UUID string
    viewer: Optional[Principal] = None


class ListCommentsResponse(BaseModel):
    comments: list[CommentItem]


class ListCommentsUseCase:
    """Use case for listing a post's comments, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        engagement_service: EngagementService,
    ) -> None:
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.engagement_service = engagement_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        post = await self.blog_service.get_visible_post(
            BlogPostId(UUID(request.blog_post_id)), request.viewer
        )
        comments = await self.comment_service.get_comments_for_post(post.id)

        viewer_id = request.viewer.id if request.viewer else None
        liked = await self.engagement_service.liked_targets(
            viewer_id, LikeTargetType.COMMENT, [comment.id for comment in comments]
        )
        return ListCommentsResponse(
            comments=[
                CommentItem.from_comment(comment, liked.get(comment.id, False))
                for comment in comments
            ]
        )
