"""Create comment use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from portal.application.usecase.common import CommentItem
from portal.domain.model import Principal
from portal.domain.service import BlogService, CommentService
from portal.domain.value import BlogPostId, CommentId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    actor: Principal
    blog_post_id: str  # UUID string
    content: str = Field(min_length=1, max_length=5000)
    parent_comment_id: Optional[str] = None  # UUID string, for replies


class CreateCommentResponse(BaseModel):
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a blog post or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, blog_service: BlogService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
        """
        self.comment_service = comment_service
        self.blog_service = blog_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or parent comment does not exist
            ValidationError: If the parent is on another post
        """
        post = await self.blog_service.get_visible_post(
            BlogPostId(UUID(request.blog_post_id)), request.actor
        )
        parent_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.comment_service.create_comment(
            post.id, request.actor, request.content, parent_id
        )
        return CreateCommentResponse(comment=CommentItem.from_comment(comment))
