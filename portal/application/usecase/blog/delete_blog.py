"""Delete blog post use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import BlogService
from portal.domain.value import BlogPostId


class DeleteBlogRequest(BaseModel):
    actor: Principal
    post_id: str  # UUID string


class DeleteBlogResponse(BaseModel):
    success: bool = True
    message: str = "Blog post deleted"


class DeleteBlogUseCase:
    """Use case for deleting a blog post (author or admin tier)."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: DeleteBlogRequest) -> DeleteBlogResponse:
        await self.blog_service.delete_post(
            BlogPostId(UUID(request.post_id)), request.actor
        )
        return DeleteBlogResponse()
