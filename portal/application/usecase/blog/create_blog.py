"""Create blog post use case."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.application.usecase.common import BlogPostItem
from portal.domain.model import Principal
from portal.domain.service import BlogService


class CreateBlogRequest(BaseModel):
    """Create blog post request."""

    actor: Principal
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    category: str = "general"
    tags: list[str] = Field(default_factory=list)
    read_time: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list)


class CreateBlogResponse(BaseModel):
    post: BlogPostItem
    message: str


class CreateBlogUseCase:
    """Use case for writing a blog post.

    Posts by the admin tier go live at once; others await moderation.
    """

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: CreateBlogRequest) -> CreateBlogResponse:
        post = await self.blog_service.create_post(
            request.actor, **request.model_dump(exclude={"actor"})
        )
        message = (
            "Blog post published"
            if post.published
            else "Blog post submitted for review"
        )
        return CreateBlogResponse(post=BlogPostItem.from_post(post), message=message)
