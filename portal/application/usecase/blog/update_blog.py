"""Update blog post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from portal.application.usecase.common import BlogPostItem
from portal.domain.model import Principal
from portal.domain.service import BlogService
from portal.domain.value import BlogPostId


class UpdateBlogRequest(BaseModel):
    """Update blog post request. Unset fields are left unchanged."""

    actor: Principal
    post_id: str  # UUID string
    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    read_time: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    image_urls: Optional[list[str]] = None


class UpdateBlogResponse(BaseModel):
    post: BlogPostItem


class UpdateBlogUseCase:
    """Use case for editing a blog post (author or admin tier)."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: UpdateBlogRequest) -> UpdateBlogResponse:
        changes = {
            key: value
            for key, value in request.model_dump(
                exclude={"actor", "post_id"}, exclude_unset=True
            ).items()
            if value is not None
        }
        post = await self.blog_service.update_post(
            BlogPostId(UUID(request.post_id)), request.actor, changes
        )
        return UpdateBlogResponse(post=BlogPostItem.from_post(post))
