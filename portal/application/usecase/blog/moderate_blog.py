"""Moderate blog post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import BlogPostItem
from portal.domain.model import Principal
from portal.domain.service import BlogService
from portal.domain.value import BlogPostId


class ModerateBlogRequest(BaseModel):
    actor: Principal
    post_id: str  # UUID string
    published: bool
    featured: Optional[bool] = None


class ModerateBlogResponse(BaseModel):
    post: BlogPostItem


class ModerateBlogUseCase:
    """Use case for publishing, unpublishing or featuring a post (admin tier)."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: ModerateBlogRequest) -> ModerateBlogResponse:
        post = await self.blog_service.moderate_post(
            BlogPostId(UUID(request.post_id)),
            request.actor,
            published=request.published,
            featured=request.featured,
        )
        return ModerateBlogResponse(post=BlogPostItem.from_post(post))
