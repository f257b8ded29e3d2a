"""Most viewed blog posts use case."""

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.repository import BlogPostRepository
from portal.domain.service import AccessService
from portal.domain.value import BlogPostId

TOP_BLOGS_LIMIT = 5


class TopBlogsRequest(BaseModel):
    actor: Principal


class TopBlogItem(BaseModel):
    id: BlogPostId
    title: str
    views: int
    likes: int


class TopBlogsResponse(BaseModel):
    blogs: list[TopBlogItem]


class TopBlogsUseCase:
    """Use case for the published posts with the most views."""

    def __init__(self, blog_post_repository: BlogPostRepository) -> None:
        self.blog_post_repository = blog_post_repository

    async def execute(self, request: TopBlogsRequest) -> TopBlogsResponse:
        AccessService.require_admin(request.actor)
        posts = await self.blog_post_repository.find_most_viewed(TOP_BLOGS_LIMIT)
        return TopBlogsResponse(
            blogs=[
                TopBlogItem(id=p.id, title=p.title, views=p.views, likes=p.likes)
                for p in posts
            ]
        )
