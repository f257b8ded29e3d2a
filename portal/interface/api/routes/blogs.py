"""Blog post routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from portal.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    ListBlogsUseCase,
    ModerateBlogUseCase,
    UpdateBlogUseCase,
)
from portal.application.usecase.blog.create_blog import (
    CreateBlogRequest,
    CreateBlogResponse,
)
from portal.application.usecase.blog.delete_blog import (
    DeleteBlogRequest,
    DeleteBlogResponse,
)
from portal.application.usecase.blog.get_blog import GetBlogRequest, GetBlogResponse
from portal.application.usecase.blog.list_blogs import (
    ListBlogsRequest,
    ListBlogsResponse,
)
from portal.application.usecase.blog.moderate_blog import (
    ModerateBlogRequest,
    ModerateBlogResponse,
)
from portal.application.usecase.blog.update_blog import (
    UpdateBlogRequest,
    UpdateBlogResponse,
)
from portal.application.usecase.engagement import LikeUseCase, UnlikeUseCase
from portal.application.usecase.engagement.like import LikeRequest, LikeResponse
from portal.application.usecase.engagement.unlike import UnlikeRequest
from portal.domain.value import LikeTargetType
from portal.interface.api.security import RequestSession

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


class CreateBlogAPIRequest(BaseModel):
    """API request for creating a blog post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    category: str = "general"
    tags: list[str] = Field(default_factory=list)
    read_time: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list)


class UpdateBlogAPIRequest(BaseModel):
    """API request for editing a blog post. Omitted fields are unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    read_time: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    image_urls: Optional[list[str]] = None


class ModerateBlogAPIRequest(BaseModel):
    published: bool
    featured: Optional[bool] = None


@router.post("", response_model=CreateBlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: CreateBlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    session: FromDishka[RequestSession],
) -> CreateBlogResponse:
    """Create a blog post.

    Posts by the admin tier are published immediately; other posts wait
    for moderation.
    """
    actor = await session.principal()
    return await create_blog_use_case.execute(
        CreateBlogRequest(actor=actor, **request.model_dump())
    )


@router.get("", response_model=ListBlogsResponse)
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    session: FromDishka[RequestSession],
    category: Optional[str] = None,
    include_unpublished: bool = False,
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListBlogsResponse:
    """List blog posts, newest first.

    ``include_unpublished`` only takes effect for the admin tier.
    """
    viewer = await session.optional_principal()
    return await list_blogs_use_case.execute(
        ListBlogsRequest(
            viewer=viewer,
            include_unpublished=include_unpublished,
            category=category,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{post_id}", response_model=GetBlogResponse)
async def get_blog(
    post_id: UUID,
    get_blog_use_case: FromDishka[GetBlogUseCase],
    session: FromDishka[RequestSession],
) -> GetBlogResponse:
    """Read a blog post.

    The first read by an authenticated user counts as a view.
    """
    viewer = await session.optional_principal()
    return await get_blog_use_case.execute(
        GetBlogRequest(post_id=str(post_id), viewer=viewer)
    )


@router.put("/{post_id}", response_model=UpdateBlogResponse)
async def update_blog(
    post_id: UUID,
    request: UpdateBlogAPIRequest,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    session: FromDishka[RequestSession],
) -> UpdateBlogResponse:
    """Edit a blog post (author or admin tier)."""
    actor = await session.principal()
    return await update_blog_use_case.execute(
        UpdateBlogRequest(
            actor=actor,
            post_id=str(post_id),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.put("/{post_id}/moderation", response_model=ModerateBlogResponse)
async def moderate_blog(
    post_id: UUID,
    request: ModerateBlogAPIRequest,
    moderate_blog_use_case: FromDishka[ModerateBlogUseCase],
    session: FromDishka[RequestSession],
) -> ModerateBlogResponse:
    """Publish, unpublish or feature a blog post (admin tier)."""
    actor = await session.principal()
    return await moderate_blog_use_case.execute(
        ModerateBlogRequest(
            actor=actor,
            post_id=str(post_id),
            published=request.published,
            featured=request.featured,
        )
    )


@router.delete("/{post_id}", response_model=DeleteBlogResponse)
async def delete_blog(
    post_id: UUID,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    session: FromDishka[RequestSession],
) -> DeleteBlogResponse:
    """Delete a blog post with its comments, likes and views."""
    actor = await session.principal()
    return await delete_blog_use_case.execute(
        DeleteBlogRequest(actor=actor, post_id=str(post_id))
    )


@router.post("/{post_id}/like", response_model=LikeResponse)
async def like_blog(
    post_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    session: FromDishka[RequestSession],
) -> LikeResponse:
    """Like a blog post. Liking again changes nothing."""
    actor = await session.principal()
    return await like_use_case.execute(
        LikeRequest(
            actor=actor, target_type=LikeTargetType.BLOG_POST, target_id=str(post_id)
        )
    )


@router.delete("/{post_id}/like", response_model=LikeResponse)
async def unlike_blog(
    post_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    session: FromDishka[RequestSession],
) -> LikeResponse:
    """Remove the caller's like from a blog post."""
    actor = await session.principal()
    return await unlike_use_case.execute(
        UnlikeRequest(
            actor=actor, target_type=LikeTargetType.BLOG_POST, target_id=str(post_id)
        )
    )
