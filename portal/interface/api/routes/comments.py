"""Comment routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from portal.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from portal.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
)
from portal.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
)
from portal.application.usecase.comment.list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
)
from portal.application.usecase.engagement import LikeUseCase, UnlikeUseCase
from portal.application.usecase.engagement.like import LikeRequest, LikeResponse
from portal.application.usecase.engagement.unlike import UnlikeRequest
from portal.domain.value import LikeTargetType
from portal.interface.api.security import RequestSession

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment or reply."""

    content: str = Field(min_length=1, max_length=5000)
    parent_comment_id: Optional[UUID] = None


@router.post(
    "/blogs/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    session: FromDishka[RequestSession],
) -> CreateCommentResponse:
    """Comment on a blog post, or reply to a comment on it."""
    actor = await session.principal()
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            actor=actor,
            blog_post_id=str(post_id),
            content=request.content,
            parent_comment_id=(
                str(request.parent_comment_id) if request.parent_comment_id else None
            ),
        )
    )


@router.get("/blogs/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    session: FromDishka[RequestSession],
) -> ListCommentsResponse:
    """List a blog post's comments, oldest first."""
    viewer = await session.optional_principal()
    return await list_comments_use_case.execute(
        ListCommentsRequest(blog_post_id=str(post_id), viewer=viewer)
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    session: FromDishka[RequestSession],
) -> DeleteCommentResponse:
    """Delete a comment and its replies (author or admin tier)."""
    actor = await session.principal()
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(actor=actor, comment_id=str(comment_id))
    )


@router.post("/comments/{comment_id}/like", response_model=LikeResponse)
async def like_comment(
    comment_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    session: FromDishka[RequestSession],
) -> LikeResponse:
    """Like a comment. Liking again changes nothing."""
    actor = await session.principal()
    return await like_use_case.execute(
        LikeRequest(
            actor=actor, target_type=LikeTargetType.COMMENT, target_id=str(comment_id)
        )
    )


@router.delete("/comments/{comment_id}/like", response_model=LikeResponse)
async def unlike_comment(
    comment_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    session: FromDishka[RequestSession],
) -> LikeResponse:
    """Remove the caller's like from a comment."""
    actor = await session.principal()
    return await unlike_use_case.execute(
        UnlikeRequest(
            actor=actor, target_type=LikeTargetType.COMMENT, target_id=str(comment_id)
        )
    )
