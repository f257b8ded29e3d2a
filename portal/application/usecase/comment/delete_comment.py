"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import CommentService
from portal.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    actor: Principal
    comment_id: str  # UUID string


class DeleteCommentResponse(BaseModel):
    success: bool = True
    deleted: int


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies (author or admin tier)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        deleted = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), request.actor
        )
        return DeleteCommentResponse(deleted=deleted)
