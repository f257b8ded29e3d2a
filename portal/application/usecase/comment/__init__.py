"""Comment use cases."""

from .create_comment import CreateCommentUseCase
from .delete_comment import DeleteCommentUseCase
from .list_comments import ListCommentsUseCase

__all__ = ["CreateCommentUseCase", "DeleteCommentUseCase", "ListCommentsUseCase"]
