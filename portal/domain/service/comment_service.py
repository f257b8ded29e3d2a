"""Comment domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from portal.domain.error import NotFoundError, ValidationError
from portal.domain.model import Comment, Principal
from portal.domain.repository import CommentRepository, LikeRepository
from portal.domain.value import BlogPostId, CommentId, LikeTargetType

from .access_service import AccessService
from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, like_repository: LikeRepository
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            like_repository: Like repository (likes are removed with comments)
        """
        self.comment_repository = comment_repository
        self.like_repository = like_repository

    async def create_comment(
        self,
        blog_post_id: BlogPostId,
        author: Principal,
        content: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment or a reply.

        The blog post's existence is checked by the caller.

        Raises:
            ValidationError: If content is empty or the parent is on another post
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            blog_post_id=str(blog_post_id),
            author_id=str(author.id),
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Comment cannot be empty")

            if parent_comment_id:
                parent = await self.get_comment(parent_comment_id)
                if parent.blog_post_id != blog_post_id:
                    raise ValidationError("Parent comment belongs to another post")

            comment = Comment(
                id=CommentId(uuid4()),
                blog_post_id=blog_post_id,
                author_id=author.id,
                parent_comment_id=parent_comment_id,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_comments_for_post(self, blog_post_id: BlogPostId) -> list[Comment]:
        return await self.comment_repository.find_by_blog_post(blog_post_id)

    async def delete_comment(self, comment_id: CommentId, actor: Principal) -> int:
        """Delete a comment and its replies (owner or admin tier).

        Returns:
            Number of comments removed
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)
            AccessService.ensure_owner_or_elevated(
                actor, comment.author_id, "comment", comment.id
            )

            thread = await self.comment_repository.find_by_blog_post(comment.blog_post_id)
            doomed = self._collect_replies(comment.id, thread)

            await self.like_repository.delete_by_targets(LikeTargetType.COMMENT, doomed)
            await self.comment_repository.delete(doomed)
            logfire.info("Comment deleted", comment_id=str(comment_id), removed=len(doomed))
            return len(doomed)

    @staticmethod
    def _collect_replies(root_id: CommentId, thread: list[Comment]) -> list[CommentId]:
        children: dict[CommentId, list[CommentId]] = {}
        for item in thread:
            if item.parent_comment_id:
                children.setdefault(item.parent_comment_id, []).append(item.id)

        collected = [root_id]
        stack = [root_id]
        while stack:
            for child in children.get(stack.pop(), []):
                collected.append(child)
                stack.append(child)
        return collected
