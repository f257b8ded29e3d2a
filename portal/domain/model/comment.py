"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import BlogPostId, CommentId, UserId


class Comment(DomainModel):
    """Comment on a blog post, optionally replying to another comment."""

    id: CommentId
    blog_post_id: BlogPostId
    author_id: UserId
    parent_comment_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=5000)
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
