"""Engagement facts.

Each fact records one user's action on one target and is unique per
(user, target). Counters on the target are derived from these rows.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import BlogPostId, LikeId, LikeTargetType, UserId, ViewId


class Like(DomainModel):
    """Like on a blog post or comment (polymorphic target)."""

    id: LikeId
    user_id: UserId
    target_type: LikeTargetType
    target_id: UUID  # BlogPostId or CommentId
    created_at: datetime = Field(default_factory=utcnow)


class View(DomainModel):
    """First view of a blog post by an authenticated user."""

    id: ViewId
    user_id: UserId
    blog_post_id: BlogPostId
    created_at: datetime = Field(default_factory=utcnow)
