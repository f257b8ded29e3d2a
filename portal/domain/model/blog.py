"""Blog post entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import BlogPostId, UserId


class BlogPost(DomainModel):
    """Blog post.

    Posts by elevated authors are published immediately; everyone else's
    wait for moderation. ``likes`` and ``views`` are derived counters kept
    equal to the number of like and view facts.
    """

    id: BlogPostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    excerpt: Optional[str] = None
    content: str = Field(min_length=1)
    category: str = "general"
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    featured: bool = False
    likes: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    read_time: Optional[int] = Field(default=None, ge=0)  # minutes
    image_url: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
