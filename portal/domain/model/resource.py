"""Learning resource entity and its engagement facts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import (
    Difficulty,
    ResourceDownloadId,
    ResourceId,
    ResourceRatingId,
    ResourceType,
    UserId,
)

MIN_RATING = 1
MAX_RATING = 5


class LearningResource(DomainModel):
    """Shared study material.

    The file itself lives in external object storage; only its URL and
    metadata are kept here. ``downloads``, ``rating`` and ``rating_count``
    are derived from the download and rating ledgers and are never written
    by a plain save.
    """

    id: ResourceId
    uploaded_by_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = None
    type: ResourceType
    category: str = "general"
    file_url: str
    file_name: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)  # bytes
    difficulty: Optional[Difficulty] = None
    tags: list[str] = Field(default_factory=list)
    downloads: int = Field(default=0, ge=0)
    rating: int = Field(default=0, ge=0, le=MAX_RATING * 10)  # average x 10
    rating_count: int = Field(default=0, ge=0)
    preview_available: bool = False
    thumbnail_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def average_rating(self) -> float:
        return self.rating / 10


class ResourceDownload(DomainModel):
    """One download of a resource. Repeat downloads are separate rows."""

    id: ResourceDownloadId
    user_id: UserId
    resource_id: ResourceId
    created_at: datetime = Field(default_factory=utcnow)


class ResourceRating(DomainModel):
    """A user's star rating of a resource, unique per (user, resource)."""

    id: ResourceRatingId
    user_id: UserId
    resource_id: ResourceId
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
