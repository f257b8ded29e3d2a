"""Repository interfaces for the portal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from portal.domain.repository.account import AccountRepository
from portal.domain.repository.blog import BlogPostRepository
from portal.domain.repository.comment import CommentRepository
from portal.domain.repository.engagement import LikeRepository, ViewRepository
from portal.domain.repository.event import EventRegistrationRepository, EventRepository
from portal.domain.repository.poll import PollRepository, PollVoteRepository
from portal.domain.repository.resource import (
    LearningResourceRepository,
    ResourceDownloadRepository,
    ResourceRatingRepository,
)

__all__ = [
    "AccountRepository",
    "BlogPostRepository",
    "CommentRepository",
    "LikeRepository",
    "ViewRepository",
    "PollRepository",
    "PollVoteRepository",
    "LearningResourceRepository",
    "ResourceDownloadRepository",
    "ResourceRatingRepository",
    "EventRepository",
    "EventRegistrationRepository",
]
