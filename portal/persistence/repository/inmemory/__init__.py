"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .blog import InMemoryBlogPostRepository
from .comment import InMemoryCommentRepository
from .engagement import InMemoryLikeRepository, InMemoryViewRepository
from .event import InMemoryEventRegistrationRepository, InMemoryEventRepository
from .poll import InMemoryPollRepository, InMemoryPollVoteRepository
from .resource import (
    InMemoryLearningResourceRepository,
    InMemoryResourceDownloadRepository,
    InMemoryResourceRatingRepository,
)

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryBlogPostRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryViewRepository",
    "InMemoryPollRepository",
    "InMemoryPollVoteRepository",
    "InMemoryLearningResourceRepository",
    "InMemoryResourceDownloadRepository",
    "InMemoryResourceRatingRepository",
    "InMemoryEventRepository",
    "InMemoryEventRegistrationRepository",
]
