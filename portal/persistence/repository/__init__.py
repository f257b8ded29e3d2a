"""PostgreSQL repository implementations."""

from portal.persistence.repository.account import PostgresAccountRepository
from portal.persistence.repository.blog import PostgresBlogPostRepository
from portal.persistence.repository.comment import PostgresCommentRepository
from portal.persistence.repository.engagement import (
    PostgresLikeRepository,
    PostgresViewRepository,
)
from portal.persistence.repository.event import (
    PostgresEventRegistrationRepository,
    PostgresEventRepository,
)
from portal.persistence.repository.poll import (
    PostgresPollRepository,
    PostgresPollVoteRepository,
)
from portal.persistence.repository.resource import (
    PostgresLearningResourceRepository,
    PostgresResourceDownloadRepository,
    PostgresResourceRatingRepository,
)

__all__ = [
    "PostgresAccountRepository",
    "PostgresBlogPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresViewRepository",
    "PostgresPollRepository",
    "PostgresPollVoteRepository",
    "PostgresLearningResourceRepository",
    "PostgresResourceDownloadRepository",
    "PostgresResourceRatingRepository",
    "PostgresEventRepository",
    "PostgresEventRegistrationRepository",
]
