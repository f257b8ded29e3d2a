"""Domain value objects for the department portal."""

from portal.domain.value.identifiers import (
    BlogPostId,
    CommentId,
    EventId,
    EventRegistrationId,
    LikeId,
    PollId,
    PollOptionId,
    PollVoteId,
    ResourceDownloadId,
    ResourceId,
    ResourceRatingId,
    UserId,
    ViewId,
)
from portal.domain.value.types import (
    ADMIN_TIER,
    ApprovalStatus,
    CampusLocation,
    Difficulty,
    Email,
    EventType,
    Gender,
    LikeTargetType,
    MatricNumber,
    PollStatus,
    RegistrationStatus,
    ResourceType,
    Role,
    TokenPurpose,
    normalize_level,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogPostId",
    "CommentId",
    "LikeId",
    "ViewId",
    "PollId",
    "PollOptionId",
    "PollVoteId",
    "ResourceId",
    "ResourceDownloadId",
    "ResourceRatingId",
    "EventId",
    "EventRegistrationId",
    # Types
    "ADMIN_TIER",
    "ApprovalStatus",
    "CampusLocation",
    "Difficulty",
    "Email",
    "EventType",
    "Gender",
    "LikeTargetType",
    "MatricNumber",
    "PollStatus",
    "RegistrationStatus",
    "ResourceType",
    "Role",
    "TokenPurpose",
    "normalize_level",
]
