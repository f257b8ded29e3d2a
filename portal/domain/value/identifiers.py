"""Strongly typed identifiers for portal entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
BlogPostId = NewType("BlogPostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
ViewId = NewType("ViewId", UUID)
PollId = NewType("PollId", UUID)
PollOptionId = NewType("PollOptionId", UUID)
PollVoteId = NewType("PollVoteId", UUID)
ResourceId = NewType("ResourceId", UUID)
ResourceDownloadId = NewType("ResourceDownloadId", UUID)
ResourceRatingId = NewType("ResourceRatingId", UUID)
EventId = NewType("EventId", UUID)
EventRegistrationId = NewType("EventRegistrationId", UUID)
