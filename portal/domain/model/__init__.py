"""Domain model entities for the department portal."""

from portal.domain.model.account import Account
from portal.domain.model.blog import BlogPost
from portal.domain.model.comment import Comment
from portal.domain.model.engagement import Like, View
from portal.domain.model.poll import Poll, PollOption, PollVote
from portal.domain.model.principal import Principal
from portal.domain.model.event import Event, EventRegistration
from portal.domain.model.resource import (
    LearningResource,
    ResourceDownload,
    ResourceRating,
)

__all__ = [
    "Account",
    "Principal",
    "BlogPost",
    "Comment",
    "Like",
    "View",
    "Poll",
    "PollOption",
    "PollVote",
    "LearningResource",
    "ResourceDownload",
    "ResourceRating",
    "Event",
    "EventRegistration",
]
