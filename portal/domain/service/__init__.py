"""Domain services."""

from .access_service import AccessService
from .after_commit import AfterCommit
from .account_service import AccountService, NewAccountDetails
from .base import Service
from .blog_service import BlogService
from .comment_service import CommentService
from .engagement_service import EngagementService, ReconciliationReport
from .event_service import EventService
from .gamification_service import (
    Badge,
    GamificationService,
    LeaderboardEntry,
    UserProgress,
)
from .jwt_service import JWTService
from .notification_service import EmailMessage, EmailSender, NotificationService
from .password_service import PasswordService
from .poll_service import PollService
from .resource_service import ResourceService

__all__ = [
    "AccessService",
    "AccountService",
    "AfterCommit",
    "Badge",
    "BlogService",
    "CommentService",
    "EmailMessage",
    "EmailSender",
    "EngagementService",
    "EventService",
    "GamificationService",
    "JWTService",
    "LeaderboardEntry",
    "NewAccountDetails",
    "NotificationService",
    "PasswordService",
    "PollService",
    "ReconciliationReport",
    "ResourceService",
    "Service",
    "UserProgress",
]
