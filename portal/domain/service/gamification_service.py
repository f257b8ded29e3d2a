"""Student progress: experience levels, badges and the leaderboard.

Everything here is derived from stored activity (blog posts, comments,
resource downloads and event registrations); nothing is persisted.
"""

import logfire

from portal.domain.error import AuthorizationError, NotFoundError
from portal.domain.model import Principal
from portal.domain.repository import (
    AccountRepository,
    BlogPostRepository,
    CommentRepository,
    EventRegistrationRepository,
    ResourceDownloadRepository,
)
from portal.domain.value import ApprovalStatus, Role, UserId
from portal.domain.value.common import ValueObject

from .base import Service

BLOG_POST_XP = 50
COMMENT_XP = 15
DOWNLOAD_XP = 5
XP_PER_LEVEL = 200
XP_PER_CYCLE = 1000
LEADERBOARD_SIZE = 10


class ActivityCounts(ValueObject):
    blog_posts: int = 0
    comments: int = 0
    downloads: int = 0
    events: int = 0


class Badge(ValueObject):
    name: str
    description: str
    earned: bool


class UserProgress(ValueObject):
    """Level and experience of one user."""

    user_id: UserId
    level: int
    xp: int
    xp_to_next: int
    total_badges: int
    activity: ActivityCounts


class LeaderboardEntry(ValueObject):
    user_id: UserId
    name: str
    initials: str
    level: int
    xp: int


def level_for(xp: int) -> int:
    return xp // XP_PER_LEVEL + 1


def badges_for(activity: ActivityCounts) -> list[Badge]:
    """Evaluate every badge against a user's activity, earned or not."""
    return [
        Badge(
            name="First Comment",
            description="Made your first comment",
            earned=activity.comments > 0,
        ),
        Badge(
            name="Resource Explorer",
            description="Downloaded 10+ resources",
            earned=activity.downloads >= 10,
        ),
        Badge(
            name="Active Participant",
            description="Registered for 3+ events",
            earned=activity.events >= 3,
        ),
        Badge(
            name="Popular Contributor",
            description="Published 2+ blog posts",
            earned=activity.blog_posts >= 2,
        ),
        Badge(
            name="Streak Master",
            description="Made 10+ comments",
            earned=activity.comments >= 10,
        ),
        Badge(
            name="Scholar",
            description="Published 5+ blog posts",
            earned=activity.blog_posts >= 5,
        ),
    ]


class GamificationService(Service):
    """Computes progress from activity counts.

    A user may read their own progress and badges; the admin tier may read
    anyone's. The leaderboard ranks approved students by content xp
    (posts and comments only).
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        comment_repository: CommentRepository,
        download_repository: ResourceDownloadRepository,
        registration_repository: EventRegistrationRepository,
    ) -> None:
        self.account_repository = account_repository
        self.blog_post_repository = blog_post_repository
        self.comment_repository = comment_repository
        self.download_repository = download_repository
        self.registration_repository = registration_repository

    async def progress(self, actor: Principal, user_id: UserId) -> UserProgress:
        """Level, xp and badge count of a user.

        Raises:
            AuthorizationError: If the actor is neither the user nor admin tier
            NotFoundError: If the user does not exist
        """
        activity = await self._activity_of(actor, user_id)
        xp_total = (
            activity.blog_posts * BLOG_POST_XP
            + activity.comments * COMMENT_XP
            + activity.downloads * DOWNLOAD_XP
        )
        xp = xp_total % XP_PER_CYCLE
        return UserProgress(
            user_id=user_id,
            level=level_for(xp_total),
            xp=xp,
            xp_to_next=XP_PER_CYCLE - xp,
            total_badges=sum(1 for badge in badges_for(activity) if badge.earned),
            activity=activity,
        )

    async def badges(self, actor: Principal, user_id: UserId) -> list[Badge]:
        """Every badge with whether the user has earned it.

        Raises:
            AuthorizationError: If the actor is neither the user nor admin tier
            NotFoundError: If the user does not exist
        """
        return badges_for(await self._activity_of(actor, user_id))

    async def leaderboard(self) -> list[LeaderboardEntry]:
        """Top approved students by content xp, highest first."""
        with logfire.span("gamification_service.leaderboard"):
            posts = await self.blog_post_repository.count_by_author()
            comments = await self.comment_repository.count_by_author()
            students = [
                account
                for account in await self.account_repository.find_by_status(
                    ApprovalStatus.APPROVED
                )
                if account.role == Role.STUDENT
            ]

            entries = []
            for account in students:
                xp = (
                    posts.get(account.id, 0) * BLOG_POST_XP
                    + comments.get(account.id, 0) * COMMENT_XP
                )
                entries.append(
                    LeaderboardEntry(
                        user_id=account.id,
                        name=account.full_name,
                        initials=f"{account.first_name[:1]}{account.last_name[:1]}".upper(),
                        level=level_for(xp),
                        xp=xp,
                    )
                )
            # Stable: ties keep oldest-account-first order
            entries.sort(key=lambda entry: entry.xp, reverse=True)
            return entries[:LEADERBOARD_SIZE]

    async def _activity_of(self, actor: Principal, user_id: UserId) -> ActivityCounts:
        if not (actor.owns(user_id) or actor.is_elevated):
            logfire.warn(
                "Progress access denied", user_id=str(actor.id), target=str(user_id)
            )
            raise AuthorizationError("You can only view your own progress")

        if not await self.account_repository.find_by_id(user_id):
            raise NotFoundError("User", str(user_id))

        posts = await self.blog_post_repository.count_by_author()
        comments = await self.comment_repository.count_by_author()
        downloads = await self.download_repository.count_by_user()
        events = await self.registration_repository.count_by_user()
        return ActivityCounts(
            blog_posts=posts.get(user_id, 0),
            comments=comments.get(user_id, 0),
            downloads=downloads.get(user_id, 0),
            events=events.get(user_id, 0),
        )
