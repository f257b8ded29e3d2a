"""Analytics overview use case."""

import logfire
from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.repository import (
    AccountRepository,
    BlogPostRepository,
    EventRegistrationRepository,
    EventRepository,
    LearningResourceRepository,
    PollRepository,
    PollVoteRepository,
)
from portal.domain.service import AccessService
from portal.domain.value import ApprovalStatus, PollStatus


class AnalyticsOverviewRequest(BaseModel):
    actor: Principal


class AnalyticsOverviewResponse(BaseModel):
    """Platform-wide counts for the admin dashboard."""

    accounts_by_status: dict[ApprovalStatus, int]
    total_accounts: int
    published_blogs: int
    unpublished_blogs: int
    total_blog_views: int
    total_blog_likes: int
    active_polls: int
    closed_polls: int
    total_poll_votes: int
    learning_resources: int
    total_resource_downloads: int
    total_events: int
    total_event_registrations: int


class AnalyticsOverviewUseCase:
    """Use case for the admin analytics overview."""

    def __init__(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        poll_repository: PollRepository,
        poll_vote_repository: PollVoteRepository,
        resource_repository: LearningResourceRepository,
        event_repository: EventRepository,
        registration_repository: EventRegistrationRepository,
    ) -> None:
        """Initialize analytics overview use case.

        Args:
            account_repository: Account repository
            blog_post_repository: Blog post repository
            poll_repository: Poll repository
            poll_vote_repository: Poll vote repository
            resource_repository: Learning resource repository
            event_repository: Event repository
            registration_repository: Event registration repository
        """
        self.account_repository = account_repository
        self.blog_post_repository = blog_post_repository
        self.poll_repository = poll_repository
        self.poll_vote_repository = poll_vote_repository
        self.resource_repository = resource_repository
        self.event_repository = event_repository
        self.registration_repository = registration_repository

    async def execute(
        self, request: AnalyticsOverviewRequest
    ) -> AnalyticsOverviewResponse:
        """Execute analytics overview flow.

        Raises:
            AuthorizationError: If the actor is not in the admin tier
        """
        AccessService.require_admin(request.actor)

        with logfire.span("analytics_overview"):
            accounts = await self.account_repository.count_by_status()
            blogs = await self.blog_post_repository.count_by_published()
            likes, views = await self.blog_post_repository.sum_counters()
            polls = await self.poll_repository.count_by_status()

            return AnalyticsOverviewResponse(
                accounts_by_status=accounts,
                total_accounts=sum(accounts.values()),
                published_blogs=blogs[True],
                unpublished_blogs=blogs[False],
                total_blog_views=views,
                total_blog_likes=likes,
                active_polls=polls[PollStatus.ACTIVE],
                closed_polls=polls[PollStatus.CLOSED],
                total_poll_votes=await self.poll_vote_repository.count_all(),
                learning_resources=await self.resource_repository.count(),
                total_resource_downloads=await self.resource_repository.sum_downloads(),
                total_events=await self.event_repository.count(),
                total_event_registrations=await self.registration_repository.count(),
            )
