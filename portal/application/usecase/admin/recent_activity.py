"""Recent activity feed use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.repository import (
    AccountRepository,
    BlogPostRepository,
    EventRepository,
    LearningResourceRepository,
)
from portal.domain.service import AccessService
from portal.domain.value import ApprovalStatus

FEED_SIZE = 10


class RecentActivityRequest(BaseModel):
    actor: Principal


class ActivityItem(BaseModel):
    action: str
    subject: str
    time: datetime


class RecentActivityResponse(BaseModel):
    activities: list[ActivityItem]


class RecentActivityUseCase:
    """Use case for the admin dashboard's activity feed.

    Samples the newest approved members, blog posts, events and resources
    and merges them newest first.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        event_repository: EventRepository,
        resource_repository: LearningResourceRepository,
    ) -> None:
        self.account_repository = account_repository
        self.blog_post_repository = blog_post_repository
        self.event_repository = event_repository
        self.resource_repository = resource_repository

    async def execute(self, request: RecentActivityRequest) -> RecentActivityResponse:
        AccessService.require_admin(request.actor)

        with logfire.span("recent_activity"):
            members = await self.account_repository.find_newest(
                ApprovalStatus.APPROVED, limit=3
            )
            posts = await self.blog_post_repository.find_all(limit=2)
            events = await self.event_repository.find_recent(limit=2)
            resources = await self.resource_repository.find_all(limit=2)

            activities = (
                [
                    ActivityItem(
                        action="New member joined",
                        subject=account.full_name,
                        time=account.created_at,
                    )
                    for account in members
                ]
                + [
                    ActivityItem(
                        action="Blog post created", subject=post.title, time=post.created_at
                    )
                    for post in posts
                ]
                + [
                    ActivityItem(
                        action="Event created", subject=event.title, time=event.created_at
                    )
                    for event in events
                ]
                + [
                    ActivityItem(
                        action="Resource added",
                        subject=resource.title,
                        time=resource.created_at,
                    )
                    for resource in resources
                ]
            )
            activities.sort(key=lambda item: item.time, reverse=True)
            return RecentActivityResponse(activities=activities[:FEED_SIZE])
