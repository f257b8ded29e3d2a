"""Application layer DI providers."""

from dishka import Scope, provide

from portal.application.usecase.admin import (
    AnalyticsOverviewUseCase,
    ChangeRoleUseCase,
    ListAccountsUseCase,
    RecentActivityUseCase,
    ReconcileCountersUseCase,
    ReviewAccountUseCase,
    TopBlogsUseCase,
)
from portal.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from portal.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    ListBlogsUseCase,
    ModerateBlogUseCase,
    UpdateBlogUseCase,
)
from portal.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from portal.application.usecase.engagement import LikeUseCase, UnlikeUseCase
from portal.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    ListEventRegistrationsUseCase,
    ListEventsUseCase,
    ListMyRegistrationsUseCase,
    RegisterForEventUseCase,
    UpdateEventUseCase,
)
from portal.application.usecase.gamification import (
    BadgesUseCase,
    LeaderboardUseCase,
    UserProgressUseCase,
)
from portal.application.usecase.poll import (
    ClosePollUseCase,
    CreatePollUseCase,
    GetPollUseCase,
    ListPollsUseCase,
    VoteUseCase,
)
from portal.application.usecase.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    DownloadResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    RateResourceUseCase,
    UpdateResourceUseCase,
)
from portal.application.usecase.user import UpdateProfileUseCase
from portal.config import Settings
from portal.domain.repository import (
    AccountRepository,
    BlogPostRepository,
    EventRegistrationRepository,
    EventRepository,
    LearningResourceRepository,
    PollRepository,
    PollVoteRepository,
)
from portal.domain.service import (
    AccountService,
    BlogService,
    CommentService,
    EngagementService,
    EventService,
    GamificationService,
    JWTService,
    NotificationService,
    PasswordService,
    PollService,
    ResourceService,
)
from portal.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> RegisterUseCase:
        """Provide registration use case."""
        return RegisterUseCase(
            account_service=account_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, account_service: AccountService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_request_password_reset_use_case(
        self,
        account_service: AccountService,
        password_service: PasswordService,
        jwt_service: JWTService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> RequestPasswordResetUseCase:
        """Provide forgot-password use case."""
        return RequestPasswordResetUseCase(
            account_service=account_service,
            password_service=password_service,
            jwt_service=jwt_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_reset_password_use_case(
        self,
        account_service: AccountService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> ResetPasswordUseCase:
        """Provide reset-password use case."""
        return ResetPasswordUseCase(
            account_service=account_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, account_service: AccountService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(account_service=account_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_accounts_use_case(
        self, account_service: AccountService
    ) -> ListAccountsUseCase:
        """Provide account review queue use case."""
        return ListAccountsUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_review_account_use_case(
        self,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> ReviewAccountUseCase:
        """Provide approval decision use case."""
        return ReviewAccountUseCase(
            account_service=account_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_change_role_use_case(
        self,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> ChangeRoleUseCase:
        """Provide role change use case."""
        return ChangeRoleUseCase(
            account_service=account_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_analytics_overview_use_case(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        poll_repository: PollRepository,
        poll_vote_repository: PollVoteRepository,
        resource_repository: LearningResourceRepository,
        event_repository: EventRepository,
        registration_repository: EventRegistrationRepository,
    ) -> AnalyticsOverviewUseCase:
        """Provide analytics overview use case."""
        return AnalyticsOverviewUseCase(
            account_repository=account_repository,
            blog_post_repository=blog_post_repository,
            poll_repository=poll_repository,
            poll_vote_repository=poll_vote_repository,
            resource_repository=resource_repository,
            event_repository=event_repository,
            registration_repository=registration_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_top_blogs_use_case(
        self, blog_post_repository: BlogPostRepository
    ) -> TopBlogsUseCase:
        """Provide most viewed posts use case."""
        return TopBlogsUseCase(blog_post_repository=blog_post_repository)

    @provide(scope=Scope.REQUEST)
    def get_recent_activity_use_case(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        event_repository: EventRepository,
        resource_repository: LearningResourceRepository,
    ) -> RecentActivityUseCase:
        """Provide activity feed use case."""
        return RecentActivityUseCase(
            account_repository=account_repository,
            blog_post_repository=blog_post_repository,
            event_repository=event_repository,
            resource_repository=resource_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_reconcile_counters_use_case(
        self, engagement_service: EngagementService
    ) -> ReconcileCountersUseCase:
        """Provide counter reconciliation use case."""
        return ReconcileCountersUseCase(engagement_service=engagement_service)

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_create_blog_use_case(self, blog_service: BlogService) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_list_blogs_use_case(
        self, blog_service: BlogService, engagement_service: EngagementService
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(
            blog_service=blog_service, engagement_service=engagement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_blog_use_case(
        self, blog_service: BlogService, engagement_service: EngagementService
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(
            blog_service=blog_service, engagement_service=engagement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_blog_use_case(self, blog_service: BlogService) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_moderate_blog_use_case(
        self, blog_service: BlogService
    ) -> ModerateBlogUseCase:
        """Provide blog moderation use case."""
        return ModerateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_blog_use_case(self, blog_service: BlogService) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(blog_service=blog_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, blog_service: BlogService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, blog_service=blog_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        engagement_service: EngagementService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            engagement_service=engagement_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_like_use_case(
        self, engagement_service: EngagementService, blog_service: BlogService
    ) -> LikeUseCase:
        """Provide like use case."""
        return LikeUseCase(
            engagement_service=engagement_service, blog_service=blog_service
        )

    @provide(scope=Scope.REQUEST)
    def get_unlike_use_case(
        self, engagement_service: EngagementService
    ) -> UnlikeUseCase:
        """Provide unlike use case."""
        return UnlikeUseCase(engagement_service=engagement_service)

    # Poll use cases
    @provide(scope=Scope.REQUEST)
    def get_create_poll_use_case(self, poll_service: PollService) -> CreatePollUseCase:
        """Provide create poll use case."""
        return CreatePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_list_polls_use_case(
        self, poll_service: PollService, account_service: AccountService
    ) -> ListPollsUseCase:
        """Provide list polls use case."""
        return ListPollsUseCase(
            poll_service=poll_service, account_service=account_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_poll_use_case(
        self, poll_service: PollService, account_service: AccountService
    ) -> GetPollUseCase:
        """Provide get poll use case."""
        return GetPollUseCase(poll_service=poll_service, account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self, poll_service: PollService, account_service: AccountService
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(poll_service=poll_service, account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_close_poll_use_case(self, poll_service: PollService) -> ClosePollUseCase:
        """Provide close poll use case."""
        return ClosePollUseCase(poll_service=poll_service)

    # Learning resource use cases
    @provide(scope=Scope.REQUEST)
    def get_create_resource_use_case(
        self, resource_service: ResourceService
    ) -> CreateResourceUseCase:
        """Provide create resource use case."""
        return CreateResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_list_resources_use_case(
        self, resource_service: ResourceService
    ) -> ListResourcesUseCase:
        """Provide list resources use case."""
        return ListResourcesUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_get_resource_use_case(
        self, resource_service: ResourceService
    ) -> GetResourceUseCase:
        """Provide get resource use case."""
        return GetResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_update_resource_use_case(
        self, resource_service: ResourceService
    ) -> UpdateResourceUseCase:
        """Provide update resource use case."""
        return UpdateResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_resource_use_case(
        self, resource_service: ResourceService
    ) -> DeleteResourceUseCase:
        """Provide delete resource use case."""
        return DeleteResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_download_resource_use_case(
        self, resource_service: ResourceService
    ) -> DownloadResourceUseCase:
        """Provide download counting use case."""
        return DownloadResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_rate_resource_use_case(
        self, resource_service: ResourceService
    ) -> RateResourceUseCase:
        """Provide resource rating use case."""
        return RateResourceUseCase(resource_service=resource_service)

    # Event use cases
    @provide(scope=Scope.REQUEST)
    def get_create_event_use_case(
        self, event_service: EventService
    ) -> CreateEventUseCase:
        """Provide create event use case."""
        return CreateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_list_events_use_case(self, event_service: EventService) -> ListEventsUseCase:
        """Provide list events use case."""
        return ListEventsUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_get_event_use_case(self, event_service: EventService) -> GetEventUseCase:
        """Provide get event use case."""
        return GetEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_update_event_use_case(
        self, event_service: EventService
    ) -> UpdateEventUseCase:
        """Provide update event use case."""
        return UpdateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_event_use_case(
        self, event_service: EventService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_register_for_event_use_case(
        self, event_service: EventService
    ) -> RegisterForEventUseCase:
        """Provide event registration use case."""
        return RegisterForEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_list_event_registrations_use_case(
        self, event_service: EventService
    ) -> ListEventRegistrationsUseCase:
        """Provide attendee list use case."""
        return ListEventRegistrationsUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_list_my_registrations_use_case(
        self, event_service: EventService
    ) -> ListMyRegistrationsUseCase:
        """Provide own registrations use case."""
        return ListMyRegistrationsUseCase(event_service=event_service)

    # Gamification use cases
    @provide(scope=Scope.REQUEST)
    def get_user_progress_use_case(
        self, gamification_service: GamificationService
    ) -> UserProgressUseCase:
        """Provide user progress use case."""
        return UserProgressUseCase(gamification_service=gamification_service)

    @provide(scope=Scope.REQUEST)
    def get_badges_use_case(
        self, gamification_service: GamificationService
    ) -> BadgesUseCase:
        """Provide badges use case."""
        return BadgesUseCase(gamification_service=gamification_service)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, gamification_service: GamificationService
    ) -> LeaderboardUseCase:
        """Provide leaderboard use case."""
        return LeaderboardUseCase(gamification_service=gamification_service)
