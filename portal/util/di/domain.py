"""Domain layer DI providers."""

from dishka import Scope, provide

from portal.config import AuthSettings, RegistrationSettings
from portal.domain.repository import (
    AccountRepository,
    BlogPostRepository,
    CommentRepository,
    EventRegistrationRepository,
    EventRepository,
    LearningResourceRepository,
    LikeRepository,
    PollRepository,
    PollVoteRepository,
    ResourceDownloadRepository,
    ResourceRatingRepository,
    ViewRepository,
)
from portal.domain.service import (
    AccessService,
    AccountService,
    AfterCommit,
    BlogService,
    CommentService,
    EmailSender,
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


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_access_service(
        self, jwt_service: JWTService, account_repository: AccountRepository
    ) -> AccessService:
        """Provide session resolution and role gate service."""
        return AccessService(
            jwt_service=jwt_service, account_repository=account_repository
        )

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        password_service: PasswordService,
        registration_settings: RegistrationSettings,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            password_service=password_service,
            registration_settings=registration_settings,
        )

    @provide
    def get_notification_service(
        self, email_sender: EmailSender, after_commit: AfterCommit
    ) -> NotificationService:
        """Provide account notification service."""
        return NotificationService(email_sender=email_sender, after_commit=after_commit)

    @provide
    def get_engagement_service(
        self,
        like_repository: LikeRepository,
        view_repository: ViewRepository,
        blog_post_repository: BlogPostRepository,
        comment_repository: CommentRepository,
        poll_repository: PollRepository,
        poll_vote_repository: PollVoteRepository,
        resource_repository: LearningResourceRepository,
        download_repository: ResourceDownloadRepository,
    ) -> EngagementService:
        """Provide engagement ledger service."""
        return EngagementService(
            like_repository=like_repository,
            view_repository=view_repository,
            blog_post_repository=blog_post_repository,
            comment_repository=comment_repository,
            poll_repository=poll_repository,
            poll_vote_repository=poll_vote_repository,
            resource_repository=resource_repository,
            download_repository=download_repository,
        )

    @provide
    def get_blog_service(
        self,
        blog_post_repository: BlogPostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        view_repository: ViewRepository,
    ) -> BlogService:
        """Provide blog domain service."""
        return BlogService(
            blog_post_repository=blog_post_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
            view_repository=view_repository,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, like_repository: LikeRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, like_repository=like_repository
        )

    @provide
    def get_poll_service(
        self, poll_repository: PollRepository, poll_vote_repository: PollVoteRepository
    ) -> PollService:
        """Provide poll domain service."""
        return PollService(
            poll_repository=poll_repository, poll_vote_repository=poll_vote_repository
        )

    @provide
    def get_resource_service(
        self,
        resource_repository: LearningResourceRepository,
        download_repository: ResourceDownloadRepository,
        rating_repository: ResourceRatingRepository,
    ) -> ResourceService:
        """Provide learning resource service."""
        return ResourceService(
            resource_repository=resource_repository,
            download_repository=download_repository,
            rating_repository=rating_repository,
        )

    @provide
    def get_event_service(
        self,
        event_repository: EventRepository,
        registration_repository: EventRegistrationRepository,
        account_repository: AccountRepository,
    ) -> EventService:
        """Provide event domain service."""
        return EventService(
            event_repository=event_repository,
            registration_repository=registration_repository,
            account_repository=account_repository,
        )

    @provide
    def get_gamification_service(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        comment_repository: CommentRepository,
        download_repository: ResourceDownloadRepository,
        registration_repository: EventRegistrationRepository,
    ) -> GamificationService:
        """Provide student progress service."""
        return GamificationService(
            account_repository=account_repository,
            blog_post_repository=blog_post_repository,
            comment_repository=comment_repository,
            download_repository=download_repository,
            registration_repository=registration_repository,
        )
