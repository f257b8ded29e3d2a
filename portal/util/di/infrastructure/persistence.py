"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from portal.config import Settings
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
from portal.domain.service import AfterCommit
from portal.persistence.database import create_engine, create_session_factory
from portal.persistence.repository import (
    PostgresAccountRepository,
    PostgresBlogPostRepository,
    PostgresCommentRepository,
    PostgresEventRegistrationRepository,
    PostgresEventRepository,
    PostgresLearningResourceRepository,
    PostgresLikeRepository,
    PostgresPollRepository,
    PostgresPollVoteRepository,
    PostgresResourceDownloadRepository,
    PostgresResourceRatingRepository,
    PostgresViewRepository,
)
from portal.util.di.base import ProviderBase
from portal.util.observability import instrument_sqlalchemy

AFTER_COMMIT_KEY = "portal.after_commit"


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        dishka sends the exception that closed the scope (or None) back into
        this generator. The session commits only when there was none, so
        ledger rows and counter updates made during one request land together
        or not at all. After-commit hooks run once the commit succeeded.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                logfire.warn("Session rollback", error=str(exc))
                await session.rollback()
                return
            await session.commit()
            logfire.debug("Session committed")

        after_commit = session.info.get(AFTER_COMMIT_KEY)
        if after_commit is not None:
            await after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self, session: AsyncSession) -> AfterCommit:
        """Provide the request's after-commit hooks, bound to its session."""
        return session.info.setdefault(AFTER_COMMIT_KEY, AfterCommit())

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_blog_post_repository(self, session: AsyncSession) -> BlogPostRepository:
        """Provide BlogPost repository."""
        return PostgresBlogPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        """Provide Like ledger repository."""
        return PostgresLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_view_repository(self, session: AsyncSession) -> ViewRepository:
        """Provide View ledger repository."""
        return PostgresViewRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_repository(self, session: AsyncSession) -> PollRepository:
        """Provide Poll repository."""
        return PostgresPollRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_vote_repository(self, session: AsyncSession) -> PollVoteRepository:
        """Provide PollVote ledger repository."""
        return PostgresPollVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(
        self, session: AsyncSession
    ) -> LearningResourceRepository:
        """Provide LearningResource repository."""
        return PostgresLearningResourceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_resource_download_repository(
        self, session: AsyncSession
    ) -> ResourceDownloadRepository:
        """Provide ResourceDownload ledger repository."""
        return PostgresResourceDownloadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_resource_rating_repository(
        self, session: AsyncSession
    ) -> ResourceRatingRepository:
        return PostgresResourceRatingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, session: AsyncSession) -> EventRepository:
        """Provide Event repository."""
        return PostgresEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_event_registration_repository(
        self, session: AsyncSession
    ) -> EventRegistrationRepository:
        """Provide EventRegistration ledger repository."""
        return PostgresEventRegistrationRepository(session)
