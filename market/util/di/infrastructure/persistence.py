"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from market.config import Settings
from market.domain.repository import (
    EngagementRepository,
    ModerationQueueRepository,
    PostRepository,
    ReportRepository,
    ReviewRepository,
    VendorRepository,
)
from market.persistence.database import create_engine, create_session_factory
from market.persistence.repository import (
    PostgresEngagementRepository,
    PostgresModerationQueueRepository,
    PostgresPostRepository,
    PostgresReportRepository,
    PostgresReviewRepository,
    PostgresVendorRepository,
)
from market.util.di.base import ProviderBase
from market.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

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

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_engagement_repository(self, session: AsyncSession) -> EngagementRepository:
        """Provide Engagement repository."""
        return PostgresEngagementRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, session: AsyncSession) -> ReportRepository:
        """Provide Report repository."""
        return PostgresReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_moderation_repository(
        self, session: AsyncSession
    ) -> ModerationQueueRepository:
        """Provide Moderation queue repository."""
        return PostgresModerationQueueRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vendor_repository(self, session: AsyncSession) -> VendorRepository:
        """Provide Vendor repository."""
        return PostgresVendorRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(self, session: AsyncSession) -> ReviewRepository:
        """Provide Review repository."""
        return PostgresReviewRepository(session)
