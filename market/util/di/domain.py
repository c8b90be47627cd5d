"""Domain layer DI providers."""

from dishka import Scope, provide

from market.config import (
    AuthSettings,
    EngagementSettings,
    MatchingSettings,
    ModerationSettings,
)
from market.domain.repository import (
    EngagementRepository,
    ModerationQueueRepository,
    PostRepository,
    ReportRepository,
    ReviewRepository,
    VendorRepository,
)
from market.domain.service import (
    EngagementService,
    JWTService,
    MatchService,
    ReportService,
    ReviewService,
)
from market.util.di.base import ProviderBase


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
    def get_engagement_service(
        self,
        post_repository: PostRepository,
        engagement_repository: EngagementRepository,
        settings: EngagementSettings,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            post_repository=post_repository,
            engagement_repository=engagement_repository,
            settings=settings,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        moderation_repository: ModerationQueueRepository,
        settings: ModerationSettings,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            post_repository=post_repository,
            moderation_repository=moderation_repository,
            settings=settings,
        )

    @provide
    def get_match_service(
        self, vendor_repository: VendorRepository, settings: MatchingSettings
    ) -> MatchService:
        """Provide vendor matching domain service."""
        return MatchService(vendor_repository=vendor_repository, settings=settings)

    @provide
    def get_review_service(
        self,
        review_repository: ReviewRepository,
        vendor_repository: VendorRepository,
    ) -> ReviewService:
        """Provide review insights domain service."""
        return ReviewService(
            review_repository=review_repository, vendor_repository=vendor_repository
        )
