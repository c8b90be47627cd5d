"""Application layer DI providers."""

from dishka import Scope, provide

from market.application.usecase.engagement import (
    CalculateEngagementUseCase,
    SharePostUseCase,
)
from market.application.usecase.report import SubmitReportUseCase
from market.application.usecase.vendor import (
    GetReviewInsightsUseCase,
    MatchVendorsUseCase,
)
from market.config import EngagementSettings
from market.domain.service import (
    EngagementService,
    MatchService,
    ReportService,
    ReviewService,
)
from market.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_calculate_engagement_use_case(
        self, engagement_service: EngagementService, settings: EngagementSettings
    ) -> CalculateEngagementUseCase:
        """Provide calculate engagement use case."""
        return CalculateEngagementUseCase(
            engagement_service=engagement_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_share_post_use_case(
        self, engagement_service: EngagementService
    ) -> SharePostUseCase:
        """Provide share post use case."""
        return SharePostUseCase(engagement_service=engagement_service)

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_report_use_case(
        self, report_service: ReportService
    ) -> SubmitReportUseCase:
        """Provide submit report use case."""
        return SubmitReportUseCase(report_service=report_service)

    # Vendor use cases
    @provide(scope=Scope.REQUEST)
    def get_match_vendors_use_case(
        self, match_service: MatchService
    ) -> MatchVendorsUseCase:
        """Provide match vendors use case."""
        return MatchVendorsUseCase(match_service=match_service)

    @provide(scope=Scope.REQUEST)
    def get_review_insights_use_case(
        self, review_service: ReviewService
    ) -> GetReviewInsightsUseCase:
        """Provide review insights use case."""
        return GetReviewInsightsUseCase(review_service=review_service)
