"""Vendor matching domain service."""

from typing import Optional

import logfire

from market.config import MatchingSettings
from market.domain.model.match import (
    BudgetHealthAssessment,
    EventRequirements,
    VendorMatch,
)
from market.domain.repository import VendorRepository
from market.domain.value import BudgetHealth, BudgetRange

from .base import Service
from .scoring import rank_vendors

# Typical total spend per event type (min, max), in INR
BUDGET_GUIDANCE: dict[str, tuple[float, float]] = {
    "wedding": (200_000, 2_500_000),
    "birthday": (15_000, 200_000),
    "corporate": (50_000, 500_000),
    "kitty-party": (10_000, 100_000),
    "engagement": (50_000, 500_000),
    "baby-shower": (15_000, 150_000),
}


def budget_health(
    event_type: Optional[str], budget: BudgetRange
) -> Optional[BudgetHealthAssessment]:
    """Compare a budget's midpoint against typical spend for the event type.

    Args:
        event_type: Event type slug, e.g. 'wedding'
        budget: Requested budget range

    Returns:
        Assessment, or None when there is no guidance for the event type
    """
    if not event_type:
        return None

    guide = BUDGET_GUIDANCE.get(event_type.strip().lower())
    if guide is None:
        return None

    guide_min, guide_max = guide
    midpoint = budget.midpoint

    if midpoint < guide_min * 0.8:
        return BudgetHealthAssessment(
            status=BudgetHealth.BELOW,
            label="Below Average",
            description="Your budget is below the typical range for this event "
            "type. You may find fewer vendor options.",
        )
    if midpoint > guide_max * 1.2:
        return BudgetHealthAssessment(
            status=BudgetHealth.ABOVE,
            label="Above Average",
            description="Your budget is above average. You'll have access to "
            "premium vendor options.",
        )
    return BudgetHealthAssessment(
        status=BudgetHealth.ALIGNED,
        label="Well Aligned",
        description="Your budget aligns well with typical pricing for this "
        "event type.",
    )


class MatchService(Service):
    """Domain service for ranking vendors against event requirements."""

    def __init__(
        self, vendor_repository: VendorRepository, settings: MatchingSettings
    ) -> None:
        """Initialize match service.

        Args:
            vendor_repository: Vendor repository
            settings: Match scoring settings
        """
        self.vendor_repository = vendor_repository
        self.settings = settings

    async def match_vendors(
        self,
        requirements: EventRequirements,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> tuple[list[VendorMatch], int]:
        """Score all active vendors and return one page of the ranking.

        Args:
            requirements: Consumer's event requirements
            limit: Page size (capped at the configured maximum)
            offset: Number of ranked vendors to skip

        Returns:
            Tuple of (page of matches, total number of ranked vendors)
        """
        limit = min(limit or self.settings.max_results, self.settings.max_results)

        with logfire.span(
            "match_service.match_vendors",
            service_types=[t.root for t in requirements.service_types],
            event_type=requirements.event_type,
        ):
            vendors = await self.vendor_repository.find_active()
            ranked = rank_vendors(vendors, requirements, self.settings)

            logfire.info(
                "Vendors ranked",
                candidates=len(vendors),
                top_score=ranked[0].score if ranked else None,
            )
            return ranked[offset : offset + limit], len(ranked)

    def assess_budget(
        self, requirements: EventRequirements
    ) -> Optional[BudgetHealthAssessment]:
        """Budget health for the requirements' event type, if known."""
        return budget_health(requirements.event_type, requirements.budget)
