"""Domain model entities for the marketplace."""

from market.domain.model.engagement import PostEngagement
from market.domain.model.match import (
    BudgetHealthAssessment,
    EventRequirements,
    MatchScoreResult,
    VendorMatch,
)
from market.domain.model.moderation import ModerationEntry
from market.domain.model.post import Post
from market.domain.model.report import Report
from market.domain.model.review import Review, ReviewInsights
from market.domain.model.vendor import Vendor, VendorService

__all__ = [
    "Post",
    "PostEngagement",
    "Report",
    "ModerationEntry",
    "Vendor",
    "VendorService",
    "Review",
    "ReviewInsights",
    "BudgetHealthAssessment",
    "EventRequirements",
    "MatchScoreResult",
    "VendorMatch",
]
