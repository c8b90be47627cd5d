"""Domain services."""

from .base import Service
from .engagement_service import EngagementService
from .jwt_service import JWTService
from .match_service import BUDGET_GUIDANCE, MatchService, budget_health
from .report_service import ReportService
from .review_service import ReviewService, summarize_reviews
from .scoring import (
    EngagementBreakdown,
    calculate_engagement_score,
    calculate_match_score,
    engagement_breakdown,
    rank_vendors,
)

__all__ = [
    "BUDGET_GUIDANCE",
    "EngagementBreakdown",
    "EngagementService",
    "JWTService",
    "MatchService",
    "ReportService",
    "ReviewService",
    "Service",
    "budget_health",
    "calculate_engagement_score",
    "calculate_match_score",
    "engagement_breakdown",
    "rank_vendors",
    "summarize_reviews",
]
