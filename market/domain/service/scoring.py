"""Scoring primitives.

Pure functions shared by the engagement aggregation job and vendor
discovery. They never raise on odd data: missing or malformed inputs simply
earn no credit. The current time is an explicit input so results are
reproducible.
"""

import math
from datetime import datetime, timezone
from typing import Iterable, Optional

from market.config import EngagementSettings, MatchingSettings
from market.domain.model.match import EventRequirements, MatchScoreResult, VendorMatch
from market.domain.model.vendor import Vendor, VendorService
from market.domain.value.common import ValueObject

# Share of the responsiveness credit driven by reply speed; the rest comes
# from the vendor's inquiry acceptance rate.
RESPONSE_TIME_SHARE = 0.8

# (max hours, credit fraction, reason) - first matching bucket wins
RESPONSE_TIME_BUCKETS: tuple[tuple[float, float, Optional[str]], ...] = (
    (4.0, 1.0, "Fast responder"),
    (12.0, 0.7, "Responds within 12 hours"),
    (24.0, 0.4, "Responds within a day"),
    (48.0, 0.2, None),
)


class EngagementBreakdown(ValueObject):
    """Weighted components of an engagement score."""

    likes_weight: float
    comments_weight: float
    views_weight: float
    recency_factor: float

    @property
    def raw(self) -> float:
        return self.likes_weight + self.comments_weight + self.views_weight

    @property
    def score(self) -> float:
        return self.raw * self.recency_factor


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def engagement_breakdown(
    like_count: int,
    comment_count: int,
    view_count: int,
    created_at: datetime,
    now: Optional[datetime] = None,
    settings: Optional[EngagementSettings] = None,
) -> EngagementBreakdown:
    """Compute the weighted components of a post's engagement score.

    raw = likes * 2 + comments * 5 + views * 0.01
    recency_factor = exp(-age_hours / 48)

    Args:
        like_count: Number of likes (>= 0)
        comment_count: Number of comments (>= 0)
        view_count: Number of views (>= 0)
        created_at: When the post was created
        now: Reference time (defaults to current UTC time)
        settings: Weights and decay constant (defaults to EngagementSettings())

    Returns:
        Weighted components and recency factor
    """
    settings = settings or EngagementSettings()
    now = _as_utc(now or datetime.now(timezone.utc))

    # Posts dated in the future do not get a boost
    age_hours = max(0.0, (now - _as_utc(created_at)).total_seconds() / 3600)

    return EngagementBreakdown(
        likes_weight=like_count * settings.like_weight,
        comments_weight=comment_count * settings.comment_weight,
        views_weight=view_count * settings.view_weight,
        recency_factor=math.exp(-age_hours / settings.decay_hours),
    )


def calculate_engagement_score(
    like_count: int,
    comment_count: int,
    view_count: int,
    created_at: datetime,
    now: Optional[datetime] = None,
    settings: Optional[EngagementSettings] = None,
) -> float:
    """Engagement score favoring recent, highly interacted posts.

    Returns:
        Non-negative score: raw weighted interactions times recency decay
    """
    return engagement_breakdown(
        like_count, comment_count, view_count, created_at, now, settings
    ).score


# ============================================================================
# Vendor match scoring
# ============================================================================


def _finite(value: object) -> Optional[float]:
    """Return value as a float if it is a finite number, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def _available_services(vendor: Vendor) -> list[VendorService]:
    """Bookable services with a sane price."""
    services = []
    for service in vendor.services:
        price = _finite(service.base_price)
        if service.is_available and price is not None and price >= 0:
            services.append(service)
    return services


def _offers(service: VendorService, service_type: str) -> bool:
    """Whether a service covers a requested service type."""
    category = (service.category or "").strip().lower()
    return service_type == category or service_type in service.name.lower()


def _budget_fit(
    services: list[VendorService],
    requirements: EventRequirements,
    settings: MatchingSettings,
) -> tuple[float, Optional[str]]:
    requested = [t.root for t in requirements.service_types]
    matched = [s for s in services if any(_offers(s, t) for t in requested)]
    priced = matched or services
    if not priced:
        return 0.0, None

    low = min(s.base_price for s in priced)
    high = max(s.base_price for s in priced)
    budget = requirements.budget

    if low <= budget.max and high >= budget.min:
        fraction = 1.0
    else:
        if low > budget.max:
            distance = (
                (low - budget.max) / budget.max if budget.max > 0 else math.inf
            )
        else:
            distance = (budget.min - high) / budget.min
        fraction = max(0.0, 1.0 - distance / settings.budget_tolerance)

    if fraction >= 1.0:
        reason: Optional[str] = "Within your budget"
    elif fraction >= 0.5:
        reason = "Close to your budget"
    else:
        reason = None
    return fraction * settings.budget_weight, reason


def _service_coverage(
    services: list[VendorService],
    requirements: EventRequirements,
    settings: MatchingSettings,
) -> tuple[float, Optional[str]]:
    requested = [t.root for t in requirements.service_types]
    if not requested:
        return settings.service_weight, None

    offered = sum(1 for t in requested if any(_offers(s, t) for s in services))
    fraction = offered / len(requested)

    if fraction >= 0.8:
        reason: Optional[str] = "Matches your selected services"
    elif fraction > 0:
        reason = "Offers some of your required services"
    else:
        reason = None
    return fraction * settings.service_weight, reason


def _reputation(
    vendor: Vendor, settings: MatchingSettings
) -> tuple[float, Optional[str]]:
    if vendor.total_reviews == 0:
        return settings.new_vendor_floor * settings.reputation_weight, "New vendor"

    rating = _finite(vendor.rating)
    if rating is None or rating < 0 or rating > 5:
        return 0.0, None

    if rating >= 4.5:
        reason: Optional[str] = f"Highly rated ({rating:.1f}★)"
    elif rating >= 4.0:
        reason = "Well reviewed"
    else:
        reason = None
    return (rating / 5) * settings.reputation_weight, reason


def _responsiveness(
    vendor: Vendor, settings: MatchingSettings
) -> tuple[float, Optional[str]]:
    speed = 0.0
    reason: Optional[str] = None
    hours = _finite(vendor.response_time_hours)
    if hours is not None and hours >= 0:
        for max_hours, credit, bucket_reason in RESPONSE_TIME_BUCKETS:
            if hours <= max_hours:
                speed, reason = credit, bucket_reason
                break

    acceptance = 0.0
    rate = _finite(vendor.acceptance_rate)
    if rate is not None and 0 <= rate <= 100:
        acceptance = rate / 100
        if reason is None and acceptance >= 0.8:
            reason = "Accepts most inquiries"

    fraction = RESPONSE_TIME_SHARE * speed + (1 - RESPONSE_TIME_SHARE) * acceptance
    return fraction * settings.responsiveness_weight, reason


def calculate_match_score(
    vendor: Vendor,
    requirements: EventRequirements,
    settings: Optional[MatchingSettings] = None,
) -> MatchScoreResult:
    """Score how well a vendor fits an event (0-100).

    Criteria are scored independently (budget fit, service coverage,
    reputation, responsiveness), summed and clamped. Reasons are ordered by
    the points their criterion contributed, highest first.

    Args:
        vendor: Vendor with services
        requirements: Consumer's event requirements
        settings: Criterion weights and tolerances (defaults to MatchingSettings())

    Returns:
        Match score and ordered reasons
    """
    settings = settings or MatchingSettings()
    services = _available_services(vendor)

    criteria = [
        _budget_fit(services, requirements, settings),
        _service_coverage(services, requirements, settings),
        _reputation(vendor, settings),
        _responsiveness(vendor, settings),
    ]

    total = sum(points for points, _ in criteria)
    score = int(round(min(100.0, max(0.0, total))))

    # sorted() is stable, so equal contributions keep criterion order
    ranked = sorted(
        (c for c in criteria if c[1] is not None), key=lambda c: c[0], reverse=True
    )
    return MatchScoreResult(score=score, reasons=[reason for _, reason in ranked])


def rank_vendors(
    vendors: Iterable[Vendor],
    requirements: EventRequirements,
    settings: Optional[MatchingSettings] = None,
) -> list[VendorMatch]:
    """Score and order vendors for an event.

    Highest score first; equal scores are ordered by vendor id so repeated
    queries return the same order.
    """
    matches = []
    for vendor in vendors:
        result = calculate_match_score(vendor, requirements, settings)
        matches.append(
            VendorMatch(
                vendor_id=vendor.id,
                business_name=vendor.business_name,
                score=result.score,
                reasons=result.reasons,
            )
        )
    matches.sort(key=lambda m: (-m.score, str(m.vendor_id)))
    return matches
