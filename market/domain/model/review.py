"""Vendor review entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import ReviewId, Sentiment, VendorId


class Review(DomainModel):
    """A consumer's review of a vendor after a booking."""

    id: ReviewId
    vendor_id: VendorId
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    is_published: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ReviewInsights(DomainModel):
    """Aggregate view of a vendor's published reviews."""

    vendor_id: VendorId
    summary: str
    sentiment: Sentiment
    total_reviews: int = Field(ge=0)
    average_rating: float = Field(ge=0, le=5)
    percentage_satisfied: int = Field(ge=0, le=100)
    # Star rating ("5".."1") -> number of reviews
    rating_breakdown: dict[str, int]
