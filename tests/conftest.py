"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from market.domain.model import Post, Review, Vendor, VendorService
from market.domain.value import (
    ModerationStatus,
    PostId,
    ReviewId,
    UserId,
    VendorId,
    VendorServiceId,
)

# Fixed reference time so recency decay is reproducible
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_post(
    age_hours: float = 1.0,
    likes: int = 0,
    comments: int = 0,
    views: int = 0,
    author_id: UserId | None = None,
    status: ModerationStatus | None = ModerationStatus.APPROVED,
    now: datetime = NOW,
) -> Post:
    """Helper function to build a feed post created ``age_hours`` before ``now``."""
    return Post(
        id=PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        like_count=likes,
        comment_count=comments,
        view_count=views,
        moderation_status=status,
        created_at=now - timedelta(hours=age_hours),
    )


def make_service(
    name: str, price: float, category: str | None = None, available: bool = True
) -> VendorService:
    """Helper function to build a vendor service."""
    return VendorService(
        id=VendorServiceId(uuid4()),
        name=name,
        category=category,
        base_price=price,
        is_available=available,
    )


def make_vendor(
    services: list[VendorService] | None = None,
    rating: float | None = 4.0,
    total_reviews: int | None = 10,
    response_time_hours: float | None = 6.0,
    acceptance_rate: float | None = 50.0,
    business_name: str = "Test Vendor",
    vendor_id: VendorId | None = None,
    is_active: bool = True,
) -> Vendor:
    """Helper function to build a vendor profile."""
    return Vendor(
        id=vendor_id or VendorId(uuid4()),
        business_name=business_name,
        rating=rating,
        total_reviews=total_reviews,
        response_time_hours=response_time_hours,
        acceptance_rate=acceptance_rate,
        is_active=is_active,
        services=services or [],
    )


def make_review(
    vendor_id: VendorId,
    rating: int,
    age_hours: float = 1.0,
    published: bool = True,
) -> Review:
    """Helper function to build a vendor review."""
    return Review(
        id=ReviewId(uuid4()),
        vendor_id=vendor_id,
        rating=rating,
        comment="Great service",
        is_published=published,
        created_at=NOW - timedelta(hours=age_hours),
    )
