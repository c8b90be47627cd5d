"""Unit tests for row/domain mappers."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from market.domain.value import ModerationStatus, ReportReason, ReportStatus
from market.persistence.mappers import (
    report_to_dict,
    row_to_engagement,
    row_to_post,
    row_to_report,
    row_to_vendor,
    row_to_vendor_service,
)

CREATED_AT = datetime(2026, 10, 1, tzinfo=timezone.utc)


class TestPostMapper:
    """Tests for post row mapping."""

    def test_null_and_negative_counters_read_as_zero(self):
        """NULL or negative counters from the store should become 0."""
        row = {
            "id": str(uuid4()),
            "user_id": uuid4(),
            "like_count": None,
            "comment_count": -4,
            "view_count": 12,
            "moderation_status": "approved",
            "created_at": CREATED_AT,
        }

        post = row_to_post(row)

        assert post.like_count == 0
        assert post.comment_count == 0
        assert post.view_count == 12
        assert post.moderation_status == ModerationStatus.APPROVED

    def test_missing_moderation_status(self):
        """Posts that were never moderated should map to None."""
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "moderation_status": None,
            "created_at": CREATED_AT,
        }

        assert row_to_post(row).moderation_status is None

    def test_flagged_moderation_status(self):
        """Posts held by media moderation should map to FLAGGED."""
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "moderation_status": "flagged",
            "created_at": CREATED_AT,
        }

        assert row_to_post(row).moderation_status == ModerationStatus.FLAGGED

    def test_unknown_moderation_status_maps_to_none(self):
        """A moderation state this service does not know should not fail the read."""
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "like_count": 3,
            "moderation_status": "quarantined",
            "created_at": CREATED_AT,
        }

        post = row_to_post(row)

        assert post.moderation_status is None
        assert post.like_count == 3


class TestEngagementMapper:
    """Tests for engagement row mapping."""

    def test_numeric_columns_become_floats(self):
        """Decimal columns should be converted and NULL shares read as 0."""
        row = {
            "post_id": uuid4(),
            "engagement_score": Decimal("114.04"),
            "likes_weight": Decimal("200"),
            "comments_weight": None,
            "views_weight": 10.0,
            "shares_count": None,
            "updated_at": CREATED_AT,
        }

        engagement = row_to_engagement(row)

        assert engagement.engagement_score == 114.04
        assert engagement.likes_weight == 200.0
        assert engagement.comments_weight == 0.0
        assert engagement.shares_count == 0


class TestReportMapper:
    """Tests for report mapping."""

    def test_enums_stored_as_values(self):
        """Reason and status should be written as their string values."""
        row = {
            "id": uuid4(),
            "reporter_id": uuid4(),
            "post_id": uuid4(),
            "reason": "harassment",
            "description": None,
            "status": "pending",
            "created_at": CREATED_AT,
        }

        report = row_to_report(row)
        data = report_to_dict(report)

        assert report.reason == ReportReason.HARASSMENT
        assert report.status == ReportStatus.PENDING
        assert data["reason"] == "harassment"
        assert data["status"] == "pending"


class TestVendorMapper:
    """Tests for vendor mapping."""

    def test_vendor_with_services(self):
        """Services and acceptance rate should be attached to the vendor."""
        service = row_to_vendor_service(
            {
                "id": uuid4(),
                "name": "Mehndi Artist",
                "category": "mehndi",
                "base_price": Decimal("8500.00"),
                "is_available": True,
            }
        )

        vendor = row_to_vendor(
            {
                "id": uuid4(),
                "business_name": "Henna House",
                "rating": Decimal("4.70"),
                "total_reviews": 31,
                "response_time_hours": None,
                "is_active": True,
            },
            services=[service],
            acceptance_rate=75.0,
        )

        assert vendor.rating == 4.7
        assert vendor.services[0].base_price == 8500.0
        assert vendor.acceptance_rate == 75.0
        assert vendor.response_time_hours is None
