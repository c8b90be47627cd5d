"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Store rows are not
trusted: NULL counters become 0 and numeric columns become floats here, so
the domain never sees a NULL where it expects a number.
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, Optional
from uuid import UUID

import logfire

from market.domain.model import (
    ModerationEntry,
    Post,
    PostEngagement,
    Report,
    Review,
    Vendor,
    VendorService,
)
from market.domain.value import (
    ModerationEntryId,
    ModerationStatus,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    ReviewId,
    UserId,
    VendorId,
    VendorServiceId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return float(value)
    return value


def _count(value: Any) -> int:
    """Counter value, with NULL and negative values read as 0."""
    return max(0, int(value or 0))


def _moderation_status(post_id: Any, value: Optional[str]) -> Optional[ModerationStatus]:
    if not value:
        return None
    try:
        return ModerationStatus(value)
    except ValueError:
        # Moderation tooling owns this column and may add states
        logfire.warn(
            "Unknown moderation status", post_id=str(post_id), moderation_status=value
        )
        return None


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Unknown moderation states map to None rather than failing the read.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["user_id"])),
        like_count=_count(row.get("like_count")),
        comment_count=_count(row.get("comment_count")),
        view_count=_count(row.get("view_count")),
        moderation_status=_moderation_status(row["id"], row.get("moderation_status")),
        created_at=row["created_at"],
    )


def row_to_engagement(row: Dict[str, Any]) -> PostEngagement:
    """Convert database row to PostEngagement domain model."""
    return PostEngagement(
        post_id=PostId(_uuid(row["post_id"])),
        engagement_score=max(0.0, _float(row.get("engagement_score")) or 0.0),
        likes_weight=_float(row.get("likes_weight")) or 0.0,
        comments_weight=_float(row.get("comments_weight")) or 0.0,
        views_weight=_float(row.get("views_weight")) or 0.0,
        shares_count=_count(row.get("shares_count")),
        updated_at=row["updated_at"],
    )


def engagement_to_dict(engagement: PostEngagement) -> Dict[str, Any]:
    """Convert PostEngagement domain model to database dict."""
    return engagement.model_dump()


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        reason=ReportReason(row["reason"]),
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["reason"] = report.reason.value
    data["status"] = report.status.value
    return data


def row_to_moderation_entry(row: Dict[str, Any]) -> ModerationEntry:
    """Convert database row to ModerationEntry domain model."""
    return ModerationEntry(
        id=ModerationEntryId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        flagged_reason=row["flagged_reason"],
        confidence_score=_float(row["confidence_score"]),
        created_at=row["created_at"],
    )


def moderation_entry_to_dict(entry: ModerationEntry) -> Dict[str, Any]:
    """Convert ModerationEntry domain model to database dict."""
    return entry.model_dump()


def row_to_vendor_service(row: Dict[str, Any]) -> VendorService:
    """Convert database row to VendorService domain model."""
    return VendorService(
        id=VendorServiceId(_uuid(row["id"])),
        name=row["name"],
        category=row.get("category"),
        base_price=_float(row["base_price"]),
        is_available=row.get("is_available", True),
    )


def row_to_vendor(
    row: Dict[str, Any],
    services: Iterable[VendorService] = (),
    acceptance_rate: Optional[float] = None,
) -> Vendor:
    """Convert database row to Vendor domain model.

    Args:
        row: Vendor row as dict
        services: The vendor's services
        acceptance_rate: Percent of answered inquiries accepted (if known)

    Returns:
        Vendor domain model
    """
    return Vendor(
        id=VendorId(_uuid(row["id"])),
        business_name=row["business_name"],
        rating=_float(row.get("rating")),
        total_reviews=row.get("total_reviews"),
        response_time_hours=_float(row.get("response_time_hours")),
        acceptance_rate=acceptance_rate,
        is_active=row.get("is_active", True),
        services=list(services),
    )


def row_to_review(row: Dict[str, Any]) -> Review:
    """Convert database row to Review domain model."""
    return Review(
        id=ReviewId(_uuid(row["id"])),
        vendor_id=VendorId(_uuid(row["vendor_id"])),
        rating=row["rating"],
        comment=row.get("comment"),
        is_published=row.get("is_published", True),
        created_at=row["created_at"],
    )
