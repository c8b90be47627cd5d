"""Domain value objects for the marketplace."""

from market.domain.value.identifiers import (
    ModerationEntryId,
    PostId,
    ReportId,
    ReviewId,
    UserId,
    VendorId,
    VendorServiceId,
)
from market.domain.value.types import (
    BudgetHealth,
    BudgetRange,
    ModerationStatus,
    ReportReason,
    ReportStatus,
    Sentiment,
    ServiceType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "ReportId",
    "ModerationEntryId",
    "VendorId",
    "VendorServiceId",
    "ReviewId",
    # Types
    "BudgetHealth",
    "BudgetRange",
    "ModerationStatus",
    "ReportReason",
    "ReportStatus",
    "Sentiment",
    "ServiceType",
]
