"""In-memory repository implementations for testing."""

from .engagement import InMemoryEngagementRepository
from .moderation import InMemoryModerationQueueRepository
from .post import InMemoryPostRepository
from .report import InMemoryReportRepository
from .review import InMemoryReviewRepository
from .vendor import InMemoryVendorRepository

__all__ = [
    "InMemoryEngagementRepository",
    "InMemoryModerationQueueRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
    "InMemoryReviewRepository",
    "InMemoryVendorRepository",
]
