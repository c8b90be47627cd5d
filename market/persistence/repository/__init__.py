"""PostgreSQL repository implementations."""

from market.persistence.repository.engagement import PostgresEngagementRepository
from market.persistence.repository.moderation import PostgresModerationQueueRepository
from market.persistence.repository.post import PostgresPostRepository
from market.persistence.repository.report import PostgresReportRepository
from market.persistence.repository.review import PostgresReviewRepository
from market.persistence.repository.vendor import PostgresVendorRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresEngagementRepository",
    "PostgresReportRepository",
    "PostgresModerationQueueRepository",
    "PostgresVendorRepository",
    "PostgresReviewRepository",
]
