"""Repository interfaces for the marketplace domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from market.domain.repository.engagement import EngagementRepository
from market.domain.repository.moderation import ModerationQueueRepository
from market.domain.repository.post import PostRepository
from market.domain.repository.report import ReportRepository
from market.domain.repository.review import ReviewRepository
from market.domain.repository.vendor import VendorRepository

__all__ = [
    "PostRepository",
    "EngagementRepository",
    "ReportRepository",
    "ModerationQueueRepository",
    "VendorRepository",
    "ReviewRepository",
]
