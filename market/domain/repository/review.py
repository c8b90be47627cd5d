"""Review repository interface."""

from abc import ABC, abstractmethod
from typing import List

from market.domain.model.review import Review
from market.domain.value import VendorId


class ReviewRepository(ABC):
    """Repository for vendor reviews."""

    @abstractmethod
    async def find_published_by_vendor(
        self, vendor_id: VendorId, limit: int = 100
    ) -> List[Review]:
        """Find a vendor's published reviews, newest first.

        Args:
            vendor_id: The vendor's ID
            limit: Maximum number of reviews to return

        Returns:
            Published reviews ordered by created_at descending
        """
        pass
