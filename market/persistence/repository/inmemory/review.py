"""In-memory review repository for testing."""

from market.domain.model.review import Review
from market.domain.repository.review import ReviewRepository
from market.domain.value import VendorId


class InMemoryReviewRepository(ReviewRepository):
    """In-memory implementation of ReviewRepository for testing."""

    def __init__(self) -> None:
        self._reviews: list[Review] = []

    async def find_published_by_vendor(
        self, vendor_id: VendorId, limit: int = 100
    ) -> list[Review]:
        """Find a vendor's published reviews, newest first."""
        reviews = [
            r for r in self._reviews if r.vendor_id == vendor_id and r.is_published
        ]
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return reviews[:limit]

    async def save(self, review: Review) -> Review:
        """Save a review."""
        self._reviews.append(review)
        return review
