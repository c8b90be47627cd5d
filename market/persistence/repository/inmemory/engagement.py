"""In-memory engagement repository for testing."""

from typing import Optional

from market.domain.model.engagement import PostEngagement
from market.domain.repository.engagement import EngagementRepository
from market.domain.value import PostId


class InMemoryEngagementRepository(EngagementRepository):
    """In-memory implementation of EngagementRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[PostId, PostEngagement] = {}

    async def find_by_post_id(self, post_id: PostId) -> Optional[PostEngagement]:
        """Find the engagement record for a post."""
        return self._records.get(post_id)

    async def upsert(self, engagement: PostEngagement) -> PostEngagement:
        """Insert or overwrite the record keyed by post_id.

        The stored shares count is kept; only the score columns are written.
        """
        existing = self._records.get(engagement.post_id)
        if existing:
            engagement = engagement.model_copy(
                update={"shares_count": existing.shares_count}
            )
        self._records[engagement.post_id] = engagement
        return engagement

    async def increment_shares(self, post_id: PostId) -> int:
        """Add one share, creating the record if absent."""
        existing = self._records.get(post_id) or PostEngagement(post_id=post_id)
        updated = existing.model_copy(
            update={"shares_count": existing.shares_count + 1}
        )
        self._records[post_id] = updated
        return updated.shares_count
