"""Engagement repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from market.domain.model.engagement import PostEngagement
from market.domain.value import PostId


class EngagementRepository(ABC):
    """Repository for the per-post engagement side table."""

    @abstractmethod
    async def find_by_post_id(self, post_id: PostId) -> Optional[PostEngagement]:
        """Find the engagement record for a post.

        Args:
            post_id: The post ID

        Returns:
            The engagement record if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, engagement: PostEngagement) -> PostEngagement:
        """Insert the record, or overwrite the existing one for the same post.

        An existing record keeps its shares count; the given shares_count is
        only used when the record is created. Failures are isolated to this
        record: a failed upsert must leave the surrounding unit of work usable
        for further upserts.

        Args:
            engagement: Engagement record keyed by post_id

        Returns:
            The stored record, with its current shares count
        """
        pass

    @abstractmethod
    async def increment_shares(self, post_id: PostId) -> int:
        """Atomically add one share to a post, creating the record if absent.

        Args:
            post_id: The post ID

        Returns:
            The new shares count
        """
        pass
