"""Moderation queue repository interface."""

from abc import ABC, abstractmethod
from typing import List

from market.domain.model.moderation import ModerationEntry
from market.domain.value import PostId


class ModerationQueueRepository(ABC):
    """Repository for the staff moderation queue."""

    @abstractmethod
    async def enqueue(self, entry: ModerationEntry) -> ModerationEntry:
        """Add an entry to the moderation queue.

        A failed enqueue must not invalidate work already done in the same
        unit of work (e.g. the report that triggered it).

        Args:
            entry: The entry to add

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[ModerationEntry]:
        """Find queue entries for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Queue entries for the post
        """
        pass
