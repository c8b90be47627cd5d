"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from market.domain.model.post import Post
from market.domain.value import ModerationStatus, PostId


class PostRepository(ABC):
    """Repository for feed posts.

    Posts are created by the feed; the service reads their counters and
    authorship. The service never writes to the posts table.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_created_since(
        self,
        since: datetime,
        moderation_status: Optional[ModerationStatus] = ModerationStatus.APPROVED,
    ) -> List[Post]:
        """Find posts created at or after a point in time, newest first.

        Args:
            since: Lower bound (inclusive) on created_at
            moderation_status: Only include posts in this moderation state
                (None for any state)

        Returns:
            Matching posts ordered by created_at descending
        """
        pass
