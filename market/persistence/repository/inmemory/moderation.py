"""In-memory moderation queue repository for testing."""

from market.domain.model.moderation import ModerationEntry
from market.domain.repository.moderation import ModerationQueueRepository
from market.domain.value import PostId


class InMemoryModerationQueueRepository(ModerationQueueRepository):
    """In-memory implementation of ModerationQueueRepository for testing."""

    def __init__(self) -> None:
        self._entries: list[ModerationEntry] = []

    async def enqueue(self, entry: ModerationEntry) -> ModerationEntry:
        """Add an entry to the queue."""
        self._entries.append(entry)
        return entry

    async def find_by_post(self, post_id: PostId) -> list[ModerationEntry]:
        """Find queue entries for a post, oldest first."""
        return [e for e in self._entries if e.post_id == post_id]
