"""PostgreSQL implementation of Moderation queue repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import ModerationEntry
from market.domain.repository import ModerationQueueRepository
from market.domain.value import PostId
from market.persistence.mappers import moderation_entry_to_dict, row_to_moderation_entry
from market.persistence.tables import moderation_queue_table


class PostgresModerationQueueRepository(ModerationQueueRepository):
    """PostgreSQL implementation of ModerationQueueRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def enqueue(self, entry: ModerationEntry) -> ModerationEntry:
        """Add an entry inside a SAVEPOINT, so a failure keeps earlier writes."""
        stmt = insert(moderation_queue_table).values(**moderation_entry_to_dict(entry))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return entry

    async def find_by_post(self, post_id: PostId) -> List[ModerationEntry]:
        """Find queue entries for a post, oldest first."""
        stmt = (
            select(moderation_queue_table)
            .where(moderation_queue_table.c.post_id == post_id)
            .order_by(moderation_queue_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_moderation_entry(row._asdict()) for row in result.fetchall()]
