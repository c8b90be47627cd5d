"""PostgreSQL implementation of Engagement repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import PostEngagement
from market.domain.repository import EngagementRepository
from market.domain.value import PostId
from market.persistence.mappers import engagement_to_dict, row_to_engagement
from market.persistence.tables import post_engagement_table


class PostgresEngagementRepository(EngagementRepository):
    """PostgreSQL implementation of EngagementRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_id(self, post_id: PostId) -> Optional[PostEngagement]:
        """Find the engagement record for a post."""
        stmt = select(post_engagement_table).where(
            post_engagement_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_engagement(row._asdict()) if row else None

    async def upsert(self, engagement: PostEngagement) -> PostEngagement:
        """Insert or overwrite the record keyed by post_id.

        A single statement inside a SAVEPOINT, so a failed row leaves the
        session usable. The stored shares_count is kept on conflict and the
        row is returned as stored.
        """
        values = engagement_to_dict(engagement)
        stmt = insert(post_engagement_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[post_engagement_table.c.post_id],
            set_={
                "engagement_score": stmt.excluded.engagement_score,
                "likes_weight": stmt.excluded.likes_weight,
                "comments_weight": stmt.excluded.comments_weight,
                "views_weight": stmt.excluded.views_weight,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(*post_engagement_table.c)

        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.one()

        logfire.debug(
            "Engagement upserted",
            post_id=str(engagement.post_id),
            engagement_score=engagement.engagement_score,
            shares_count=row.shares_count,
        )
        return row_to_engagement(row._asdict())

    async def increment_shares(self, post_id: PostId) -> int:
        """Atomically add one share, creating the record if absent."""
        stmt = insert(post_engagement_table).values(post_id=post_id, shares_count=1)
        stmt = stmt.on_conflict_do_update(
            index_elements=[post_engagement_table.c.post_id],
            set_={"shares_count": post_engagement_table.c.shares_count + 1},
        ).returning(post_engagement_table.c.shares_count)

        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one()
