"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Post
from market.domain.repository import PostRepository
from market.domain.value import ModerationStatus, PostId
from market.persistence.mappers import row_to_post
from market.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_created_since(
        self,
        since: datetime,
        moderation_status: Optional[ModerationStatus] = ModerationStatus.APPROVED,
    ) -> List[Post]:
        """Find posts created at or after a point in time, newest first."""
        with logfire.span(
            "post_repository.find_created_since",
            since=since.isoformat(),
            moderation_status=moderation_status.value if moderation_status else None,
        ):
            stmt = select(posts_table).where(posts_table.c.created_at >= since)
            if moderation_status is not None:
                stmt = stmt.where(
                    posts_table.c.moderation_status == moderation_status.value
                )
            stmt = stmt.order_by(posts_table.c.created_at.desc())

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]
