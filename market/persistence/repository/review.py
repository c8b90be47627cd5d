"""PostgreSQL implementation of Review repository."""

from typing import List

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Review
from market.domain.repository import ReviewRepository
from market.domain.value import VendorId
from market.persistence.mappers import row_to_review
from market.persistence.tables import reviews_table


class PostgresReviewRepository(ReviewRepository):
    """PostgreSQL implementation of ReviewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_published_by_vendor(
        self, vendor_id: VendorId, limit: int = 100
    ) -> List[Review]:
        """Find a vendor's published reviews, newest first."""
        stmt = (
            select(reviews_table)
            .where(
                and_(
                    reviews_table.c.vendor_id == vendor_id,
                    reviews_table.c.is_published.is_(True),
                )
            )
            .order_by(reviews_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_review(row._asdict()) for row in result.fetchall()]
