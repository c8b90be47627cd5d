"""PostgreSQL implementation of Report repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Report
from market.domain.repository import ReportRepository
from market.domain.value import PostId, ReportStatus, UserId
from market.persistence.mappers import report_to_dict, row_to_report
from market.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_reporter_and_post(
        self, reporter_id: UserId, post_id: PostId
    ) -> Optional[Report]:
        """Find a reporter's report on a specific post."""
        stmt = select(reports_table).where(
            and_(
                reports_table.c.reporter_id == reporter_id,
                reports_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_by_reporter_since(
        self, reporter_id: UserId, since: datetime
    ) -> List[Report]:
        """Find a reporter's reports created at or after a point in time."""
        stmt = (
            select(reports_table)
            .where(
                and_(
                    reports_table.c.reporter_id == reporter_id,
                    reports_table.c.created_at >= since,
                )
            )
            .order_by(reports_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def count_pending_for_post(self, post_id: PostId) -> int:
        """Count pending reports against a post."""
        stmt = select(func.count()).where(
            and_(
                reports_table.c.post_id == post_id,
                reports_table.c.status == ReportStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, report: Report) -> Report:
        """Save a new report.

        Raises:
            IntegrityError: If the reporter already reported this post
        """
        stmt = insert(reports_table).values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report
