"""In-memory report repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from market.domain.model.report import Report
from market.domain.repository.report import ReportRepository
from market.domain.value import PostId, ReportStatus, UserId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: list[Report] = []

    async def find_by_reporter_and_post(
        self, reporter_id: UserId, post_id: PostId
    ) -> Optional[Report]:
        """Find a reporter's report on a specific post."""
        for report in self._reports:
            if report.reporter_id == reporter_id and report.post_id == post_id:
                return report
        return None

    async def find_by_reporter_since(
        self, reporter_id: UserId, since: datetime
    ) -> list[Report]:
        """Find a reporter's reports created at or after a point in time."""
        reports = [
            r
            for r in self._reports
            if r.reporter_id == reporter_id and r.created_at >= since
        ]
        return sorted(reports, key=lambda r: r.created_at)

    async def count_pending_for_post(self, post_id: PostId) -> int:
        """Count pending reports against a post."""
        return sum(
            1
            for r in self._reports
            if r.post_id == post_id and r.status == ReportStatus.PENDING
        )

    async def save(self, report: Report) -> Report:
        """Save a new report.

        Raises:
            IntegrityError: If the reporter already reported this post
        """
        existing = await self.find_by_reporter_and_post(
            report.reporter_id, report.post_id
        )
        if existing:
            raise IntegrityError("Duplicate report", None, Exception())

        self._reports.append(report)
        return report
