"""Report repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from market.domain.model.report import Report
from market.domain.value import PostId, UserId


class ReportRepository(ABC):
    """Repository for content reports."""

    @abstractmethod
    async def find_by_reporter_and_post(
        self, reporter_id: UserId, post_id: PostId
    ) -> Optional[Report]:
        """Find a reporter's report on a specific post.

        Args:
            reporter_id: The reporting user's ID
            post_id: The reported post's ID

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_reporter_since(
        self, reporter_id: UserId, since: datetime
    ) -> List[Report]:
        """Find a reporter's reports created at or after a point in time.

        Args:
            reporter_id: The reporting user's ID
            since: Lower bound (inclusive) on created_at

        Returns:
            Reports ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_pending_for_post(self, post_id: PostId) -> int:
        """Count pending reports against a post.

        Args:
            post_id: The post ID

        Returns:
            Number of reports with status pending
        """
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Save a new report.

        Args:
            report: The report to save

        Returns:
            The saved report

        Raises:
            IntegrityError: If the reporter already reported this post
        """
        pass
