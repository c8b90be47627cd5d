"""Content report entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import PostId, ReportId, ReportReason, ReportStatus, UserId


class Report(DomainModel):
    """A user's report against a feed post.

    Business rules:
    - One report per reporter per post (enforced by database unique constraint)
    - Reporters cannot report their own posts
    - Reporters cannot delete their reports; staff move them to reviewed
    """

    id: ReportId
    reporter_id: UserId
    post_id: PostId
    reason: ReportReason
    description: Optional[str] = Field(default=None, max_length=500)
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
