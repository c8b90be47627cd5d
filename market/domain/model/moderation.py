"""Moderation queue entry."""

from datetime import datetime, timezone

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import ModerationEntryId, PostId


class ModerationEntry(DomainModel):
    """A post flagged for staff review."""

    id: ModerationEntryId
    post_id: PostId
    flagged_reason: str = Field(min_length=1, max_length=255)
    confidence_score: float = Field(ge=0, le=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
