"""Post engagement record.

A denormalized side-table row holding the last computed engagement score of
a post together with its weighted components. The score is derived data: it
is always recomputed from the post's counters and never read back as a
source of truth for them.
"""

from datetime import datetime, timezone

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import PostId


class PostEngagement(DomainModel):
    """Engagement record keyed by post id."""

    post_id: PostId
    engagement_score: float = Field(default=0.0, ge=0)
    likes_weight: float = Field(default=0.0, ge=0)
    comments_weight: float = Field(default=0.0, ge=0)
    views_weight: float = Field(default=0.0, ge=0)
    # Out-of-band counter: shares are tracked here, not on the post itself
    shares_count: int = Field(default=0, ge=0)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
