"""Feed post.

Posts are owned by the feed; this service reads their counters to derive
engagement and looks up their author when a post is reported.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import ModerationStatus, PostId, UserId


class Post(DomainModel):
    """Feed post with its interaction counters.

    Counters are non-negative; NULL counters in the store are read as 0 by
    the persistence mappers.
    """

    id: PostId
    author_id: UserId
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    moderation_status: Optional[ModerationStatus] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
