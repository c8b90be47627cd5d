"""Engagement domain service.

Recomputes the denormalized ``post_engagement`` records from post counters.
Scores are always fully recomputed rather than adjusted, so corrected
(lowered) counters are reflected on the next pass.
"""

from datetime import datetime, timedelta
from typing import Optional

import logfire

from market.config import EngagementSettings
from market.domain.error import NotFoundError, StoreUnavailableError
from market.domain.model.engagement import PostEngagement
from market.domain.model.post import Post
from market.domain.repository import EngagementRepository, PostRepository
from market.domain.value import ModerationStatus, PostId

from .base import Service
from .scoring import engagement_breakdown


class EngagementService(Service):
    """Domain service for engagement aggregation and share tracking."""

    def __init__(
        self,
        post_repository: PostRepository,
        engagement_repository: EngagementRepository,
        settings: EngagementSettings,
    ) -> None:
        """Initialize engagement service.

        Args:
            post_repository: Post repository
            engagement_repository: Engagement side-table repository
            settings: Engagement scoring settings
        """
        self.post_repository = post_repository
        self.engagement_repository = engagement_repository
        self.settings = settings

    async def recalculate_post(
        self, post_id: PostId, now: Optional[datetime] = None
    ) -> list[PostEngagement]:
        """Recompute the engagement record of a single post.

        Args:
            post_id: Post ID
            now: Reference time for recency decay (defaults to now)

        Returns:
            The stored record, or an empty list if the upsert failed

        Raises:
            NotFoundError: If the post does not exist
            StoreUnavailableError: If the post could not be loaded
        """
        with logfire.span("engagement_service.recalculate_post", post_id=str(post_id)):
            try:
                post = await self.post_repository.find_by_id(post_id)
            except Exception as e:
                logfire.error(
                    "Failed to load post for engagement scoring",
                    post_id=str(post_id),
                    error=str(e),
                )
                raise StoreUnavailableError(
                    "Failed to load post for engagement scoring"
                ) from e

            if post is None:
                raise NotFoundError("Post", str(post_id))

            return await self._score_posts([post], now or self.now())

    async def recalculate_recent(
        self, now: Optional[datetime] = None
    ) -> list[PostEngagement]:
        """Recompute engagement for all approved posts in the batch window.

        Args:
            now: Reference time for the window and recency decay

        Returns:
            Records that were stored successfully

        Raises:
            StoreUnavailableError: If the posts could not be selected
        """
        now = now or self.now()
        since = now - timedelta(days=self.settings.batch_window_days)

        with logfire.span(
            "engagement_service.recalculate_recent",
            window_days=self.settings.batch_window_days,
        ):
            try:
                posts = await self.post_repository.find_created_since(
                    since, moderation_status=ModerationStatus.APPROVED
                )
            except Exception as e:
                logfire.error(
                    "Failed to select posts for engagement scoring", error=str(e)
                )
                raise StoreUnavailableError(
                    "Failed to select posts for engagement scoring"
                ) from e

            logfire.info("Processing posts for engagement scoring", count=len(posts))
            return await self._score_posts(posts, now)

    async def record_share(self, post_id: PostId) -> int:
        """Count a share of a post and refresh its engagement record.

        Args:
            post_id: Post ID

        Returns:
            The post's new shares count

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("engagement_service.record_share", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", str(post_id))

            shares = await self.engagement_repository.increment_shares(post_id)
            await self._score_posts([post], self.now())

            logfire.info("Post shared", post_id=str(post_id), shares_count=shares)
            return shares

    async def _score_posts(
        self, posts: list[Post], now: datetime
    ) -> list[PostEngagement]:
        """Score and upsert each post, skipping the ones that fail."""
        stored = []
        for post in posts:
            try:
                stored.append(await self._score_post(post, now))
            except Exception as e:
                # One bad record must not abort the batch
                logfire.error(
                    "Error updating engagement for post",
                    post_id=str(post.id),
                    error=str(e),
                    error_type=type(e).__name__,
                )

        logfire.info(
            "Engagement scoring completed", processed=len(stored), selected=len(posts)
        )
        return stored

    async def _score_post(self, post: Post, now: datetime) -> PostEngagement:
        breakdown = engagement_breakdown(
            like_count=post.like_count,
            comment_count=post.comment_count,
            view_count=post.view_count,
            created_at=post.created_at,
            now=now,
            settings=self.settings,
        )

        # The repository keeps the stored shares count in the same statement
        return await self.engagement_repository.upsert(
            PostEngagement(
                post_id=post.id,
                engagement_score=breakdown.score,
                likes_weight=breakdown.likes_weight,
                comments_weight=breakdown.comments_weight,
                views_weight=breakdown.views_weight,
                updated_at=now,
            )
        )
