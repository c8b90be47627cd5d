"""Unit tests for EngagementService."""

import math
from datetime import datetime
from typing import Optional
from uuid import uuid4

import pytest

from market.config import EngagementSettings
from market.domain.error import NotFoundError, StoreUnavailableError
from market.domain.model import Post, PostEngagement
from market.domain.repository import EngagementRepository, PostRepository
from market.domain.service import EngagementService
from market.domain.value import ModerationStatus, PostId
from market.persistence.repository.inmemory import (
    InMemoryEngagementRepository,
    InMemoryPostRepository,
)
from tests.conftest import NOW, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class FailingEngagementRepository(InMemoryEngagementRepository):
    """Engagement repository whose upsert fails for selected posts."""

    def __init__(self, failing: set[PostId]) -> None:
        super().__init__()
        self.failing = failing

    async def upsert(self, engagement: PostEngagement) -> PostEngagement:
        if engagement.post_id in self.failing:
            raise RuntimeError("constraint violation")
        return await super().upsert(engagement)


class WriteOnlyEngagementRepository(InMemoryEngagementRepository):
    """Engagement repository whose reads fail; scoring must only upsert."""

    async def find_by_post_id(self, post_id: PostId) -> Optional[PostEngagement]:
        raise ConnectionError("connection reset")


class UnavailablePostRepository(InMemoryPostRepository):
    """Post repository whose queries fail."""

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        raise ConnectionError("connection refused")

    async def find_created_since(
        self,
        since: datetime,
        moderation_status: Optional[ModerationStatus] = ModerationStatus.APPROVED,
    ) -> list[Post]:
        raise ConnectionError("connection refused")


class TestRecalculatePost:
    """Tests for single-post recalculation."""

    @pytest.mark.asyncio
    async def test_stores_score_and_components(self, unit_env):
        """Recalculating a post should upsert its score and weighted components."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        engagement_repo = await unit_env.get(EngagementRepository)

        post = make_post(age_hours=48, likes=100, comments=20, views=1000)
        await post_repo.save(post)

        # Act
        results = await service.recalculate_post(post.id, now=NOW)

        # Assert
        assert len(results) == 1
        stored = await engagement_repo.find_by_post_id(post.id)
        assert stored is not None
        assert stored.engagement_score == pytest.approx(310 * math.exp(-1))
        assert stored.likes_weight == 200.0
        assert stored.comments_weight == 100.0
        assert stored.views_weight == pytest.approx(10.0)
        assert stored.shares_count == 0

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        """Recalculating a missing post should raise NotFoundError."""
        service = await unit_env.get(EngagementService)

        with pytest.raises(NotFoundError):
            await service.recalculate_post(PostId(uuid4()), now=NOW)

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        """Running twice with the same inputs should store the same score."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        engagement_repo = await unit_env.get(EngagementRepository)

        post = make_post(age_hours=5, likes=7, comments=3, views=90)
        await post_repo.save(post)

        # Act
        await service.recalculate_post(post.id, now=NOW)
        first = await engagement_repo.find_by_post_id(post.id)
        await service.recalculate_post(post.id, now=NOW)
        second = await engagement_repo.find_by_post_id(post.id)

        # Assert
        assert first.engagement_score == second.engagement_score

    @pytest.mark.asyncio
    async def test_lowered_counters_lower_the_score(self, unit_env):
        """Corrected (lower) counters should be reflected on the next pass."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        engagement_repo = await unit_env.get(EngagementRepository)

        post = make_post(likes=50)
        await post_repo.save(post)
        await service.recalculate_post(post.id, now=NOW)
        before = await engagement_repo.find_by_post_id(post.id)

        # Act
        await post_repo.save(post.model_copy(update={"like_count": 10}))
        await service.recalculate_post(post.id, now=NOW)
        after = await engagement_repo.find_by_post_id(post.id)

        # Assert
        assert after.engagement_score < before.engagement_score

    @pytest.mark.asyncio
    async def test_store_failure_raises_store_unavailable(self):
        """A failing post lookup should surface as StoreUnavailableError."""
        service = EngagementService(
            post_repository=UnavailablePostRepository(),
            engagement_repository=InMemoryEngagementRepository(),
            settings=EngagementSettings(),
        )

        with pytest.raises(StoreUnavailableError):
            await service.recalculate_post(PostId(uuid4()), now=NOW)


class TestRecalculateRecent:
    """Tests for batch recalculation."""

    @pytest.mark.asyncio
    async def test_selects_recent_approved_posts_only(self, unit_env):
        """Batch mode should score approved posts from the last 7 days only."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)

        recent = make_post(age_hours=24, likes=1)
        newest = make_post(age_hours=2, likes=1)
        old = make_post(age_hours=24 * 8, likes=1)
        pending = make_post(age_hours=1, status=ModerationStatus.PENDING)
        unmoderated = make_post(age_hours=1, status=None)
        for post in (recent, newest, old, pending, unmoderated):
            await post_repo.save(post)

        # Act
        results = await service.recalculate_recent(now=NOW)

        # Assert - newest first
        assert [r.post_id for r in results] == [newest.id, recent.id]

    @pytest.mark.asyncio
    async def test_empty_window_processes_nothing(self, unit_env):
        """No eligible posts should give an empty result, not an error."""
        service = await unit_env.get(EngagementService)

        results = await service.recalculate_recent(now=NOW)

        assert results == []

    @pytest.mark.asyncio
    async def test_failed_upsert_is_skipped(self):
        """One failing upsert should not abort the rest of the batch."""
        # Arrange
        post_repo = InMemoryPostRepository()
        good = make_post(age_hours=1, likes=1)
        bad = make_post(age_hours=2, likes=1)
        await post_repo.save(good)
        await post_repo.save(bad)

        engagement_repo = FailingEngagementRepository(failing={bad.id})
        service = EngagementService(
            post_repository=post_repo,
            engagement_repository=engagement_repo,
            settings=EngagementSettings(),
        )

        # Act
        results = await service.recalculate_recent(now=NOW)

        # Assert
        assert [r.post_id for r in results] == [good.id]
        assert await engagement_repo.find_by_post_id(bad.id) is None

    @pytest.mark.asyncio
    async def test_scoring_is_a_single_upsert_per_post(self):
        """Each post should be scored with one upsert that returns stored shares."""
        # Arrange
        post_repo = InMemoryPostRepository()
        shared = make_post(age_hours=1, likes=2)
        unshared = make_post(age_hours=2, likes=1)
        await post_repo.save(shared)
        await post_repo.save(unshared)

        engagement_repo = WriteOnlyEngagementRepository()
        for _ in range(2):
            await engagement_repo.increment_shares(shared.id)
        service = EngagementService(
            post_repository=post_repo,
            engagement_repository=engagement_repo,
            settings=EngagementSettings(),
        )

        # Act
        results = await service.recalculate_recent(now=NOW)

        # Assert
        shares = {r.post_id: r.shares_count for r in results}
        assert shares == {shared.id: 2, unshared.id: 0}

    @pytest.mark.asyncio
    async def test_selection_failure_raises_store_unavailable(self):
        """A failing selection query should abort the job."""
        service = EngagementService(
            post_repository=UnavailablePostRepository(),
            engagement_repository=InMemoryEngagementRepository(),
            settings=EngagementSettings(),
        )

        with pytest.raises(StoreUnavailableError):
            await service.recalculate_recent(now=NOW)

    @pytest.mark.asyncio
    async def test_window_is_configurable(self):
        """batch_window_days should bound the selection."""
        # Arrange
        post_repo = InMemoryPostRepository()
        inside = make_post(age_hours=20)
        outside = make_post(age_hours=30)
        await post_repo.save(inside)
        await post_repo.save(outside)

        service = EngagementService(
            post_repository=post_repo,
            engagement_repository=InMemoryEngagementRepository(),
            settings=EngagementSettings(batch_window_days=1),
        )

        # Act
        results = await service.recalculate_recent(now=NOW)

        # Assert
        assert [r.post_id for r in results] == [inside.id]


class TestRecordShare:
    """Tests for share tracking."""

    @pytest.mark.asyncio
    async def test_increments_by_one_per_call(self, unit_env):
        """Each share should add exactly one to the side counter."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post(likes=3)
        await post_repo.save(post)

        # Act
        first = await service.record_share(post.id)
        second = await service.record_share(post.id)

        # Assert
        assert (first, second) == (1, 2)

    @pytest.mark.asyncio
    async def test_shares_do_not_change_the_score(self, unit_env):
        """The score formula should ignore shares."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        engagement_repo = await unit_env.get(EngagementRepository)

        post = make_post(age_hours=10, likes=3, comments=1)
        await post_repo.save(post)
        await service.recalculate_post(post.id, now=NOW)
        before = await engagement_repo.find_by_post_id(post.id)

        # Act
        await service.record_share(post.id)
        await service.recalculate_post(post.id, now=NOW)
        after = await engagement_repo.find_by_post_id(post.id)

        # Assert
        assert after.shares_count == 1
        assert after.engagement_score == before.engagement_score

    @pytest.mark.asyncio
    async def test_recalculation_keeps_share_count(self, unit_env):
        """Rescoring should carry the existing shares count forward."""
        # Arrange
        service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        engagement_repo = await unit_env.get(EngagementRepository)

        post = make_post()
        await post_repo.save(post)
        for _ in range(3):
            await service.record_share(post.id)

        # Act
        await service.recalculate_recent(now=NOW)

        # Assert
        stored = await engagement_repo.find_by_post_id(post.id)
        assert stored.shares_count == 3

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        """Sharing a missing post should raise NotFoundError."""
        service = await unit_env.get(EngagementService)

        with pytest.raises(NotFoundError):
            await service.record_share(PostId(uuid4()))
