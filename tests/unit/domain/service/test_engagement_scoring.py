"""Unit tests for the engagement scoring primitive."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from market.config import EngagementSettings
from market.domain.service import calculate_engagement_score, engagement_breakdown
from tests.conftest import NOW


class TestEngagementScore:
    """Tests for calculate_engagement_score."""

    def test_forty_eight_hour_old_post(self):
        """100 likes, 20 comments and 1000 views at 48h should score ~114.04."""
        # Arrange
        created_at = NOW - timedelta(hours=48)

        # Act
        score = calculate_engagement_score(100, 20, 1000, created_at, now=NOW)

        # Assert - raw 310 decayed by e^-1
        assert score == pytest.approx(310 * math.exp(-1))
        assert round(score, 2) == 114.04

    def test_brand_new_post_has_no_decay(self):
        """A post created now should score its raw weighted interactions."""
        score = calculate_engagement_score(3, 2, 100, NOW, now=NOW)

        assert score == pytest.approx(3 * 2 + 2 * 5 + 100 * 0.01)

    def test_no_interactions_scores_zero(self):
        """A post with no interactions should score exactly zero."""
        score = calculate_engagement_score(0, 0, 0, NOW - timedelta(hours=5), now=NOW)

        assert score == 0.0

    def test_older_post_scores_lower(self):
        """Same counters should score strictly lower as the post ages."""
        # Arrange
        ages = [0, 1, 12, 48, 24 * 7]

        # Act
        scores = [
            calculate_engagement_score(10, 5, 200, NOW - timedelta(hours=h), now=NOW)
            for h in ages
        ]

        # Assert
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == len(scores)

    def test_more_interactions_never_score_lower(self):
        """Adding a like, comment or view should not lower the score."""
        created_at = NOW - timedelta(hours=10)
        base = calculate_engagement_score(5, 5, 5, created_at, now=NOW)

        assert calculate_engagement_score(6, 5, 5, created_at, now=NOW) > base
        assert calculate_engagement_score(5, 6, 5, created_at, now=NOW) > base
        assert calculate_engagement_score(5, 5, 6, created_at, now=NOW) > base

    def test_comment_outweighs_like_and_like_outweighs_view(self):
        """One comment > one like > one view at the same age."""
        created_at = NOW - timedelta(hours=3)

        comment = calculate_engagement_score(0, 1, 0, created_at, now=NOW)
        like = calculate_engagement_score(1, 0, 0, created_at, now=NOW)
        view = calculate_engagement_score(0, 0, 1, created_at, now=NOW)

        assert comment > like > view

    def test_future_created_at_is_not_boosted(self):
        """A post dated in the future should score as if created now."""
        future = NOW + timedelta(hours=6)

        assert calculate_engagement_score(
            10, 0, 0, future, now=NOW
        ) == calculate_engagement_score(10, 0, 0, NOW, now=NOW)

    def test_naive_datetimes_are_treated_as_utc(self):
        """Naive created_at values should not fail against an aware now."""
        naive = datetime(2026, 10, 17, 12, 0)

        score = calculate_engagement_score(100, 20, 1000, naive, now=NOW)

        assert score == pytest.approx(310 * math.exp(-1))

    def test_custom_settings_change_weights(self):
        """Weights and decay should come from EngagementSettings."""
        settings = EngagementSettings(like_weight=1.0, decay_hours=24.0)

        score = calculate_engagement_score(
            10, 0, 0, NOW - timedelta(hours=24), now=NOW, settings=settings
        )

        assert score == pytest.approx(10 * math.exp(-1))


class TestEngagementBreakdown:
    """Tests for engagement_breakdown."""

    def test_components_sum_to_raw(self):
        """Weighted components should add up to the undecayed score."""
        # Act
        breakdown = engagement_breakdown(
            4, 3, 250, NOW - timedelta(hours=12), now=NOW
        )

        # Assert
        assert breakdown.likes_weight == 8.0
        assert breakdown.comments_weight == 15.0
        assert breakdown.views_weight == pytest.approx(2.5)
        assert breakdown.raw == pytest.approx(25.5)
        assert breakdown.recency_factor == pytest.approx(math.exp(-0.25))
        assert breakdown.score == pytest.approx(25.5 * math.exp(-0.25))

    def test_defaults_now_to_current_time(self):
        """Without an explicit now the primitive should use the current time."""
        created_at = datetime.now(timezone.utc)

        breakdown = engagement_breakdown(1, 0, 0, created_at)

        assert 0.99 < breakdown.recency_factor <= 1.0
