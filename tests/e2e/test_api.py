"""End-to-end tests for the HTTP API.

The app runs against the test container, so persistence is in-memory and
state lives for the duration of one test.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID, uuid4

import pytest
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from market.config import Settings
from market.domain.model import Report
from market.domain.repository import (
    PostRepository,
    ReportRepository,
    ReviewRepository,
    VendorRepository,
)
from market.domain.value import PostId, ReportId, ReportReason, UserId
from market.interface.api.app import create_app
from market.util.jwt import create_token
from tests.conftest import make_post, make_review, make_service, make_vendor
from tests.di import build_test_container


@dataclass
class Api:
    """Test client plus access to the container's in-memory stores."""

    client: TestClient
    container: AsyncContainer

    def seed(self, repository_type: type, entity: Any) -> Any:
        """Save an entity through the app's own repository instance."""
        repository = self.client.portal.call(self.container.get, repository_type)
        return self.client.portal.call(repository.save, entity)

    def auth(self, user_id: UUID) -> dict[str, str]:
        """Authorization header for a user."""
        token = create_token(str(user_id), Settings().auth)
        return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api():
    """Create test client backed by a fresh test container."""
    container = build_test_container()
    with TestClient(create_app(container)) as client:
        yield Api(client=client, container=container)
        client.portal.call(container.close)


def recent_post(**kwargs):
    # Handlers score against the wall clock
    return make_post(now=datetime.now(timezone.utc), **kwargs)


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, api):
        """Health check should report the service as healthy."""
        response = api.client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"


class TestReportsApi:
    """Tests for POST /reports."""

    def test_requires_authentication(self, api):
        """Anonymous reports should be rejected with 401."""
        response = api.client.post(
            "/reports", json={"post_id": str(uuid4()), "reason": "spam"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "unauthorized"

    def test_rejects_invalid_token(self, api):
        """A token signed with another secret should be rejected with 401."""
        response = api.client.post(
            "/reports",
            json={"post_id": str(uuid4()), "reason": "spam"},
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401

    def test_report_then_duplicate(self, api):
        """The first report should succeed and a repeat should be rejected."""
        # Arrange
        post = api.seed(PostRepository, recent_post())
        headers = api.auth(uuid4())
        body = {"post_id": str(post.id), "reason": "spam", "description": "  ad  "}

        # Act
        first = api.client.post("/reports", json=body, headers=headers)
        second = api.client.post("/reports", json=body, headers=headers)

        # Assert
        assert first.status_code == 200
        assert first.json()["success"] is True
        assert first.json()["report_id"]
        assert second.status_code == 400
        assert second.json() == {
            "error": "You have already reported this post",
            "code": "duplicate_report",
        }

    def test_invalid_reason(self, api):
        """Unknown reasons should be rejected as invalid input."""
        response = api.client.post(
            "/reports",
            json={"post_id": str(uuid4()), "reason": "boring"},
            headers=api.auth(uuid4()),
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid reason", "code": "invalid_input"}

    def test_missing_fields(self, api):
        """A body without post_id and reason should be rejected."""
        response = api.client.post("/reports", json={}, headers=api.auth(uuid4()))

        assert response.status_code == 400
        assert response.json()["error"] == "post_id and reason are required"

    def test_unknown_post(self, api):
        """Reporting a missing post should return 404."""
        response = api.client.post(
            "/reports",
            json={"post_id": str(uuid4()), "reason": "spam"},
            headers=api.auth(uuid4()),
        )

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_self_report(self, api):
        """Reporting one's own post should be rejected."""
        author_id = uuid4()
        post = api.seed(PostRepository, recent_post(author_id=UserId(author_id)))

        response = api.client.post(
            "/reports",
            json={"post_id": str(post.id), "reason": "spam"},
            headers=api.auth(author_id),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "self_report"

    def test_rate_limited(self, api):
        """A sixth report within an hour should return 429 with Retry-After."""
        # Arrange
        reporter_id = uuid4()
        now = datetime.now(timezone.utc)
        for minutes_ago in (50, 40, 30, 20, 10):
            api.seed(
                ReportRepository,
                Report(
                    id=ReportId(uuid4()),
                    reporter_id=UserId(reporter_id),
                    post_id=PostId(uuid4()),
                    reason=ReportReason.SPAM,
                    created_at=now - timedelta(minutes=minutes_ago),
                ),
            )
        post = api.seed(PostRepository, recent_post())

        # Act
        response = api.client.post(
            "/reports",
            json={"post_id": str(post.id), "reason": "spam"},
            headers=api.auth(reporter_id),
        )

        # Assert
        assert response.status_code == 429
        data = response.json()
        assert data["code"] == "rate_limited"
        assert 590 <= data["retry_after"] <= 600
        assert response.headers["Retry-After"] == str(data["retry_after"])


class TestEngagementApi:
    """Tests for engagement endpoints."""

    def test_calculate_single_post(self, api):
        """A post_id request should return that post's score."""
        post = api.seed(PostRepository, recent_post(age_hours=0, likes=10))

        response = api.client.post(
            "/engagement/calculate", json={"post_id": str(post.id)}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["processed"] == 1
        assert data["results"][0]["score"] == 20.0

    def test_calculate_batch(self, api):
        """Batch mode should process recent approved posts."""
        for _ in range(2):
            api.seed(PostRepository, recent_post(likes=1))

        response = api.client.post("/engagement/calculate", json={"batch_mode": True})

        assert response.status_code == 200
        assert response.json()["processed"] == 2

    @pytest.mark.parametrize(
        "body",
        [{}, {"batch_mode": False}, {"post_id": str(uuid4()), "batch_mode": True}],
    )
    def test_calculate_requires_exactly_one_selector(self, api, body):
        """Neither or both selectors should be rejected."""
        response = api.client.post("/engagement/calculate", json=body)

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_input"

    def test_calculate_unknown_post(self, api):
        """An unknown post should return 404."""
        response = api.client.post(
            "/engagement/calculate", json={"post_id": str(uuid4())}
        )

        assert response.status_code == 404

    def test_share_counts_up(self, api):
        """Each share should return the running count."""
        post = api.seed(PostRepository, recent_post())
        headers = api.auth(uuid4())

        first = api.client.post(f"/posts/{post.id}/share", headers=headers)
        second = api.client.post(f"/posts/{post.id}/share", headers=headers)

        assert first.json() == {"success": True, "shares_count": 1}
        assert second.json() == {"success": True, "shares_count": 2}

    def test_share_requires_authentication(self, api):
        """Anonymous shares should be rejected with 401."""
        response = api.client.post(f"/posts/{uuid4()}/share")

        assert response.status_code == 401


class TestVendorsApi:
    """Tests for vendor discovery endpoints."""

    def test_match_with_no_vendors(self, api):
        """An empty marketplace should return an empty ranking."""
        response = api.client.post(
            "/vendors/match", json={"budget_min": 1000, "budget_max": 2000}
        )

        assert response.status_code == 200
        assert response.json() == {"matches": [], "total": 0, "budget_health": None}

    def test_match_ranks_vendors(self, api):
        """Vendors should be ranked by score with reasons."""
        # Arrange
        api.seed(
            VendorRepository,
            make_vendor(
                services=[make_service("Buffet", 90_000, "catering")],
                rating=3.5,
                business_name="Okay Caterers",
            ),
        )
        best = api.seed(
            VendorRepository,
            make_vendor(
                services=[make_service("Wedding Buffet", 60_000, "catering")],
                rating=4.9,
                response_time_hours=1,
                business_name="Great Caterers",
            ),
        )

        # Act
        response = api.client.post(
            "/vendors/match",
            json={
                "budget_min": 50_000,
                "budget_max": 80_000,
                "service_types": ["catering"],
                "event_type": "birthday",
            },
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["matches"][0]["vendor_id"] == str(best.id)
        assert data["matches"][0]["reasons"][0] == "Within your budget"
        assert data["budget_health"]["status"] == "aligned"

    def test_match_requires_budget(self, api):
        """A body without a budget should be rejected as invalid input."""
        response = api.client.post("/vendors/match", json={"budget_max": 2000})

        assert response.status_code == 400
        assert response.json()["error"].startswith("budget_min")

    def test_review_insights(self, api):
        """Insights should summarize a vendor's published reviews."""
        vendor = api.seed(VendorRepository, make_vendor())
        for rating in (5, 4, 4, 3, 1):
            api.seed(ReviewRepository, make_review(vendor.id, rating))

        response = api.client.get(f"/vendors/{vendor.id}/review-insights")

        assert response.status_code == 200
        data = response.json()
        assert data["total_reviews"] == 5
        assert data["average_rating"] == 3.4
        assert data["sentiment"] == "neutral"
        assert data["percentage_satisfied"] == 68
        assert data["rating_breakdown"] == {"5": 1, "4": 2, "3": 1, "2": 0, "1": 1}

    def test_review_insights_without_reviews(self, api):
        """A vendor with no reviews should get the placeholder summary."""
        vendor = api.seed(VendorRepository, make_vendor())

        response = api.client.get(f"/vendors/{vendor.id}/review-insights")

        assert response.json()["summary"] == "No reviews yet"

    def test_review_insights_unknown_vendor(self, api):
        """An unknown vendor should return 404."""
        response = api.client.get(f"/vendors/{uuid4()}/review-insights")

        assert response.status_code == 404
