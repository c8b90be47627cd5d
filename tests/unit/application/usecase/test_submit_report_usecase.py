"""Unit tests for SubmitReportUseCase."""

from uuid import uuid4

import pytest

from market.application.usecase.report import SubmitReportRequest, SubmitReportUseCase
from market.domain.error import ValidationError
from market.domain.repository import PostRepository, ReportRepository
from market.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestSubmitReportUseCase:
    """Tests for SubmitReportUseCase."""

    @pytest.mark.asyncio
    async def test_returns_report_id_and_message(self, unit_env):
        """A successful report should return its ID and a confirmation."""
        # Arrange
        use_case = await unit_env.get(SubmitReportUseCase)
        post_repo = await unit_env.get(PostRepository)
        report_repo = await unit_env.get(ReportRepository)
        post = await post_repo.save(make_post())
        reporter_id = uuid4()

        # Act
        response = await use_case.execute(
            SubmitReportRequest(
                reporter_id=str(reporter_id),
                post_id=str(post.id),
                reason="misinformation",
                description="Fake venue discount",
            )
        )

        # Assert
        assert response.success is True
        assert response.message == (
            "Thank you for your report. Our team will review it shortly."
        )
        stored = await report_repo.find_by_reporter_and_post(
            UserId(reporter_id), post.id
        )
        assert str(stored.id) == response.report_id
        assert stored.description == "Fake venue discount"

    @pytest.mark.asyncio
    async def test_missing_reason(self, unit_env):
        """A request without a reason should be rejected as invalid input."""
        use_case = await unit_env.get(SubmitReportUseCase)

        with pytest.raises(ValidationError, match="post_id and reason are required"):
            await use_case.execute(
                SubmitReportRequest(reporter_id=str(uuid4()), post_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_reporter_id(self, unit_env):
        """A reporter ID that is not a UUID should be rejected."""
        use_case = await unit_env.get(SubmitReportUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                SubmitReportRequest(
                    reporter_id="someone", post_id=str(uuid4()), reason="spam"
                )
            )
