"""Submit report use case."""

from typing import Optional

from pydantic import BaseModel

from market.application.usecase.base import BaseUseCase, parse_uuid
from market.domain.service import ReportService
from market.domain.value import UserId


class SubmitReportRequest(BaseModel):
    """Submit report request.

    Fields are kept raw so the report gate can reject malformed input with
    its own reason codes.
    """

    reporter_id: str  # User ID from authenticated user
    post_id: Optional[str] = None
    reason: Optional[str] = None
    description: Optional[str] = None


class SubmitReportResponse(BaseModel):
    """Submit report response."""

    success: bool
    report_id: str
    message: str


class SubmitReportUseCase(BaseUseCase):
    """Use case for reporting a post."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize submit report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: SubmitReportRequest) -> SubmitReportResponse:
        """Execute report submission.

        Args:
            request: Submit report request

        Returns:
            Submit report response with the new report's ID

        Raises:
            ValidationError, RateLimitExceededError, DuplicateReportError,
            NotFoundError, SelfReportError: See ReportService.submit_report
        """
        reporter_id = UserId(parse_uuid(request.reporter_id, "user_id"))

        report = await self.report_service.submit_report(
            reporter_id=reporter_id,
            post_id=request.post_id,
            reason=request.reason,
            description=request.description,
        )

        return SubmitReportResponse(
            success=True,
            report_id=str(report.id),
            message="Thank you for your report. Our team will review it shortly.",
        )
