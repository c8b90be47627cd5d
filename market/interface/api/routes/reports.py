"""Report routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from market.application.usecase.report import (
    SubmitReportRequest,
    SubmitReportResponse,
    SubmitReportUseCase,
)
from market.domain.service import JWTService
from market.interface.api.routes.auth import require_user_id

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class SubmitReportAPIRequest(BaseModel):
    """API request for reporting a post."""

    post_id: Optional[str] = None
    reason: Optional[str] = None
    description: Optional[str] = None


@router.post("", response_model=SubmitReportResponse)
async def submit_report(
    request: SubmitReportAPIRequest,
    submit_report_use_case: FromDishka[SubmitReportUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SubmitReportResponse:
    """Report a post for moderation.

    Requires authentication. Reporters are limited to a few reports per
    hour, may report a post only once and cannot report their own posts.

    Args:
        request: Post ID, reason and optional description
        submit_report_use_case: Submit report use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The created report's ID and a confirmation message
    """
    user_id = require_user_id(jwt_service, authorization)
    return await submit_report_use_case.execute(
        SubmitReportRequest(
            reporter_id=user_id,
            post_id=request.post_id,
            reason=request.reason,
            description=request.description,
        )
    )
