"""Engagement routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from market.application.usecase.engagement import (
    CalculateEngagementRequest,
    CalculateEngagementResponse,
    CalculateEngagementUseCase,
)

router = APIRouter(prefix="/engagement", tags=["engagement"], route_class=DishkaRoute)


@router.post("/calculate", response_model=CalculateEngagementResponse)
async def calculate_engagement(
    request: CalculateEngagementRequest,
    calculate_engagement_use_case: FromDishka[CalculateEngagementUseCase],
) -> CalculateEngagementResponse:
    """Recompute engagement for one post or for the recent batch.

    Args:
        request: ``{"post_id": ...}`` or ``{"batch_mode": true}``
        calculate_engagement_use_case: Calculate engagement use case from DI

    Returns:
        Processed count and per-post scores
    """
    return await calculate_engagement_use_case.execute(request)
