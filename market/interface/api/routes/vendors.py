"""Vendor discovery routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from market.application.usecase.vendor import (
    GetReviewInsightsRequest,
    GetReviewInsightsResponse,
    GetReviewInsightsUseCase,
    MatchVendorsRequest,
    MatchVendorsResponse,
    MatchVendorsUseCase,
)

router = APIRouter(prefix="/vendors", tags=["vendors"], route_class=DishkaRoute)


@router.post("/match", response_model=MatchVendorsResponse)
async def match_vendors(
    request: MatchVendorsRequest,
    match_vendors_use_case: FromDishka[MatchVendorsUseCase],
) -> MatchVendorsResponse:
    """Rank active vendors for an event.

    Args:
        request: Budget, requested service types, event type and paging
        match_vendors_use_case: Match vendors use case from DI

    Returns:
        Ranked vendors with reasons, total count and budget health
    """
    return await match_vendors_use_case.execute(request)


@router.get("/{vendor_id}/review-insights", response_model=GetReviewInsightsResponse)
async def get_review_insights(
    vendor_id: str,
    review_insights_use_case: FromDishka[GetReviewInsightsUseCase],
) -> GetReviewInsightsResponse:
    """Summarize a vendor's recent published reviews."""
    return await review_insights_use_case.execute(
        GetReviewInsightsRequest(vendor_id=vendor_id)
    )
