"""Engagement use cases."""

from .calculate_engagement import (
    CalculateEngagementRequest,
    CalculateEngagementResponse,
    CalculateEngagementUseCase,
    EngagementResult,
)
from .share_post import SharePostRequest, SharePostResponse, SharePostUseCase

__all__ = [
    "CalculateEngagementRequest",
    "CalculateEngagementResponse",
    "CalculateEngagementUseCase",
    "EngagementResult",
    "SharePostRequest",
    "SharePostResponse",
    "SharePostUseCase",
]
