"""Calculate engagement use case."""

from typing import Optional

from pydantic import BaseModel

from market.application.usecase.base import BaseUseCase, parse_uuid
from market.config import EngagementSettings
from market.domain.error import ValidationError
from market.domain.service import EngagementService
from market.domain.value import PostId


class CalculateEngagementRequest(BaseModel):
    """Calculate engagement request.

    Exactly one of ``post_id`` and ``batch_mode`` selects the posts to score.
    """

    post_id: Optional[str] = None  # UUID string
    batch_mode: bool = False


class EngagementResult(BaseModel):
    """Score of one processed post."""

    post_id: str
    score: float


class CalculateEngagementResponse(BaseModel):
    """Calculate engagement response."""

    success: bool
    processed: int
    results: list[EngagementResult]


class CalculateEngagementUseCase(BaseUseCase):
    """Use case for recomputing post engagement records."""

    def __init__(
        self, engagement_service: EngagementService, settings: EngagementSettings
    ) -> None:
        """Initialize calculate engagement use case.

        Args:
            engagement_service: Engagement domain service
            settings: Engagement settings (for result rounding)
        """
        self.engagement_service = engagement_service
        self.settings = settings

    async def execute(
        self, request: CalculateEngagementRequest
    ) -> CalculateEngagementResponse:
        """Execute engagement calculation.

        Args:
            request: Calculate engagement request

        Returns:
            Processed count and per-post scores

        Raises:
            ValidationError: If neither or both selectors are given
            NotFoundError: If the single post does not exist
            StoreUnavailableError: If the batch selection fails
        """
        if request.post_id and request.batch_mode:
            raise ValidationError("Provide either post_id or batch_mode, not both")

        if request.batch_mode:
            records = await self.engagement_service.recalculate_recent()
        elif request.post_id:
            post_id = PostId(parse_uuid(request.post_id, "post_id"))
            records = await self.engagement_service.recalculate_post(post_id)
        else:
            raise ValidationError("Either post_id or batch_mode=true required")

        return CalculateEngagementResponse(
            success=True,
            processed=len(records),
            results=[
                EngagementResult(
                    post_id=str(record.post_id),
                    score=round(record.engagement_score, self.settings.round_digits),
                )
                for record in records
            ],
        )
