"""Share post use case."""

from pydantic import BaseModel

from market.application.usecase.base import BaseUseCase, parse_uuid
from market.domain.service import EngagementService
from market.domain.value import PostId


class SharePostRequest(BaseModel):
    """Share post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class SharePostResponse(BaseModel):
    """Share post response."""

    success: bool
    shares_count: int


class SharePostUseCase(BaseUseCase):
    """Use case for counting a share of a post."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: SharePostRequest) -> SharePostResponse:
        """Record the share and refresh the post's engagement.

        Raises:
            ValidationError: If post_id is not a UUID
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        shares = await self.engagement_service.record_share(post_id)
        return SharePostResponse(success=True, shares_count=shares)
