"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from market.application.usecase.engagement import (
    SharePostRequest,
    SharePostResponse,
    SharePostUseCase,
)
from market.domain.service import JWTService
from market.interface.api.routes.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.post("/{post_id}/share", response_model=SharePostResponse)
async def share_post(
    post_id: str,
    share_post_use_case: FromDishka[SharePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SharePostResponse:
    """Count a share of a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        share_post_use_case: Share post use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        The post's new shares count
    """
    user_id = require_user_id(jwt_service, authorization)
    return await share_post_use_case.execute(
        SharePostRequest(post_id=post_id, user_id=user_id)
    )
