"""Bearer token authentication for routes."""

from fastapi import HTTPException, status

from market.domain.service import JWTService


def require_user_id(jwt_service: JWTService, authorization: str | None) -> str:
    """Resolve the acting user from an ``Authorization`` header.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    user_id = jwt_service.get_user_id_from_authorization(authorization)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
