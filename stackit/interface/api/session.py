"""Session resolution for routes."""

from fastapi import HTTPException, status

from stackit.domain.service import JWTService
from stackit.domain.value import Session


def require_session(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> Session:
    """Decode the session cookie or reject the request.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: Human-readable action for the error message

    Returns:
        The caller's session

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    session = jwt_service.get_session(auth_token)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return session
