"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from stackit.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from stackit.config import AuthSettings
from stackit.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from stackit.domain.service import JWTService

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """API request carrying a username and password."""

    username: str
    password: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Authentication status response."""

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _set_auth_cookie(response: Response, token: str, settings: AuthSettings) -> None:
    """Attach the session cookie to a response."""
    response.set_cookie(
        key="auth_token",
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: CredentialsAPIRequest,
    response: Response,
    signup_use_case: FromDishka[SignUpUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> AuthResponse:
    """Register a new user and log them in.

    Args:
        request: Username and password
        response: FastAPI response object (cookie is set on it)
        signup_use_case: Sign up use case from DI
        auth_settings: Auth settings from DI

    Returns:
        The new user and their session token

    Raises:
        HTTPException: 400 on malformed input, 409 if the username is taken
    """
    try:
        result = await signup_use_case.execute(
            SignUpRequest(username=request.username, password=request.password)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    _set_auth_cookie(response, result.token, auth_settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: CredentialsAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> AuthResponse:
    """Log in with username and password.

    Raises:
        HTTPException: 401 if the credentials are wrong
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(username=request.username, password=request.password)
        )
    except AuthenticationError as e:
        logfire.warn("Login failed", username=request.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    _set_auth_cookie(response, result.token, auth_settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key="auth_token", path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it returns
    authenticated=false instead of raising an error, so the frontend can
    check authentication state without generating errors in logs.
    """
    session = jwt_service.get_session(auth_token)
    if not session:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(session=session)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except NotFoundError:
        # JWT valid but user not found in database (orphaned token)
        return AuthStatusResponse(authenticated=False)
