"""Unit tests for SignUpUseCase, LoginUseCase and GetCurrentUserUseCase."""

import pytest

from stackit.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from stackit.domain.error import AuthenticationError, ConflictError
from stackit.domain.service import JWTService
from stackit.domain.value import Session
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSignUpUseCase:
    """Tests for SignUpUseCase."""

    @pytest.mark.asyncio
    async def test_sign_up_returns_valid_token(self, unit_env):
        """A new user should get a token that decodes to their session."""
        # Arrange
        use_case = await unit_env.get(SignUpUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            SignUpRequest(username="alice", password="secret123")
        )

        # Assert
        assert response.username == "alice"
        session = jwt_service.get_session(response.token)
        assert session is not None
        assert str(session.user_id) == response.user_id
        assert session.username.root == "alice"

    @pytest.mark.asyncio
    async def test_sign_up_twice_conflicts(self, unit_env):
        use_case = await unit_env.get(SignUpUseCase)
        await use_case.execute(SignUpRequest(username="alice", password="secret123"))

        with pytest.raises(ConflictError):
            await use_case.execute(
                SignUpRequest(username="alice", password="secret456")
            )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_sign_up(self, unit_env):
        """Should log in the same user that signed up."""
        # Arrange
        sign_up = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        created = await sign_up.execute(
            SignUpRequest(username="alice", password="secret123")
        )

        # Act
        response = await login.execute(
            LoginRequest(username="alice", password="secret123")
        )

        # Assert
        assert response.user_id == created.user_id
        assert response.token

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, unit_env):
        sign_up = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        await sign_up.execute(SignUpRequest(username="alice", password="secret123"))

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(username="alice", password="nope1234"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_current_user_has_no_unread_notifications(self, unit_env):
        # Arrange
        sign_up = await unit_env.get(SignUpUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        created = await sign_up.execute(
            SignUpRequest(username="alice", password="secret123")
        )
        session = jwt_service.get_session(created.token)
        assert isinstance(session, Session)

        # Act
        response = await use_case.execute(GetCurrentUserRequest(session=session))

        # Assert
        assert response.username == "alice"
        assert response.unread_notifications == 0
