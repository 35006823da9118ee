"""Unit tests for registration, login and token lookup."""

import pytest

from quorum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from quorum.application.usecase.user import DeleteUserRequest, DeleteUserUseCase
from quorum.domain.error import AlreadyExistsError, InvalidCredentialsError
from quorum.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def register(unit_env, username="alice", email="alice@example.com"):
    use_case = await unit_env.get(RegisterUseCase)
    return await use_case.execute(
        RegisterRequest(username=username, email=email, password="hunter22")
    )


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_and_profile(self, unit_env):
        response = await register(unit_env)

        assert response.token
        assert response.user.username == "alice"
        assert response.user.email == "alice@example.com"
        assert response.user.reputation == 0

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        await register(unit_env)

        with pytest.raises(AlreadyExistsError):
            await register(unit_env, username="alice2", email="ALICE@example.com")


class TestLoginUseCase:
    """Tests for LoginUseCase and GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_token_from_login_resolves_user(self, unit_env):
        # Arrange
        registered = await register(unit_env)
        login = await unit_env.get(LoginUseCase)
        current = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await login.execute(
            LoginRequest(email="alice@example.com", password="hunter22")
        )
        me = await current.execute(GetCurrentUserRequest(token=response.token))

        # Assert
        assert me.user_id == registered.user.user_id
        assert me.last_login is not None

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        await register(unit_env)
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="alice@example.com", password="nope"))

    @pytest.mark.asyncio
    async def test_deleted_account_cannot_log_in(self, unit_env):
        # Arrange
        registered = await register(unit_env)
        delete = await unit_env.get(DeleteUserUseCase)
        login = await unit_env.get(LoginUseCase)
        current = await unit_env.get(GetCurrentUserUseCase)

        # Act
        await delete.execute(
            DeleteUserRequest(username="alice", user_id=registered.user.user_id)
        )

        # Assert
        with pytest.raises(InvalidCredentialsError):
            await login.execute(
                LoginRequest(email="alice@example.com", password="hunter22")
            )
        with pytest.raises(JWTError):
            await current.execute(GetCurrentUserRequest(token=registered.token))
