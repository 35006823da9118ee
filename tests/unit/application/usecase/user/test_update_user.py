"""Unit tests for UpdateUserUseCase."""

import pytest

from quorum.application.usecase.user import UpdateUserRequest, UpdateUserUseCase
from quorum.domain.error import AlreadyExistsError, NotAuthorizedError
from quorum.domain.repository import UserRepository
from quorum.domain.value import UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_user_updates_own_profile(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        alice = await user_repo.save(make_user("alice"))

        # Act
        detail = await use_case.execute(
            UpdateUserRequest(
                username="alice",
                user_id=str(alice.id),
                new_username="alice_w",
                bio="Writes Python for a living",
            )
        )

        # Assert
        assert detail.username == "alice_w"
        assert detail.bio == "Writes Python for a living"
        assert detail.email == "alice@example.com"
        stored = await user_repo.find_by_id(alice.id)
        assert str(stored.username) == "alice_w"

    @pytest.mark.asyncio
    async def test_user_cannot_change_own_role(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateUserRequest(
                    username="alice", user_id=str(alice.id), role=UserRole.ADMIN
                )
            )

        assert (await user_repo.find_by_id(alice.id)).role == UserRole.USER

    @pytest.mark.asyncio
    async def test_user_cannot_edit_others(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        alice = await user_repo.save(make_user("alice"))
        await user_repo.save(make_user("bob"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateUserRequest(username="bob", user_id=str(alice.id), bio="hacked")
            )

    @pytest.mark.asyncio
    async def test_admin_changes_role_and_reputation(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))
        await user_repo.save(make_user("bob"))

        # Act
        detail = await use_case.execute(
            UpdateUserRequest(
                username="bob",
                user_id=str(admin.id),
                role=UserRole.MODERATOR,
                reputation=42,
            )
        )

        # Assert
        assert detail.role == UserRole.MODERATOR
        assert detail.reputation == 42
        assert detail.email is None  # Only shown to the user themselves

    @pytest.mark.asyncio
    async def test_taken_email(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        alice = await user_repo.save(make_user("alice"))
        await user_repo.save(make_user("bob"))

        with pytest.raises(AlreadyExistsError):
            await use_case.execute(
                UpdateUserRequest(
                    username="alice", user_id=str(alice.id), email="bob@example.com"
                )
            )
