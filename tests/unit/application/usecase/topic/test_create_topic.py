"""Unit tests for topic administration use cases."""

import pytest

from quorum.application.usecase.topic import (
    AddModeratorRequest,
    AddModeratorUseCase,
    CreateTopicRequest,
    CreateTopicUseCase,
    GetTopicRequest,
    GetTopicUseCase,
)
from quorum.domain.error import AlreadyExistsError, NotAuthorizedError
from quorum.domain.repository import UserRepository
from quorum.domain.value import UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateTopicUseCase:
    """Tests for CreateTopicUseCase."""

    @pytest.mark.asyncio
    async def test_admin_creates_topic(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateTopicUseCase)
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))

        topic = await use_case.execute(
            CreateTopicRequest(
                user_id=str(admin.id),
                name="Web Development",
                description="Browsers, servers and everything between",
                color="#123456",
            )
        )

        assert topic.slug == "web-development"
        assert topic.color == "#123456"
        assert topic.question_count == 0

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateTopicUseCase)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                CreateTopicRequest(user_id=str(alice.id), name="Python")
            )

    @pytest.mark.asyncio
    async def test_duplicate_name(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateTopicUseCase)
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))
        await use_case.execute(CreateTopicRequest(user_id=str(admin.id), name="Python"))

        with pytest.raises(AlreadyExistsError):
            await use_case.execute(
                CreateTopicRequest(user_id=str(admin.id), name="PYTHON")
            )


class TestModerators:
    """Tests for AddModeratorUseCase."""

    @pytest.mark.asyncio
    async def test_admin_adds_moderator(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        create = await unit_env.get(CreateTopicUseCase)
        add = await unit_env.get(AddModeratorUseCase)
        get_topic = await unit_env.get(GetTopicUseCase)
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))
        mod = await user_repo.save(make_user("mod"))
        await create.execute(CreateTopicRequest(user_id=str(admin.id), name="Python"))

        # Act
        response = await add.execute(
            AddModeratorRequest(slug="python", user_id=str(admin.id), username="mod")
        )
        detail = await get_topic.execute(GetTopicRequest(slug="python"))

        # Assert
        assert [m.username for m in response.moderators] == ["mod"]
        assert [m.user_id for m in detail.moderators] == [str(mod.id)]

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        create = await unit_env.get(CreateTopicUseCase)
        add = await unit_env.get(AddModeratorUseCase)
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))
        alice = await user_repo.save(make_user("alice"))
        await create.execute(CreateTopicRequest(user_id=str(admin.id), name="Python"))

        with pytest.raises(NotAuthorizedError):
            await add.execute(
                AddModeratorRequest(
                    slug="python", user_id=str(alice.id), username="alice"
                )
            )
