"""Unit tests for UserService."""

import pytest

from quorum.domain.error import (
    AlreadyExistsError,
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from quorum.domain.service import UserService
from quorum.domain.value import Username, UserRole
from quorum.persistence.repository.inmemory import (
    InMemoryQuestionRepository,
    InMemoryTopicRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_question, make_topic, make_user


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def question_repo():
    return InMemoryQuestionRepository()


@pytest.fixture
def topic_repo():
    return InMemoryTopicRepository()


@pytest.fixture
def service(user_repo, question_repo, topic_repo):
    return UserService(user_repo, question_repo, topic_repo)


class TestUpdateProfile:
    """Tests for UserService.update_profile()."""

    @pytest.mark.asyncio
    async def test_updates_fields(self, service, user_repo):
        alice = await user_repo.save(make_user("alice"))

        updated = await service.update_profile(
            alice, {"bio": "Pythonista", "location": "Dublin"}
        )

        assert updated.bio == "Pythonista"
        assert (await user_repo.find_by_id(alice.id)).location == "Dublin"

    @pytest.mark.asyncio
    async def test_taken_username_is_rejected(self, service, user_repo):
        alice = await user_repo.save(make_user("alice"))
        await user_repo.save(make_user("bob"))

        with pytest.raises(AlreadyExistsError):
            await service.update_profile(alice, {"username": Username("bob")})


class TestDeactivateUser:
    """Tests for UserService.deactivate_user()."""

    @pytest.mark.asyncio
    async def test_self_deletion_deactivates_questions(
        self, service, user_repo, question_repo
    ):
        # Arrange
        alice = await user_repo.save(make_user("alice"))
        question = await question_repo.save(make_question(alice))

        # Act
        deactivated = await service.deactivate_user(alice, alice)

        # Assert
        assert deactivated.is_active is False
        assert str(deactivated.email).startswith("deleted_")
        assert str(deactivated.email).endswith("_alice@example.com")
        assert (await question_repo.find_by_id(question.id)).is_active is False
        with pytest.raises(NotFoundError):
            await service.get_active_user(Username("alice"))

    @pytest.mark.asyncio
    async def test_deletion_decrements_topic_question_counts(
        self, service, user_repo, question_repo, topic_repo
    ):
        alice = await user_repo.save(make_user("alice"))
        python = await topic_repo.save(make_topic("Python", alice.id, question_count=3))
        await question_repo.save(make_question(alice, topic_ids=[python.id]))
        await question_repo.save(make_question(alice, title="A second Python question"))
        gone = await question_repo.save(make_question(alice, topic_ids=[python.id]))
        await question_repo.save(gone.model_copy(update={"is_active": False}))

        await service.deactivate_user(alice, alice)

        assert (await topic_repo.find_by_id(python.id)).question_count == 2

    @pytest.mark.asyncio
    async def test_email_is_free_again(self, service, user_repo):
        alice = await user_repo.save(make_user("alice"))

        await service.deactivate_user(alice, alice)

        assert await user_repo.find_by_email(alice.email) is None

    @pytest.mark.asyncio
    async def test_admin_cannot_delete_self(self, service, user_repo):
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))

        with pytest.raises(BusinessRuleViolationError):
            await service.deactivate_user(admin, admin)

    @pytest.mark.asyncio
    async def test_admin_can_delete_others(self, service, user_repo):
        admin = await user_repo.save(make_user("admin", role=UserRole.ADMIN))
        bob = await user_repo.save(make_user("bob"))

        deactivated = await service.deactivate_user(bob, admin)

        assert deactivated.is_active is False

    @pytest.mark.asyncio
    async def test_others_cannot_delete(self, service, user_repo):
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))

        with pytest.raises(NotAuthorizedError):
            await service.deactivate_user(bob, alice)


class TestToggleFollow:
    """Tests for UserService.toggle_follow()."""

    @pytest.mark.asyncio
    async def test_follow_and_unfollow(self, service, user_repo):
        # Arrange
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))

        # Act
        bob_after, is_following = await service.toggle_follow(alice, bob)
        alice_after = await user_repo.find_by_id(alice.id)

        # Assert
        assert is_following is True
        assert bob_after.follower_ids == [alice.id]
        assert alice_after.following_ids == [bob.id]

        # Act again
        bob_final, is_following = await service.toggle_follow(alice_after, bob_after)

        assert is_following is False
        assert bob_final.follower_ids == []
        assert (await user_repo.find_by_id(alice.id)).following_ids == []

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, service, user_repo):
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(BusinessRuleViolationError):
            await service.toggle_follow(alice, alice)


class TestGetUsersByIds:
    """Tests for UserService.get_users_by_ids()."""

    @pytest.mark.asyncio
    async def test_orders_by_reputation_and_skips_inactive(self, service, user_repo):
        low = await user_repo.save(make_user("low", reputation=1))
        high = await user_repo.save(make_user("high", reputation=50))
        gone = await user_repo.save(make_user("gone", reputation=99, is_active=False))

        users = await service.get_users_by_ids([low.id, high.id, gone.id])

        assert [u.username for u in users] == [high.username, low.username]
