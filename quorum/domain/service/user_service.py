"""User domain service."""

from datetime import datetime
from typing import Any, Optional

import logfire

from quorum.domain.error import (
    AlreadyExistsError,
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from quorum.domain.model.user import User
from quorum.domain.repository import (
    QuestionQuery,
    QuestionRepository,
    TopicRepository,
    UserRepository,
    UserSortOrder,
)
from quorum.domain.value import Email, UserId, Username, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        topic_repository: TopicRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            question_repository: Question repository (for account deletion)
            topic_repository: Topic repository (question counters)
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.topic_repository = topic_repository

    async def get_user_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def get_active_user_by_id(self, user_id: UserId) -> User:
        """Get an active user by ID.

        Raises:
            NotFoundError: If the user does not exist or was deactivated
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user or not user.is_active:
            logfire.warn("Active user not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def get_active_user(self, username: Username) -> User:
        """Get an active user by username.

        Raises:
            NotFoundError: If no active user has that username
        """
        with logfire.span("user_service.get_active_user", username=str(username)):
            user = await self.user_repository.find_by_username(username)
            if not user or not user.is_active:
                logfire.warn("User not found", username=str(username))
                raise NotFoundError("User", str(username))
            return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Get active users by ID, ordered by reputation (highest first)."""
        if not user_ids:
            return []
        users = await self.user_repository.find_by_ids(user_ids)
        active = [user for user in users if user.is_active]
        return sorted(active, key=lambda user: user.reputation, reverse=True)

    async def list_users(
        self,
        search: Optional[str],
        role: Optional[UserRole],
        sort: UserSortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[User], int]:
        """List active users.

        Returns:
            Tuple of (page of users, total matching users)
        """
        with logfire.span("user_service.list_users", search=search, sort=sort.value):
            users = await self.user_repository.find_all(
                search=search, role=role, sort=sort, limit=limit, offset=offset
            )
            total = await self.user_repository.count(search=search, role=role)
            return users, total

    async def update_profile(self, user: User, fields: dict[str, Any]) -> User:
        """Update profile fields of a user.

        ``fields`` may hold username, email, bio, location, website, avatar,
        and the admin-only role, reputation and is_active. Callers decide
        which keys the acting user may pass.

        Raises:
            AlreadyExistsError: If the new username or email belongs to
                another user
        """
        with logfire.span(
            "user_service.update_profile", user_id=str(user.id), fields=sorted(fields)
        ):
            username = fields.get("username")
            if username is not None and username != user.username:
                existing = await self.user_repository.find_by_username(username)
                if existing and existing.id != user.id:
                    raise AlreadyExistsError("User", "username", str(username))

            email = fields.get("email")
            if email is not None and email != user.email:
                existing = await self.user_repository.find_by_email(email)
                if existing and existing.id != user.id:
                    raise AlreadyExistsError("User", "email", str(email))

            updated = User.model_validate(
                {**user.model_dump(), **fields, "updated_at": datetime.now()}
            )
            saved = await self.user_repository.save(updated)
            logfire.info("User profile updated", user_id=str(saved.id))
            return saved

    async def deactivate_user(self, user: User, actor: User) -> User:
        """Soft-delete an account and deactivate its questions.

        The email address is rewritten so it can be registered again, and
        topics lose the deactivated questions from their question counts.

        Raises:
            NotAuthorizedError: If the actor is neither the user nor an admin
            BusinessRuleViolationError: If an admin tries to delete their own
                account
        """
        with logfire.span(
            "user_service.deactivate_user", user_id=str(user.id), actor_id=str(actor.id)
        ):
            is_self = user.id == actor.id
            if not is_self and not actor.is_admin:
                raise NotAuthorizedError("delete", "User", str(user.id), str(actor.id))
            if is_self and actor.is_admin:
                raise BusinessRuleViolationError("Admin cannot delete their own account")

            now = datetime.now()
            deactivated = user.model_copy(
                update={
                    "is_active": False,
                    "email": Email(f"deleted_{int(now.timestamp())}_{user.email}"),
                    "updated_at": now,
                }
            )
            saved = await self.user_repository.save(deactivated)

            # Topic question counters only track active questions
            query = QuestionQuery(author_id=user.id)
            total = await self.question_repository.count(query)
            questions = await self.question_repository.find_all(query, limit=total)
            count = await self.question_repository.deactivate_by_author(user.id)
            for question in questions:
                if question.topic_ids:
                    await self.topic_repository.adjust_question_count(
                        question.topic_ids, -1
                    )
            logfire.info(
                "User deactivated", user_id=str(user.id), questions_deactivated=count
            )
            return saved

    async def toggle_follow(self, follower: User, target: User) -> tuple[User, bool]:
        """Follow a user, or unfollow when already following.

        Returns:
            Tuple of (updated target, whether the follower now follows them)

        Raises:
            BusinessRuleViolationError: If a user tries to follow themselves
        """
        with logfire.span(
            "user_service.toggle_follow",
            follower_id=str(follower.id),
            target_id=str(target.id),
        ):
            if follower.id == target.id:
                raise BusinessRuleViolationError("Cannot follow yourself")

            now = datetime.now()
            if target.id in follower.following_ids:
                following = [i for i in follower.following_ids if i != target.id]
                followers = [i for i in target.follower_ids if i != follower.id]
                is_following = False
            else:
                following = [*follower.following_ids, target.id]
                followers = [
                    *(i for i in target.follower_ids if i != follower.id),
                    follower.id,
                ]
                is_following = True

            await self.user_repository.save(
                follower.model_copy(
                    update={"following_ids": following, "updated_at": now}
                )
            )
            saved_target = await self.user_repository.save(
                target.model_copy(update={"follower_ids": followers, "updated_at": now})
            )
            logfire.info(
                "Follow toggled",
                follower_id=str(follower.id),
                target_id=str(target.id),
                is_following=is_following,
            )
            return saved_target, is_following
