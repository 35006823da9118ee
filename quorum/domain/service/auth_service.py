"""Authentication domain service."""

from datetime import datetime
from uuid import uuid4

import bcrypt
import logfire

from quorum.config import AuthSettings
from quorum.domain.error import (
    AlreadyExistsError,
    InvalidCredentialsError,
    ValidationError,
)
from quorum.domain.model.user import User
from quorum.domain.repository import UserRepository
from quorum.domain.value import Email, UserId, Username

from .base import Service


class AuthService(Service):
    """Domain service for password-based authentication.

    Passwords are hashed with bcrypt; the plain text never leaves this
    service.
    """

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def hash_password(self, password: str) -> str:
        """Hash a password with bcrypt."""
        salt = bcrypt.gensalt(rounds=self.auth_settings.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a password against a bcrypt hash."""
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))

    def _check_password_policy(self, password: str) -> None:
        minimum = self.auth_settings.min_password_length
        if len(password) < minimum:
            raise ValidationError(
                f"Password must be at least {minimum} characters long"
            )

    async def register(self, username: Username, email: Email, password: str) -> User:
        """Create a new user account.

        Args:
            username: Requested username
            email: Email address
            password: Plain text password

        Returns:
            The saved user

        Raises:
            ValidationError: If the password is too short
            AlreadyExistsError: If the username or email is taken
        """
        with logfire.span("auth_service.register", username=str(username)):
            self._check_password_policy(password)

            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with taken email", username=str(username))
                raise AlreadyExistsError("User", "email", str(email))
            if await self.user_repository.find_by_username(username):
                logfire.warn("Registration with taken username", username=str(username))
                raise AlreadyExistsError("User", "username", str(username))

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=self.hash_password(password),
                last_login=now,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check login credentials and stamp the login time.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The authenticated user

        Raises:
            InvalidCredentialsError: If the account is unknown, deactivated,
                or the password does not match
        """
        with logfire.span("auth_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if not user or not user.is_active:
                logfire.warn("Login for unknown or inactive account")
                raise InvalidCredentialsError()

            if not self.verify_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            user = user.model_copy(update={"last_login": datetime.now()})
            saved = await self.user_repository.save(user)
            logfire.info("User logged in", user_id=str(saved.id))
            return saved

    async def change_password(
        self, user: User, current_password: str, new_password: str
    ) -> User:
        """Replace a user's password after checking the current one.

        Raises:
            ValidationError: If the new password is too short or the current
                password does not match
        """
        with logfire.span("auth_service.change_password", user_id=str(user.id)):
            self._check_password_policy(new_password)
            if not self.verify_password(current_password, user.password_hash):
                raise ValidationError("Current password is incorrect")

            updated = user.model_copy(
                update={
                    "password_hash": self.hash_password(new_password),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", user_id=str(user.id))
            return saved
