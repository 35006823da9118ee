"""Register use case."""

import logfire
from pydantic import BaseModel, Field

from quorum.application.usecase.base import BaseUseCase
from quorum.application.usecase.user.common import UserDetail
from quorum.domain.service import AuthService, JWTService
from quorum.domain.value import Email, Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: Username
    email: Email
    password: str = Field(min_length=1)


class AuthResponse(BaseModel):
    """Token and profile returned after registration or login."""

    token: str
    user: UserDetail


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing the user in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Raises:
            ValidationError: If the password is too short
            AlreadyExistsError: If the username or email is taken
        """
        with logfire.span("register.execute", username=str(request.username)):
            user = await self.auth_service.register(
                request.username, request.email, request.password
            )
            token = self.jwt_service.create_token(str(user.id), str(user.username))
            return AuthResponse(
                token=token, user=UserDetail.from_user(user, include_email=True)
            )
