"""Login use case."""

import logfire
from pydantic import BaseModel

from quorum.application.usecase.auth.register import AuthResponse
from quorum.application.usecase.base import BaseUseCase
from quorum.application.usecase.user.common import UserDetail
from quorum.domain.service import AuthService, JWTService
from quorum.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: Email
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for signing in with email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the credentials are wrong or the
                account is deactivated
        """
        with logfire.span("login.execute"):
            user = await self.auth_service.authenticate(request.email, request.password)
            token = self.jwt_service.create_token(str(user.id), str(user.username))
            return AuthResponse(
                token=token, user=UserDetail.from_user(user, include_email=True)
            )
