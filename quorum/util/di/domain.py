"""Domain layer DI providers."""

from dishka import Scope, provide

from quorum.config import AuthSettings, QuestionSettings
from quorum.domain.repository import (
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from quorum.domain.service import (
    AuthService,
    JWTService,
    QuestionService,
    TopicService,
    UserService,
)
from quorum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        topic_repository: TopicRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            question_repository=question_repository,
            topic_repository=topic_repository,
        )

    @provide
    def get_topic_service(
        self,
        topic_repository: TopicRepository,
        question_repository: QuestionRepository,
        user_repository: UserRepository,
    ) -> TopicService:
        """Provide topic domain service."""
        return TopicService(
            topic_repository=topic_repository,
            question_repository=question_repository,
            user_repository=user_repository,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        topic_repository: TopicRepository,
        user_repository: UserRepository,
        settings: QuestionSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            topic_repository=topic_repository,
            user_repository=user_repository,
            settings=settings,
        )
