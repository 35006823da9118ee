"""Mock persistence providers for testing."""

from dishka import Scope, provide

from quorum.domain.repository import (
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from quorum.persistence.repository.inmemory import (
    InMemoryQuestionRepository,
    InMemoryTopicRepository,
    InMemoryUserRepository,
)
from quorum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of
    one container. Every test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_topic_repository(self) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()
