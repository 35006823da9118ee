"""PostgreSQL repository implementations."""

from quorum.persistence.repository.question import PostgresQuestionRepository
from quorum.persistence.repository.topic import PostgresTopicRepository
from quorum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresTopicRepository",
    "PostgresUserRepository",
]
