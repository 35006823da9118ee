"""Repository interfaces for the Quorum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from quorum.domain.repository.question import (
    QuestionQuery,
    QuestionRepository,
    QuestionSortOrder,
)
from quorum.domain.repository.topic import TopicRepository, TopicSortOrder
from quorum.domain.repository.user import UserRepository, UserSortOrder

__all__ = [
    "QuestionQuery",
    "QuestionRepository",
    "QuestionSortOrder",
    "TopicRepository",
    "TopicSortOrder",
    "UserRepository",
    "UserSortOrder",
]
