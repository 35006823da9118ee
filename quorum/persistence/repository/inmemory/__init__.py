"""In-memory repository implementations for testing."""

from .question import InMemoryQuestionRepository
from .topic import InMemoryTopicRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryQuestionRepository",
    "InMemoryTopicRepository",
    "InMemoryUserRepository",
]
