"""Domain model entities for Quorum."""

from quorum.domain.model.answer import Answer
from quorum.domain.model.question import Question
from quorum.domain.model.topic import Topic
from quorum.domain.model.user import User

__all__ = [
    "Answer",
    "Question",
    "Topic",
    "User",
]
