"""Domain value objects for Quorum."""

from quorum.domain.value.identifiers import AnswerId, QuestionId, TopicId, UserId
from quorum.domain.value.types import (
    Attachment,
    Email,
    HexColor,
    TopicSlug,
    Username,
    UserRole,
    ViewEntry,
)
from quorum.domain.value.vote import VoteLedger, VoteType, parse_vote_type

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "QuestionId",
    "AnswerId",
    # Types
    "Attachment",
    "Email",
    "HexColor",
    "TopicSlug",
    "Username",
    "UserRole",
    "ViewEntry",
    # Voting
    "VoteLedger",
    "VoteType",
    "parse_vote_type",
]
