"""Vote ledger value object.

Questions and answers are both "votables": each carries one ledger of the
users who upvoted and downvoted it. A user holds at most one vote state
per votable, so the ledger never contains a user in both sets.
"""

from enum import Enum

from pydantic import model_validator

from quorum.domain.error import ValidationError
from quorum.domain.value.common import ValueObject
from quorum.domain.value.identifiers import UserId


class VoteType(str, Enum):
    """Vote action a user can take on a votable."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    REMOVE = "remove"


def parse_vote_type(value: "VoteType | str") -> VoteType:
    """Parse a raw vote type.

    Args:
        value: Vote type or its string value

    Returns:
        The matching VoteType

    Raises:
        ValidationError: If the value is not upvote, downvote or remove
    """
    try:
        return VoteType(value)
    except ValueError:
        raise ValidationError(f"Invalid vote type: {value!r}")


class VoteLedger(ValueObject):
    """Upvote and downvote membership of a single votable."""

    upvotes: frozenset[UserId] = frozenset()
    downvotes: frozenset[UserId] = frozenset()

    @model_validator(mode="after")
    def validate_single_state(self) -> "VoteLedger":
        """Validate that no user is in both sets."""
        both = self.upvotes & self.downvotes
        if both:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, both))}"
            )
        return self

    @property
    def score(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvotes) - len(self.downvotes)

    def vote_of(self, user_id: UserId | None) -> VoteType | None:
        """Return the user's current vote label (None if not voted)."""
        if user_id is None:
            return None
        if user_id in self.upvotes:
            return VoteType.UPVOTE
        if user_id in self.downvotes:
            return VoteType.DOWNVOTE
        return None

    def apply(self, user_id: UserId, vote_type: VoteType) -> "VoteLedger":
        """Apply a vote and return the resulting ledger.

        The user is first removed from both sets, then added to the set
        matching ``vote_type``. REMOVE leaves the user in neither set.
        Applying the same vote twice yields the same ledger.

        Args:
            user_id: Voting user
            vote_type: Vote to apply

        Returns:
            New ledger
        """
        upvotes = self.upvotes - {user_id}
        downvotes = self.downvotes - {user_id}

        if vote_type is VoteType.UPVOTE:
            upvotes = upvotes | {user_id}
        elif vote_type is VoteType.DOWNVOTE:
            downvotes = downvotes | {user_id}

        return VoteLedger(upvotes=upvotes, downvotes=downvotes)
