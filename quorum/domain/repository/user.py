"""User repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from quorum.domain.model.user import User
from quorum.domain.value import Email, UserId, Username, UserRole


class UserSortOrder(str, Enum):
    """Sort order for user listings."""

    REPUTATION = "reputation"
    RECENT = "recent"
    QUESTIONS = "questions"
    ALPHABETICAL = "alphabetical"


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> List[User]:
        """Find several users by ID.

        Args:
            user_ids: User identifiers

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username (exact match).

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's (lowercased) email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find active users.

        Args:
            search: Case-insensitive substring of the username
            role: Only users with this role
            sort: Sort order
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            List of users matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self, search: Optional[str] = None, role: Optional[UserRole] = None
    ) -> int:
        """Count active users matching the filters."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def adjust_questions_asked(self, user_id: UserId, delta: int) -> None:
        """Atomically add ``delta`` to a user's questions_asked (floor 0).

        Args:
            user_id: User ID
            delta: Amount to add (negative to decrement)
        """
        pass
