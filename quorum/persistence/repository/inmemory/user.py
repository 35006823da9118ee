"""In-memory user repository for testing."""

from typing import Optional

from quorum.domain.model.user import User
from quorum.domain.repository.user import UserRepository, UserSortOrder
from quorum.domain.value import Email, UserId, Username, UserRole


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[i] for i in dict.fromkeys(user_ids) if i in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if str(user.username) == str(username):
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if str(user.email) == str(email):
                return user
        return None

    def _filter(self, search: Optional[str], role: Optional[UserRole]) -> list[User]:
        users = [u for u in self._users.values() if u.is_active]
        if search:
            users = [u for u in users if search.lower() in str(u.username).lower()]
        if role is not None:
            users = [u for u in users if u.role == role]
        return users

    async def find_all(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Find active users."""
        users = self._filter(search, role)

        if sort == UserSortOrder.RECENT:
            users.sort(key=lambda u: u.created_at, reverse=True)
        elif sort == UserSortOrder.QUESTIONS:
            users.sort(key=lambda u: (u.questions_asked, u.reputation), reverse=True)
        elif sort == UserSortOrder.ALPHABETICAL:
            users.sort(key=lambda u: str(u.username))
        else:
            users.sort(key=lambda u: (u.reputation, u.created_at), reverse=True)

        return users[offset : offset + limit]

    async def count(
        self, search: Optional[str] = None, role: Optional[UserRole] = None
    ) -> int:
        """Count active users matching the filters."""
        return len(self._filter(search, role))

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user

    async def adjust_questions_asked(self, user_id: UserId, delta: int) -> None:
        """Adjust questions_asked, never below zero."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"questions_asked": max(0, user.questions_asked + delta)}
            )
