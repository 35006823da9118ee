"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import User
from quorum.domain.repository.user import UserRepository, UserSortOrder
from quorum.domain.value import Email, UserId, Username, UserRole
from quorum.persistence.mappers import row_to_user, user_to_dict
from quorum.persistence.search import LIKE_ESCAPE, contains_pattern
from quorum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, condition) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> List[User]:
        """Find several users by ID."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        return await self._find_one(users_table.c.username == str(username))

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        return await self._find_one(users_table.c.email == str(email))

    def _filter(self, stmt, search: Optional[str], role: Optional[UserRole]):
        stmt = stmt.where(users_table.c.is_active.is_(True))
        if search:
            stmt = stmt.where(
                users_table.c.username.ilike(
                    contains_pattern(search), escape=LIKE_ESCAPE
                )
            )
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        return stmt

    async def find_all(
        self,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find active users."""
        stmt = self._filter(select(users_table), search, role)

        if sort == UserSortOrder.RECENT:
            stmt = stmt.order_by(desc(users_table.c.created_at))
        elif sort == UserSortOrder.QUESTIONS:
            stmt = stmt.order_by(
                desc(users_table.c.questions_asked), desc(users_table.c.reputation)
            )
        elif sort == UserSortOrder.ALPHABETICAL:
            stmt = stmt.order_by(users_table.c.username)
        else:
            stmt = stmt.order_by(
                desc(users_table.c.reputation), desc(users_table.c.created_at)
            )

        result = await self.session.execute(stmt.limit(limit).offset(offset))
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def count(
        self, search: Optional[str] = None, role: Optional[UserRole] = None
    ) -> int:
        """Count active users matching the filters."""
        stmt = self._filter(select(func.count()).select_from(users_table), search, role)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def adjust_questions_asked(self, user_id: UserId, delta: int) -> None:
        """Atomically adjust questions_asked, never below zero."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                questions_asked=func.greatest(users_table.c.questions_asked + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
