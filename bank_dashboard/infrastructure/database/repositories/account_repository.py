"""SQLAlchemy implementation of the identity and role lookups."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bank_dashboard.infrastructure.database.models import User, UserRole


class SqlAccountRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def has_role(self, user_id: str, role_name: str) -> bool:
        stmt = (
            select(UserRole.id)
            .where(UserRole.user_id == user_id, UserRole.role == role_name)
            .limit(1)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none() is not None

    async def count_users(self) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count(User.id)))
            return int(result.scalar_one())
