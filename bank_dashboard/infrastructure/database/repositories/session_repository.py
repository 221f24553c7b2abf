"""SQLAlchemy implementation of the session store."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bank_dashboard.infrastructure.database.models import UserSession


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlSessionRepository:
    """Read-only view on ``user_sessions``; a session is live until ``expires_at``."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def resolve_user(self, session_id: str) -> str | None:
        stmt = select(UserSession.user_id).where(
            UserSession.session_id == session_id,
            UserSession.expires_at > _utcnow(),
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def count_connected(self) -> int:
        stmt = select(func.count(UserSession.session_id)).where(UserSession.expires_at > _utcnow())
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())
