"""SQLAlchemy repository for log severity counters."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bank_dashboard.infrastructure.database.models import LogEntry
from bank_dashboard.modules.logs.models import LogCounters

LEVEL_WARNING = "warning"
LEVEL_ERROR = "error"
LEVEL_PANIC = "panic"


class SqlLogRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def counters(self) -> LogCounters:
        level = func.lower(LogEntry.level)
        stmt = (
            select(level, func.count(LogEntry.id))
            .where(level.in_([LEVEL_WARNING, LEVEL_ERROR, LEVEL_PANIC]))
            .group_by(level)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            counts = {name: int(count) for name, count in result.all()}

        return LogCounters(
            warnings=counts.get(LEVEL_WARNING, 0),
            errors=counts.get(LEVEL_ERROR, 0),
            panics=counts.get(LEVEL_PANIC, 0),
        )
