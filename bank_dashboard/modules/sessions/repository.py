"""Repository protocol for the session store."""

from __future__ import annotations

from typing import Protocol


class SessionResolver(Protocol):
    async def resolve_user(self, session_id: str) -> str | None:
        """Return the user id owning a live session, or ``None``."""
        ...

    async def count_connected(self) -> int:
        ...
