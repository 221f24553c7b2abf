"""Repository protocol for user identities and roles."""

from __future__ import annotations

from typing import Protocol


class RoleChecker(Protocol):
    async def has_role(self, user_id: str, role_name: str) -> bool:
        ...

    async def count_users(self) -> int:
        ...
