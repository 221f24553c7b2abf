"""Session based authorization for the admin endpoints."""

from __future__ import annotations

import logging

from bank_dashboard.core.exceptions import InvalidSessionError, PermissionDeniedError
from bank_dashboard.core.logging import bind_identity
from bank_dashboard.modules.accounts.repository import RoleChecker
from bank_dashboard.modules.sessions.repository import SessionResolver

logger = logging.getLogger(__name__)

ROLE_NAME_ADMIN = "admin"


async def authorize(
    session_id: str | None,
    sessions: SessionResolver,
    roles: RoleChecker,
    role_name: str = ROLE_NAME_ADMIN,
) -> str:
    """Resolve ``session_id`` to a user holding ``role_name`` and return the user id.

    A failed role lookup and a missing role raise the same
    ``PermissionDeniedError`` so callers cannot probe for existing users.
    """
    if not session_id:
        logger.warning("Missing session identifier")
        raise InvalidSessionError("missing session")

    bind_identity(session_id=session_id)

    try:
        user_id = await sessions.resolve_user(session_id)
    except Exception as exc:
        logger.error("Session resolution failed: %s", exc)
        raise InvalidSessionError("session resolution failed") from exc
    if not user_id:
        logger.warning("Session does not resolve to a user")
        raise InvalidSessionError("unknown session")

    bind_identity(user_id=user_id)

    try:
        allowed = await roles.has_role(user_id, role_name)
    except Exception as exc:
        logger.error("UserHasRole failed for role %s: %s", role_name, exc)
        raise PermissionDeniedError() from exc
    if not allowed:
        logger.error("User is not %s", role_name)
        raise PermissionDeniedError()

    return user_id


__all__ = ["ROLE_NAME_ADMIN", "authorize"]
