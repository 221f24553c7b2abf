"""Session extraction and admin guard dependencies."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from bank_dashboard.core.container import ApplicationContainer
from bank_dashboard.core.exceptions import DashboardError, PermissionDeniedError
from bank_dashboard.core.logging import bind_request
from bank_dashboard.core.security import authorize

from .container import get_container

logger = logging.getLogger(__name__)


def get_session_id(
    request: Request,
    container: ApplicationContainer = Depends(get_container),
) -> Optional[str]:
    security = container.settings.security
    return request.cookies.get(security.session_cookie_name) or request.headers.get(
        security.session_header_name
    )


def admin_guard(service: str, method: str):
    """Build a dependency that logs the request and requires an admin session."""

    async def dependency(
        request: Request,
        session_id: Optional[str] = Depends(get_session_id),
        container: ApplicationContainer = Depends(get_container),
    ) -> str:
        remote_addr = request.client.host if request.client else None
        bind_request(f"services.{service}.{method}", remote_addr)
        logger.info("%s %s from %s", request.method, request.url.path, remote_addr)
        try:
            return await authorize(
                session_id,
                container.sessions,
                container.roles,
                role_name=container.settings.admin_role,
            )
        except DashboardError as exc:
            logger.error("Authorization failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=PermissionDeniedError.message,
            ) from exc

    return dependency


__all__ = ["admin_guard", "get_session_id"]
