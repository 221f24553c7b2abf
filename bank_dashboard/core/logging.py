"""Logging setup with request-scoped context fields."""

from __future__ import annotations

import logging
from contextvars import ContextVar

from bank_dashboard.core.config import Settings

_EMPTY = "-"

method_var: ContextVar[str] = ContextVar("method", default=_EMPTY)
user_id_var: ContextVar[str] = ContextVar("user_id", default=_EMPTY)
session_id_var: ContextVar[str] = ContextVar("session_id", default=_EMPTY)
remote_addr_var: ContextVar[str] = ContextVar("remote_addr", default=_EMPTY)

_CONTEXT_VARS = {
    "method": method_var,
    "user_id": user_id_var,
    "session_id": session_id_var,
    "remote_addr": remote_addr_var,
}


class RequestContextFilter(logging.Filter):
    """Copy the current request context onto every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name, var in _CONTEXT_VARS.items():
            if not hasattr(record, name):
                setattr(record, name, var.get())
        return True


def bind_request(method: str, remote_addr: str | None = None) -> None:
    method_var.set(method)
    remote_addr_var.set(remote_addr or _EMPTY)
    user_id_var.set(_EMPTY)
    session_id_var.set(_EMPTY)


def bind_identity(*, user_id: str | None = None, session_id: str | None = None) -> None:
    if user_id is not None:
        user_id_var.set(user_id)
    if session_id is not None:
        session_id_var.set(session_id)


def configure_logging(settings: Settings) -> None:
    """Install a stream handler on the package logger (idempotent)."""
    logger = logging.getLogger("bank_dashboard")
    logger.setLevel(settings.logging.level.upper())

    for handler in logger.handlers:
        if getattr(handler, "_bank_dashboard", False):
            return

    handler = logging.StreamHandler()
    handler._bank_dashboard = True  # type: ignore[attr-defined]
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(logging.Formatter(settings.logging.format))
    logger.addHandler(handler)


__all__ = [
    "RequestContextFilter",
    "bind_identity",
    "bind_request",
    "configure_logging",
    "method_var",
    "remote_addr_var",
    "session_id_var",
    "user_id_var",
]
