"""Reusable FastAPI dependencies."""

from .container import get_container
from .session import admin_guard, get_session_id

__all__ = [
    "admin_guard",
    "get_container",
    "get_session_id",
]
