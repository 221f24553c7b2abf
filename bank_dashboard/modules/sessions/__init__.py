"""Session collaborator contract."""

from .repository import SessionResolver

__all__ = ["SessionResolver"]
