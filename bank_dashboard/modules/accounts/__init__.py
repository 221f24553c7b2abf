"""Identity and role collaborator contract."""

from .repository import RoleChecker

__all__ = ["RoleChecker"]
