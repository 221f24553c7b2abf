"""Error categories exposed by the dashboard services.

Only these coarse categories ever reach a caller. The ``message`` of each class
is the public text; collaborator details stay in the logs.
"""


class DashboardError(Exception):
    """Base class for dashboard errors."""

    message = "Internal Error"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or self.message)
        self.reason = reason


class InvalidSessionError(DashboardError):
    """Raised when a session identifier does not resolve to a user."""

    message = "Invalid Session"


class PermissionDeniedError(DashboardError):
    """Raised when the user lacks the admin role or the role check failed."""

    message = "Permission Denied"


class InvalidArgumentError(DashboardError):
    """Raised when a caller supplied parameter fails validation."""

    message = "Invalid Argument"


class InvalidStateError(DashboardError):
    """Raised when a collaborator returned a structurally inconsistent result."""

    message = "Invalid State"


class InternalError(DashboardError):
    """Raised when a collaborator call failed."""

    message = "Internal Error"


__all__ = [
    "DashboardError",
    "InvalidSessionError",
    "PermissionDeniedError",
    "InvalidArgumentError",
    "InvalidStateError",
    "InternalError",
]
