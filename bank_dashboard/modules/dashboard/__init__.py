"""Dashboard status aggregation."""

from .models import ReserveSnapshot, StatusSnapshot, UserCounters
from .service import StatusAggregator

__all__ = ["ReserveSnapshot", "StatusAggregator", "StatusSnapshot", "UserCounters"]
