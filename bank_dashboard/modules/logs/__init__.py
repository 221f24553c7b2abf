"""Log storage collaborator contract."""

from .models import LogCounters
from .repository import LogCounterProvider

__all__ = ["LogCounters", "LogCounterProvider"]
