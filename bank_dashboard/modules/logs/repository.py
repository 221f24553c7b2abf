"""Repository protocol for log storage."""

from __future__ import annotations

from typing import Protocol

from .models import LogCounters


class LogCounterProvider(Protocol):
    async def counters(self) -> LogCounters:
        ...
