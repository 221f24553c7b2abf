"""Log severity counters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LogCounters:
    warnings: int = 0
    errors: int = 0
    panics: int = 0
