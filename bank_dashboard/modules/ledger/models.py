"""Domain models for ledger snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class CurrencyBalance:
    currency: str
    balance: Decimal
    locked: Decimal


@dataclass(slots=True, frozen=True)
class AccountingSnapshot:
    account_count: int
    active_count: int
    balances: list[CurrencyBalance] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class ProcessingCounters:
    """Counters shared by batches and withdrawals."""

    total: int
    processing: int
