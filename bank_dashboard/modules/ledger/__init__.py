"""Ledger collaborator contract."""

from .models import AccountingSnapshot, CurrencyBalance, ProcessingCounters
from .repository import LedgerSnapshotProvider

__all__ = [
    "AccountingSnapshot",
    "CurrencyBalance",
    "LedgerSnapshotProvider",
    "ProcessingCounters",
]
