"""Repository protocol for ledger snapshots."""

from __future__ import annotations

from typing import Protocol

from .models import AccountingSnapshot, ProcessingCounters


class LedgerSnapshotProvider(Protocol):
    async def accounts_info(self) -> AccountingSnapshot:
        ...

    async def batches_info(self) -> ProcessingCounters:
        ...

    async def withdraws_info(self) -> ProcessingCounters:
        ...
