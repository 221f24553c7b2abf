"""Status snapshot assembled for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field

from bank_dashboard.modules.ledger.models import AccountingSnapshot, ProcessingCounters
from bank_dashboard.modules.logs.models import LogCounters
from bank_dashboard.modules.wallets.models import WalletStatus


@dataclass(slots=True, frozen=True)
class UserCounters:
    total_users: int
    connected_sessions: int


@dataclass(slots=True, frozen=True)
class ReserveSnapshot:
    wallets: list[WalletStatus] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class StatusSnapshot:
    logs: LogCounters
    users: UserCounters
    accounting: AccountingSnapshot
    batch: ProcessingCounters
    withdraw: ProcessingCounters
    reserve: ReserveSnapshot
