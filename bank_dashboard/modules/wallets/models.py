"""Domain models for wallet reserves."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class WalletUTXO:
    amount: Decimal
    locked: bool = False


@dataclass(slots=True, frozen=True)
class WalletInfo:
    """Wallet as reported by the wallet service."""

    chain: str
    utxos: list[WalletUTXO] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class UTXOSummary:
    utxo_count: int
    amount: Decimal


@dataclass(slots=True, frozen=True)
class WalletStatus:
    chain: str
    total: UTXOSummary
    locked: UTXOSummary


@dataclass(slots=True, frozen=True)
class WalletDetail:
    status: WalletStatus
    utxos: list[WalletUTXO]

    @property
    def chain(self) -> str:
        return self.status.chain
