"""Repository protocol for the wallet service."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import WalletInfo


class WalletStatusProvider(Protocol):
    async def status(self, chain: str | None = None) -> Sequence[WalletInfo]:
        """Return all wallets, or only those matching ``chain``."""
        ...
