"""Wallet directory: list wallets and summarize their UTXO sets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from bank_dashboard.core.amounts import round_amount
from bank_dashboard.core.exceptions import InternalError, InvalidArgumentError, InvalidStateError

from .models import UTXOSummary, WalletDetail, WalletInfo, WalletStatus, WalletUTXO
from .repository import WalletStatusProvider

logger = logging.getLogger(__name__)


def summarize_wallet(wallet: WalletInfo) -> WalletStatus:
    """Fold a wallet's UTXOs into total and locked partitions.

    Amounts are summed unrounded and rounded once, so the locked partition can
    never exceed the total.
    """
    total_count = 0
    locked_count = 0
    total_amount = Decimal(0)
    locked_amount = Decimal(0)
    for utxo in wallet.utxos:
        total_count += 1
        total_amount += utxo.amount
        if utxo.locked:
            locked_count += 1
            locked_amount += utxo.amount

    return WalletStatus(
        chain=wallet.chain,
        total=UTXOSummary(utxo_count=total_count, amount=round_amount(total_amount)),
        locked=UTXOSummary(utxo_count=locked_count, amount=round_amount(locked_amount)),
    )


def summarize_wallets(wallets: Iterable[WalletInfo]) -> list[WalletStatus]:
    return [summarize_wallet(wallet) for wallet in wallets]


@dataclass(slots=True)
class WalletDirectory:
    provider: WalletStatusProvider

    async def list_wallets(self) -> list[str]:
        try:
            wallets = await self.provider.status()
        except Exception as exc:
            logger.error("Wallet status failed: %s", exc)
            raise InternalError("wallet status failed") from exc
        return [wallet.chain for wallet in wallets]

    async def get_wallet_detail(self, chain: str) -> WalletDetail:
        if not chain or not chain.strip():
            logger.error("Invalid wallet name")
            raise InvalidArgumentError("empty wallet name")

        try:
            wallets = await self.provider.status(chain)
        except Exception as exc:
            logger.error("Wallet detail failed for %s: %s", chain, exc)
            raise InternalError("wallet detail failed") from exc

        # only one wallet was requested
        if len(wallets) != 1:
            logger.error("Invalid wallet detail for %s: %d wallets returned", chain, len(wallets))
            raise InvalidStateError(f"expected one wallet, got {len(wallets)}")

        wallet = wallets[0]
        if wallet.chain != chain:
            logger.error("Wallet service answered %s for %s", wallet.chain, chain)
            raise InvalidStateError("wallet mismatch")

        return WalletDetail(
            status=summarize_wallet(wallet),
            utxos=[WalletUTXO(amount=round_amount(utxo.amount), locked=utxo.locked) for utxo in wallet.utxos],
        )
