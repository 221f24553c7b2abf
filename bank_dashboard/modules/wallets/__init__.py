"""Wallet reserve directory."""

from .exceptions import WalletServiceError
from .models import UTXOSummary, WalletDetail, WalletInfo, WalletStatus, WalletUTXO
from .repository import WalletStatusProvider
from .service import WalletDirectory, summarize_wallet

__all__ = [
    "UTXOSummary",
    "WalletDetail",
    "WalletDirectory",
    "WalletInfo",
    "WalletServiceError",
    "WalletStatus",
    "WalletStatusProvider",
    "WalletUTXO",
    "summarize_wallet",
]
