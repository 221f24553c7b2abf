"""Wallet service adapter."""

from .client import HttpWalletClient

__all__ = ["HttpWalletClient"]
