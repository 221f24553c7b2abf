"""Wallet collaborator exceptions."""


class WalletServiceError(Exception):
    """Raised when the wallet service is unreachable or replies with bad data."""
