"""Administrative status dashboard for the bank ledger and wallet platform."""

__version__ = "0.1.0"
