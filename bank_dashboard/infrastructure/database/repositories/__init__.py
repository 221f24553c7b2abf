"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .ledger_repository import SqlLedgerRepository
from .log_repository import SqlLogRepository
from .session_repository import SqlSessionRepository

__all__ = [
    "SqlAccountRepository",
    "SqlLedgerRepository",
    "SqlLogRepository",
    "SqlSessionRepository",
]
