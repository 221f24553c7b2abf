"""Simple dependency container for wiring the dashboard collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from bank_dashboard.core.config import Settings
from bank_dashboard.infrastructure.database import build_engine, build_session_factory
from bank_dashboard.infrastructure.database.repositories import (
    SqlAccountRepository,
    SqlLedgerRepository,
    SqlLogRepository,
    SqlSessionRepository,
)
from bank_dashboard.infrastructure.wallet import HttpWalletClient
from bank_dashboard.modules.accounts import RoleChecker
from bank_dashboard.modules.dashboard import StatusAggregator
from bank_dashboard.modules.ledger import LedgerSnapshotProvider
from bank_dashboard.modules.logs import LogCounterProvider
from bank_dashboard.modules.sessions import SessionResolver
from bank_dashboard.modules.wallets import WalletDirectory, WalletStatusProvider


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    sessions: SessionResolver
    roles: RoleChecker
    logs: LogCounterProvider
    ledger: LedgerSnapshotProvider
    wallets: WalletStatusProvider
    engine: Optional[AsyncEngine] = field(default=None, repr=False)

    def status_aggregator(self) -> StatusAggregator:
        return StatusAggregator(
            sessions=self.sessions,
            roles=self.roles,
            logs=self.logs,
            ledger=self.ledger,
            wallets=self.wallets,
        )

    def wallet_directory(self) -> WalletDirectory:
        return WalletDirectory(self.wallets)

    async def aclose(self) -> None:
        """Release the HTTP client and database engine built by ``build_container``."""
        if isinstance(self.wallets, HttpWalletClient):
            await self.wallets.aclose()
        if self.engine is not None:
            await self.engine.dispose()


def build_container(settings: Settings) -> ApplicationContainer:
    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    return ApplicationContainer(
        settings=settings,
        sessions=SqlSessionRepository(session_factory),
        roles=SqlAccountRepository(session_factory),
        logs=SqlLogRepository(session_factory),
        ledger=SqlLedgerRepository(session_factory),
        wallets=HttpWalletClient(settings.wallet_url, timeout=settings.wallet_timeout),
        engine=engine,
    )


__all__ = ["ApplicationContainer", "build_container"]
