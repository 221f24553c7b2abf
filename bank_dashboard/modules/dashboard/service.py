"""Status aggregation across the session, identity, log, ledger and wallet collaborators."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from bank_dashboard.core.exceptions import InternalError
from bank_dashboard.modules.accounts.repository import RoleChecker
from bank_dashboard.modules.ledger.models import AccountingSnapshot, ProcessingCounters
from bank_dashboard.modules.ledger.repository import LedgerSnapshotProvider
from bank_dashboard.modules.logs.models import LogCounters
from bank_dashboard.modules.logs.repository import LogCounterProvider
from bank_dashboard.modules.sessions.repository import SessionResolver
from bank_dashboard.modules.wallets.repository import WalletStatusProvider
from bank_dashboard.modules.wallets.service import summarize_wallets

from .models import ReserveSnapshot, StatusSnapshot, UserCounters

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StatusAggregator:
    """Fan out to every status source and merge the results.

    The sources run as concurrent tasks joined by a single barrier. Either all
    of them succeed and a full ``StatusSnapshot`` is returned, or the first
    failure cancels the tasks still running and ``InternalError`` is raised.
    """

    sessions: SessionResolver
    roles: RoleChecker
    logs: LogCounterProvider
    ledger: LedgerSnapshotProvider
    wallets: WalletStatusProvider

    async def fetch_status(self) -> StatusSnapshot:
        fetches: dict[str, Callable[[], Awaitable[Any]]] = {
            "logs": self._fetch_logs,
            "users": self._fetch_users,
            "accounting": self._fetch_accounting,
            "batches": self._fetch_batches,
            "reserve": self._fetch_reserve,
        }
        results = await self._gather(fetches)

        batch, withdraw = results["batches"]
        return StatusSnapshot(
            logs=results["logs"],
            users=results["users"],
            accounting=results["accounting"],
            batch=batch,
            withdraw=withdraw,
            reserve=results["reserve"],
        )

    async def _gather(self, fetches: dict[str, Callable[[], Awaitable[Any]]]) -> dict[str, Any]:
        tasks = {
            name: asyncio.create_task(fetch(), name=f"dashboard.status.{name}")
            for name, fetch in fetches.items()
        }
        # done callbacks run in completion order
        finished: list[str] = []
        for name, task in tasks.items():
            task.add_done_callback(lambda _task, name=name: finished.append(name))
        try:
            await asyncio.wait(tasks.values(), return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks.values():
                if not task.done():
                    task.cancel()
            # reap every task so no exception is left unretrieved
            await asyncio.gather(*tasks.values(), return_exceptions=True)

        for name in finished:
            task = tasks[name]
            if task.cancelled():
                continue
            exc = task.exception()
            if exc is not None:
                logger.error("Fetch %s status failed: %s", name, exc)
                raise InternalError(f"{name} status failed") from exc

        return {name: task.result() for name, task in tasks.items()}

    async def _fetch_logs(self) -> LogCounters:
        return await self.logs.counters()

    async def _fetch_users(self) -> UserCounters:
        total_users = await self.roles.count_users()
        connected = await self.sessions.count_connected()
        return UserCounters(total_users=total_users, connected_sessions=connected)

    async def _fetch_accounting(self) -> AccountingSnapshot:
        return await self.ledger.accounts_info()

    async def _fetch_batches(self) -> tuple[ProcessingCounters, ProcessingCounters]:
        batch = await self.ledger.batches_info()
        withdraw = await self.ledger.withdraws_info()
        return batch, withdraw

    async def _fetch_reserve(self) -> ReserveSnapshot:
        wallets = await self.wallets.status()
        return ReserveSnapshot(wallets=summarize_wallets(wallets))
