"""
Shared fakes and fixtures for the dashboard tests.
"""
from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from bank_dashboard.core.config import Settings
from bank_dashboard.core.container import ApplicationContainer
from bank_dashboard.main import create_app
from bank_dashboard.modules.ledger.models import AccountingSnapshot, CurrencyBalance, ProcessingCounters
from bank_dashboard.modules.logs.models import LogCounters
from bank_dashboard.modules.wallets.models import WalletInfo, WalletUTXO

ADMIN_SESSION = "admin-session"
USER_SESSION = "user-session"


class CollaboratorFailure(Exception):
    """Raised by fakes configured to fail."""


class Recorder:
    """Records calls and raises for the names listed in ``failures``."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.failures: dict[str, Exception] = {}

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]


class FakeSessions(Recorder):
    def __init__(self, users: dict[str, str] | None = None, connected: int = 3) -> None:
        super().__init__()
        self.users = users if users is not None else {ADMIN_SESSION: "admin-1", USER_SESSION: "user-1"}
        self.connected = connected

    async def resolve_user(self, session_id: str) -> str | None:
        self._call("resolve_user")
        return self.users.get(session_id)

    async def count_connected(self) -> int:
        self._call("count_connected")
        return self.connected


class FakeRoles(Recorder):
    def __init__(self, admins: set[str] | None = None, users: int = 42) -> None:
        super().__init__()
        self.admins = admins if admins is not None else {"admin-1"}
        self.users = users

    async def has_role(self, user_id: str, role_name: str) -> bool:
        self._call("has_role")
        return role_name == "admin" and user_id in self.admins

    async def count_users(self) -> int:
        self._call("count_users")
        return self.users


class FakeLogs(Recorder):
    def __init__(self, counters: LogCounters | None = None) -> None:
        super().__init__()
        self.value = counters or LogCounters(warnings=5, errors=2, panics=1)

    async def counters(self) -> LogCounters:
        self._call("counters")
        return self.value


class FakeLedger(Recorder):
    def __init__(self) -> None:
        super().__init__()
        self.accounts = AccountingSnapshot(
            account_count=10,
            active_count=7,
            balances=[
                CurrencyBalance(currency="CHF", balance=Decimal("100.50000000"), locked=Decimal("10.00000000")),
                CurrencyBalance(currency="BTC", balance=Decimal("1.25000000"), locked=Decimal("0.25000000")),
            ],
        )
        self.batches = ProcessingCounters(total=4, processing=1)
        self.withdraws = ProcessingCounters(total=9, processing=2)

    async def accounts_info(self) -> AccountingSnapshot:
        self._call("accounts_info")
        return self.accounts

    async def batches_info(self) -> ProcessingCounters:
        self._call("batches_info")
        return self.batches

    async def withdraws_info(self) -> ProcessingCounters:
        self._call("withdraws_info")
        return self.withdraws


class FakeWallets(Recorder):
    def __init__(self, wallets: list[WalletInfo] | None = None) -> None:
        super().__init__()
        self.wallets = wallets if wallets is not None else [
            WalletInfo(
                chain="bitcoin-mainnet",
                utxos=[
                    WalletUTXO(amount=Decimal("1.23456789"), locked=False),
                    WalletUTXO(amount=Decimal("0.00000001"), locked=True),
                ],
            ),
            WalletInfo(chain="liquid-mainnet", utxos=[WalletUTXO(amount=Decimal("3"), locked=False)]),
        ]
        self.requested: list[str | None] = []
        # overrides the filtered answer for single wallet queries
        self.detail_answer: list[WalletInfo] | None = None

    async def status(self, chain: str | None = None) -> list[WalletInfo]:
        self._call("status")
        self.requested.append(chain)
        if chain is None:
            return list(self.wallets)
        if self.detail_answer is not None:
            return self.detail_answer
        return [wallet for wallet in self.wallets if wallet.chain == chain]


@pytest.fixture()
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture()
def sessions() -> FakeSessions:
    return FakeSessions()


@pytest.fixture()
def roles() -> FakeRoles:
    return FakeRoles()


@pytest.fixture()
def logs() -> FakeLogs:
    return FakeLogs()


@pytest.fixture()
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture()
def wallets() -> FakeWallets:
    return FakeWallets()


@pytest.fixture()
def container(settings, sessions, roles, logs, ledger, wallets) -> ApplicationContainer:
    return ApplicationContainer(
        settings=settings,
        sessions=sessions,
        roles=roles,
        logs=logs,
        ledger=ledger,
        wallets=wallets,
    )


@pytest.fixture()
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client
