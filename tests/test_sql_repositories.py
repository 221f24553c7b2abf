from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio

from bank_dashboard.core.config import DatabaseSettings, Settings
from bank_dashboard.infrastructure.database import build_engine, build_session_factory, init_db
from bank_dashboard.infrastructure.database.models import (
    Account,
    AccountOperation,
    AccountState,
    Batch,
    BatchInfo,
    LogEntry,
    User,
    UserRole,
    UserSession,
    Withdraw,
    WithdrawInfo,
)
from bank_dashboard.infrastructure.database.repositories import (
    SqlAccountRepository,
    SqlLedgerRepository,
    SqlLogRepository,
    SqlSessionRepository,
)


@pytest_asyncio.fixture()
async def session_factory(tmp_path):
    settings = Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'bank.db'}"),
    )
    engine = build_engine(settings)
    await init_db(engine)
    try:
        yield build_session_factory(engine)
    finally:
        await engine.dispose()


async def _add(session_factory, *rows):
    async with session_factory() as session:
        for row in rows:
            session.add(row)
            await session.flush()
        await session.commit()


@pytest_asyncio.fixture()
async def seeded(session_factory):
    now = datetime.now(timezone.utc)
    await _add(
        session_factory,
        User(id="u-admin", name="alice"),
        User(id="u-plain", name="bob"),
        User(id="u-idle", name="carol"),
        UserRole(user_id="u-admin", role="admin"),
        UserRole(user_id="u-plain", role="user"),
        UserSession(session_id="live", user_id="u-admin", expires_at=now + timedelta(hours=1)),
        UserSession(session_id="other", user_id="u-plain", expires_at=now + timedelta(hours=1)),
        UserSession(session_id="expired", user_id="u-plain", expires_at=now - timedelta(hours=1)),
    )
    return session_factory


@pytest.mark.asyncio
async def test_session_repository(seeded):
    repository = SqlSessionRepository(seeded)

    assert await repository.resolve_user("live") == "u-admin"
    assert await repository.resolve_user("expired") is None
    assert await repository.resolve_user("missing") is None
    assert await repository.count_connected() == 2


@pytest.mark.asyncio
async def test_account_repository(seeded):
    repository = SqlAccountRepository(seeded)

    assert await repository.has_role("u-admin", "admin") is True
    assert await repository.has_role("u-plain", "admin") is False
    assert await repository.has_role("missing", "admin") is False
    assert await repository.count_users() == 3


@pytest.mark.asyncio
async def test_log_repository_counts_severities(session_factory):
    levels = ["warning", "WARNING", "error", "panic", "info", "debug", "error", "error"]
    await _add(session_factory, *[LogEntry(app="bank", level=level, message="x") for level in levels])

    counters = await SqlLogRepository(session_factory).counters()

    assert (counters.warnings, counters.errors, counters.panics) == (2, 3, 1)


@pytest.mark.asyncio
async def test_log_repository_empty(session_factory):
    counters = await SqlLogRepository(session_factory).counters()

    assert (counters.warnings, counters.errors, counters.panics) == (0, 0, 0)


@pytest.mark.asyncio
async def test_ledger_accounts_info_uses_latest_rows(seeded):
    await _add(
        seeded,
        Account(id=1, user_id="u-admin", currency="CHF"),
        Account(id=2, user_id="u-plain", currency="CHF"),
        Account(id=3, user_id="u-plain", currency="BTC"),
        Account(id=4, user_id="u-idle", currency="EUR"),
        AccountState(account_id=1, state="normal"),
        AccountState(account_id=2, state="normal"),
        AccountState(account_id=2, state="locked"),
        AccountState(account_id=3, state="disabled"),
        AccountState(account_id=3, state="normal"),
        AccountOperation(account_id=1, amount=10, balance=10, total_locked=0),
        AccountOperation(account_id=1, amount=5, balance=15, total_locked=2),
        AccountOperation(account_id=2, amount=20, balance=20, total_locked=1),
        AccountOperation(account_id=3, amount=Decimal("0.5"), balance=Decimal("0.5"), total_locked=0),
    )

    snapshot = await SqlLedgerRepository(seeded).accounts_info()

    assert snapshot.account_count == 4
    assert snapshot.active_count == 2
    assert [(item.currency, item.balance, item.locked) for item in snapshot.balances] == [
        ("BTC", Decimal("0.50000000"), Decimal("0E-8")),
        ("CHF", Decimal("35.00000000"), Decimal("3.00000000")),
    ]


@pytest.mark.asyncio
async def test_ledger_processing_counters(seeded):
    await _add(
        seeded,
        Account(id=1, user_id="u-admin", currency="BTC"),
        Batch(id=1, network="bitcoin-mainnet"),
        Batch(id=2, network="bitcoin-mainnet"),
        Batch(id=3, network="liquid-mainnet"),
        BatchInfo(batch_id=1, status="created"),
        BatchInfo(batch_id=1, status="processing"),
        BatchInfo(batch_id=2, status="processing"),
        BatchInfo(batch_id=2, status="settled"),
        Withdraw(id=1, account_id=1, amount=Decimal("0.1")),
        Withdraw(id=2, account_id=1, amount=Decimal("0.2")),
        WithdrawInfo(withdraw_id=1, status="processing"),
        WithdrawInfo(withdraw_id=2, status="processing"),
    )
    repository = SqlLedgerRepository(seeded)

    batches = await repository.batches_info()
    withdraws = await repository.withdraws_info()

    assert (batches.total, batches.processing) == (3, 1)
    assert (withdraws.total, withdraws.processing) == (2, 2)


@pytest.mark.asyncio
async def test_ledger_empty_database(session_factory):
    repository = SqlLedgerRepository(session_factory)

    snapshot = await repository.accounts_info()
    batches = await repository.batches_info()

    assert snapshot.account_count == 0
    assert snapshot.balances == []
    assert (batches.total, batches.processing) == (0, 0)
