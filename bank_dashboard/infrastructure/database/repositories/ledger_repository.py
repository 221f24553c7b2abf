"""SQLAlchemy repository for accounting, batch and withdraw snapshots."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bank_dashboard.core.amounts import round_amount
from bank_dashboard.infrastructure.database.models import (
    Account,
    AccountOperation,
    AccountState,
    Batch,
    BatchInfo,
    Withdraw,
    WithdrawInfo,
)
from bank_dashboard.modules.ledger.models import AccountingSnapshot, CurrencyBalance, ProcessingCounters

ACCOUNT_STATE_NORMAL = "normal"
STATUS_PROCESSING = "processing"


class SqlLedgerRepository:
    """Snapshots derived from the latest state, operation or info row of each entity."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def accounts_info(self) -> AccountingSnapshot:
        latest_state = (
            select(func.max(AccountState.id))
            .group_by(AccountState.account_id)
            .scalar_subquery()
        )
        active_stmt = select(func.count(AccountState.id)).where(
            AccountState.id.in_(latest_state),
            AccountState.state == ACCOUNT_STATE_NORMAL,
        )

        latest_operation = (
            select(func.max(AccountOperation.id))
            .group_by(AccountOperation.account_id)
            .scalar_subquery()
        )
        balances_stmt = (
            select(
                Account.currency,
                func.sum(AccountOperation.balance),
                func.sum(AccountOperation.total_locked),
            )
            .join(AccountOperation, AccountOperation.account_id == Account.id)
            .where(AccountOperation.id.in_(latest_operation))
            .group_by(Account.currency)
            .order_by(Account.currency)
        )

        async with self._session_factory() as session:
            account_count = (await session.execute(select(func.count(Account.id)))).scalar_one()
            active_count = (await session.execute(active_stmt)).scalar_one()
            rows = (await session.execute(balances_stmt)).all()

        return AccountingSnapshot(
            account_count=int(account_count),
            active_count=int(active_count),
            balances=[
                CurrencyBalance(
                    currency=currency,
                    balance=round_amount(balance or 0),
                    locked=round_amount(locked or 0),
                )
                for currency, balance, locked in rows
            ],
        )

    async def batches_info(self) -> ProcessingCounters:
        return await self._processing_counters(Batch, BatchInfo, BatchInfo.batch_id)

    async def withdraws_info(self) -> ProcessingCounters:
        return await self._processing_counters(Withdraw, WithdrawInfo, WithdrawInfo.withdraw_id)

    async def _processing_counters(self, model, info_model, owner_column) -> ProcessingCounters:
        latest_info = select(func.max(info_model.id)).group_by(owner_column).scalar_subquery()
        processing_stmt = select(func.count(info_model.id)).where(
            info_model.id.in_(latest_info),
            info_model.status == STATUS_PROCESSING,
        )
        async with self._session_factory() as session:
            total = (await session.execute(select(func.count(model.id)))).scalar_one()
            processing = (await session.execute(processing_stmt)).scalar_one()
        return ProcessingCounters(total=int(total), processing=int(processing))
