"""Pydantic reply schemas for the dashboard API."""
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from bank_dashboard.modules.dashboard.models import StatusSnapshot
from bank_dashboard.modules.wallets.models import UTXOSummary, WalletDetail, WalletStatus

# Amounts are already rounded to 8 places; emit them as fixed-point strings.
Amount = Annotated[
    Decimal,
    PlainSerializer(lambda value: format(value, ".8f"), return_type=str, when_used="json"),
]


class LogStatus(BaseModel):
    warnings: int
    errors: int
    panics: int


class UsersStatus(BaseModel):
    count: int
    connected: int


class CurrencyBalanceResponse(BaseModel):
    currency: str
    balance: Amount
    locked: Amount


class AccountingStatus(BaseModel):
    count: int
    active: int
    balances: list[CurrencyBalanceResponse] = Field(default_factory=list)


class ProcessingStatus(BaseModel):
    count: int
    processing: int


class UTXOInfo(BaseModel):
    utxos: int
    amount: Amount

    @classmethod
    def from_summary(cls, summary: UTXOSummary) -> "UTXOInfo":
        return cls(utxos=summary.utxo_count, amount=summary.amount)


class WalletStatusResponse(BaseModel):
    chain: str
    total: UTXOInfo
    locked: UTXOInfo

    @classmethod
    def from_domain(cls, status: WalletStatus) -> "WalletStatusResponse":
        return cls(
            chain=status.chain,
            total=UTXOInfo.from_summary(status.total),
            locked=UTXOInfo.from_summary(status.locked),
        )


class ReserveStatus(BaseModel):
    wallets: list[WalletStatusResponse] = Field(default_factory=list)


class StatusResponse(BaseModel):
    logs: LogStatus
    users: UsersStatus
    accounting: AccountingStatus
    batch: ProcessingStatus
    withdraw: ProcessingStatus
    reserve: ReserveStatus

    @classmethod
    def from_snapshot(cls, snapshot: StatusSnapshot) -> "StatusResponse":
        return cls(
            logs=LogStatus(
                warnings=snapshot.logs.warnings,
                errors=snapshot.logs.errors,
                panics=snapshot.logs.panics,
            ),
            users=UsersStatus(
                count=snapshot.users.total_users,
                connected=snapshot.users.connected_sessions,
            ),
            accounting=AccountingStatus(
                count=snapshot.accounting.account_count,
                active=snapshot.accounting.active_count,
                balances=[
                    CurrencyBalanceResponse(currency=item.currency, balance=item.balance, locked=item.locked)
                    for item in snapshot.accounting.balances
                ],
            ),
            batch=ProcessingStatus(count=snapshot.batch.total, processing=snapshot.batch.processing),
            withdraw=ProcessingStatus(count=snapshot.withdraw.total, processing=snapshot.withdraw.processing),
            reserve=ReserveStatus(
                wallets=[WalletStatusResponse.from_domain(wallet) for wallet in snapshot.reserve.wallets]
            ),
        )


class WalletListResponse(BaseModel):
    wallets: list[str]


class WalletUTXOResponse(BaseModel):
    amount: Amount
    locked: bool

    model_config = ConfigDict(from_attributes=True)


class WalletDetailResponse(BaseModel):
    wallet: str
    utxos: list[WalletUTXOResponse]
    total: UTXOInfo
    locked: UTXOInfo

    @classmethod
    def from_domain(cls, detail: WalletDetail) -> "WalletDetailResponse":
        return cls(
            wallet=detail.chain,
            utxos=[WalletUTXOResponse.model_validate(utxo) for utxo in detail.utxos],
            total=UTXOInfo.from_summary(detail.status.total),
            locked=UTXOInfo.from_summary(detail.status.locked),
        )
