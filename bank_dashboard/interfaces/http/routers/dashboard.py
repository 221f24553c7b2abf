"""Administrative status endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from bank_dashboard.core.container import ApplicationContainer
from bank_dashboard.core.exceptions import (
    DashboardError,
    InvalidArgumentError,
    InvalidStateError,
)
from bank_dashboard.interfaces.http.deps import admin_guard, get_container
from bank_dashboard.schemas import StatusResponse, WalletDetailResponse, WalletListResponse

router = APIRouter()
logger = logging.getLogger(__name__)

_STATUS_CODES = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    InvalidStateError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _to_http(exc: DashboardError) -> HTTPException:
    status_code = _STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=exc.message)


@router.get("/status", response_model=StatusResponse, summary="Platform status")
async def dashboard_status(
    user_id: str = Depends(admin_guard("DashboardService", "Status")),
    container: ApplicationContainer = Depends(get_container),
):
    try:
        snapshot = await container.status_aggregator().fetch_status()
    except DashboardError as exc:
        logger.error("FetchDashboardStatus failed: %s", exc)
        raise _to_http(exc) from exc
    return StatusResponse.from_snapshot(snapshot)


@router.get("/wallets", response_model=WalletListResponse, summary="Wallet chains")
async def wallet_list(
    user_id: str = Depends(admin_guard("DashboardService", "WalletList")),
    container: ApplicationContainer = Depends(get_container),
):
    try:
        wallets = await container.wallet_directory().list_wallets()
    except DashboardError as exc:
        logger.error("FetchWalletList failed: %s", exc)
        raise _to_http(exc) from exc
    return WalletListResponse(wallets=wallets)


@router.get("/wallets/detail", response_model=WalletDetailResponse, summary="Wallet UTXO detail")
async def wallet_detail(
    wallet: str = "",
    user_id: str = Depends(admin_guard("DashboardService", "WalletDetail")),
    container: ApplicationContainer = Depends(get_container),
):
    try:
        detail = await container.wallet_directory().get_wallet_detail(wallet)
    except DashboardError as exc:
        logger.error("FetchWalletDetail failed: %s", exc)
        raise _to_http(exc) from exc
    return WalletDetailResponse.from_domain(detail)
