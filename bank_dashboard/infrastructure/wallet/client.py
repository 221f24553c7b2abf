"""HTTP client for the wallet service status endpoint."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from bank_dashboard.modules.wallets.exceptions import WalletServiceError
from bank_dashboard.modules.wallets.models import WalletInfo, WalletUTXO

logger = logging.getLogger(__name__)

STATUS_PATH = "/wallet/status"


class _UTXOPayload(BaseModel):
    amount: Decimal = Field(ge=0)
    locked: bool = False


class _WalletPayload(BaseModel):
    chain: str
    utxos: list[_UTXOPayload] = Field(default_factory=list)


class _StatusPayload(BaseModel):
    wallets: list[_WalletPayload] = Field(default_factory=list)


class HttpWalletClient:
    """Query wallet reserves from the wallet service.

    The underlying ``httpx.AsyncClient`` is owned by the caller when passed in,
    otherwise it is created here and released by :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._status_url = base_url.rstrip("/") + STATUS_PATH
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def status(self, chain: str | None = None) -> list[WalletInfo]:
        try:
            response = await self._client.post(self._status_url, json={"chain": chain})
            response.raise_for_status()
            payload = _StatusPayload.model_validate(response.json())
        except httpx.HTTPError as exc:
            logger.error("Wallet service request failed: %s", exc)
            raise WalletServiceError(str(exc)) from exc
        except (ValueError, ValidationError) as exc:
            logger.error("Wallet service returned malformed payload: %s", exc)
            raise WalletServiceError("malformed wallet status") from exc

        return [
            WalletInfo(
                chain=wallet.chain,
                utxos=[WalletUTXO(amount=utxo.amount, locked=utxo.locked) for utxo in wallet.utxos],
            )
            for wallet in payload.wallets
        ]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
