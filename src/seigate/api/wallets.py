from typing import Annotated

from fastapi import APIRouter, Depends, Query

from seigate.api.deps import get_history, get_token_service, get_transaction_service, get_wallet_service
from seigate.api.schemas.common import NetworkQuery
from seigate.domain.models import Balance, TransactionHistory, WalletActivitySummary, WalletAnalysis
from seigate.services.history import HistoryReconstructor
from seigate.services.tokens import TokenService
from seigate.services.transactions import TransactionService
from seigate.services.wallet import WalletService

router = APIRouter(prefix="/api/wallets", tags=["wallets"])

HistoryDep = Annotated[HistoryReconstructor, Depends(get_history)]
WalletDep = Annotated[WalletService, Depends(get_wallet_service)]


@router.get("/signer")
async def signer_address(service: WalletDep) -> dict:
    """Address of the configured signing key."""
    return {"address": service.get_signer_address()}


@router.get("/{address}/balance", response_model=Balance)
async def get_balance(
    address: str,
    service: Annotated[TokenService, Depends(get_token_service)],
    network: NetworkQuery = None,
) -> Balance:
    return await service.get_balance(address, network)


@router.get("/{address}/transaction-count")
async def transaction_count(
    address: str,
    service: Annotated[TransactionService, Depends(get_transaction_service)],
    network: NetworkQuery = None,
) -> dict:
    return {"address": address, "transaction_count": await service.get_transaction_count(address, network)}


@router.get("/{address}/transactions", response_model=TransactionHistory)
async def transaction_history(
    address: str,
    history: HistoryDep,
    network: NetworkQuery = None,
    limit: int = Query(10, ge=1, le=50),
) -> TransactionHistory:
    """Matches within the most recent blocks only. An empty list does not mean the address is unused."""
    return await history.get_transaction_history(address, network, limit)


@router.get("/{address}/activity", response_model=WalletActivitySummary)
async def wallet_activity(address: str, history: HistoryDep, network: NetworkQuery = None) -> WalletActivitySummary:
    return await history.get_wallet_activity(address, network)


@router.get("/{address}/analysis", response_model=WalletAnalysis)
async def analyze_wallet(address: str, service: WalletDep, network: NetworkQuery = None) -> WalletAnalysis:
    return await service.analyze_wallet(address, network)
