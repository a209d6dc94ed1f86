from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_transaction_service
from seigate.api.schemas.common import NetworkQuery
from seigate.services.transactions import TransactionService
from seigate.tools.catalog import EstimateGasArgs

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

TxDep = Annotated[TransactionService, Depends(get_transaction_service)]


@router.post("/estimate-gas")
async def estimate_gas(body: EstimateGasArgs, service: TxDep) -> dict:
    gas = await service.estimate_gas(body.to, body.value, body.data, body.network)
    return {"gas": str(gas)}


@router.get("/{tx_hash}")
async def get_transaction(tx_hash: str, service: TxDep, network: NetworkQuery = None) -> dict:
    return await service.get_transaction(tx_hash, network)


@router.get("/{tx_hash}/receipt")
async def get_receipt(tx_hash: str, service: TxDep, network: NetworkQuery = None) -> dict:
    return await service.get_transaction_receipt(tx_hash, network)
