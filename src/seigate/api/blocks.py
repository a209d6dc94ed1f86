from typing import Annotated

from fastapi import APIRouter, Depends, Query

from seigate.api.deps import get_block_service
from seigate.api.schemas.common import NetworkQuery
from seigate.services.blocks import BlockService

router = APIRouter(prefix="/api/blocks", tags=["blocks"])

BlockDep = Annotated[BlockService, Depends(get_block_service)]
FullTxQuery = Annotated[bool, Query(description="Include full transaction objects instead of hashes")]


@router.get("/latest")
async def latest_block(service: BlockDep, network: NetworkQuery = None, full_transactions: FullTxQuery = False) -> dict:
    return await service.get_latest_block(network, full_transactions)


@router.get("/hash/{block_hash}")
async def block_by_hash(
    block_hash: str, service: BlockDep, network: NetworkQuery = None, full_transactions: FullTxQuery = False
) -> dict:
    return await service.get_block_by_hash(block_hash, network, full_transactions)


@router.get("/{block_number}")
async def block_by_number(
    block_number: str, service: BlockDep, network: NetworkQuery = None, full_transactions: FullTxQuery = False
) -> dict:
    return await service.get_block_by_number(block_number, network, full_transactions)
