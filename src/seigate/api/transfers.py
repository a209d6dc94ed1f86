from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_transfer_service
from seigate.domain.models import TransferResult
from seigate.services.transfers import TransferService
from seigate.tools.catalog import (
    ApproveErc20Args,
    TransferErc20Args,
    TransferErc721Args,
    TransferErc1155Args,
    TransferSeiArgs,
)

router = APIRouter(prefix="/api/transfers", tags=["transfers"])

TransferDep = Annotated[TransferService, Depends(get_transfer_service)]


@router.post("/sei", response_model=TransferResult)
async def transfer_sei(body: TransferSeiArgs, service: TransferDep) -> TransferResult:
    return await service.transfer_sei(body.to_address, body.amount, body.network)


@router.post("/erc20", response_model=TransferResult)
async def transfer_erc20(body: TransferErc20Args, service: TransferDep) -> TransferResult:
    return await service.transfer_erc20(body.token_address, body.to_address, body.amount, body.network)


@router.post("/erc20/approve", response_model=TransferResult)
async def approve_erc20(body: ApproveErc20Args, service: TransferDep) -> TransferResult:
    return await service.approve_erc20(body.token_address, body.spender_address, body.amount, body.network)


@router.post("/erc721", response_model=TransferResult)
async def transfer_erc721(body: TransferErc721Args, service: TransferDep) -> TransferResult:
    return await service.transfer_erc721(body.token_address, body.to_address, body.token_id, body.network)


@router.post("/erc1155", response_model=TransferResult)
async def transfer_erc1155(body: TransferErc1155Args, service: TransferDep) -> TransferResult:
    return await service.transfer_erc1155(body.token_address, body.to_address, body.token_id, body.amount, body.network)
