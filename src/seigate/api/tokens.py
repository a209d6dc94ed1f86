from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_token_service
from seigate.api.schemas.common import NetworkQuery
from seigate.domain.models import TokenBalance, TokenInfo
from seigate.services.tokens import TokenService

router = APIRouter(prefix="/api/tokens", tags=["tokens"])

TokenDep = Annotated[TokenService, Depends(get_token_service)]


@router.get("/{token_address}", response_model=TokenInfo)
async def token_info(token_address: str, service: TokenDep, network: NetworkQuery = None) -> TokenInfo:
    return await service.get_token_info(token_address, network)


@router.get("/{token_address}/balance/{owner_address}", response_model=TokenBalance)
async def token_balance(
    token_address: str, owner_address: str, service: TokenDep, network: NetworkQuery = None
) -> TokenBalance:
    return await service.get_erc20_balance(token_address, owner_address, network)
