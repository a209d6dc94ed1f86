from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_nft_service
from seigate.api.schemas.common import NetworkQuery
from seigate.domain.models import NftBalance, NftCollection, NftInfo, NftOwnership
from seigate.services.nfts import NftService

router = APIRouter(prefix="/api/nfts", tags=["nfts"])

NftDep = Annotated[NftService, Depends(get_nft_service)]


@router.get("/{contract}", response_model=NftCollection)
async def collection(contract: str, service: NftDep, network: NetworkQuery = None) -> NftCollection:
    return await service.get_nft_collection(contract, network)


@router.get("/{contract}/tokens/{token_id}", response_model=NftInfo)
async def token_info(contract: str, token_id: str, service: NftDep, network: NetworkQuery = None) -> NftInfo:
    return await service.get_nft_info(contract, token_id, network)


@router.get("/{contract}/tokens/{token_id}/owner/{owner}", response_model=NftOwnership)
async def is_owner(
    contract: str, token_id: str, owner: str, service: NftDep, network: NetworkQuery = None
) -> NftOwnership:
    return await service.is_nft_owner(contract, owner, token_id, network)


@router.get("/{contract}/balance/{owner}", response_model=NftBalance)
async def erc721_balance(contract: str, owner: str, service: NftDep, network: NetworkQuery = None) -> NftBalance:
    return await service.get_erc721_balance(contract, owner, network)


@router.get("/{contract}/erc1155/{token_id}/uri")
async def erc1155_uri(contract: str, token_id: str, service: NftDep, network: NetworkQuery = None) -> dict:
    uri = await service.get_erc1155_token_uri(contract, token_id, network)
    return {"contract": contract, "token_id": token_id, "uri": uri}


@router.get("/{contract}/erc1155/{token_id}/balance/{owner}", response_model=NftBalance)
async def erc1155_balance(
    contract: str, token_id: str, owner: str, service: NftDep, network: NetworkQuery = None
) -> NftBalance:
    return await service.get_erc1155_balance(contract, owner, token_id, network)
