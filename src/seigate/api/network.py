from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_network_service
from seigate.api.schemas.common import NetworkQuery
from seigate.domain.models import ChainInfo, NetworkStatus
from seigate.services.network import NetworkService

router = APIRouter(prefix="/api/network", tags=["network"])

NetworkDep = Annotated[NetworkService, Depends(get_network_service)]


@router.get("")
async def list_networks(service: NetworkDep) -> dict:
    return {"networks": service.get_supported_networks(), "default": service.registry.default_network}


@router.get("/info", response_model=ChainInfo)
async def chain_info(service: NetworkDep, network: NetworkQuery = None) -> ChainInfo:
    return await service.get_chain_info(network)


@router.get("/status", response_model=NetworkStatus)
async def network_status(service: NetworkDep, network: NetworkQuery = None) -> NetworkStatus:
    return await service.get_network_status(network)


@router.get("/chain-id")
async def chain_id(service: NetworkDep, network: NetworkQuery = None) -> dict:
    name = service.registry.get_descriptor(network).name
    return {"network": name, "chain_id": await service.get_chain_id(network)}


@router.get("/block-number")
async def block_number(service: NetworkDep, network: NetworkQuery = None) -> dict:
    name = service.registry.get_descriptor(network).name
    return {"network": name, "block_number": str(await service.get_block_number(network))}
