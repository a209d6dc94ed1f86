from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_contract_service
from seigate.api.schemas.common import NetworkQuery
from seigate.services.contracts import ContractService
from seigate.tools.catalog import ReadContractArgs, WriteContractArgs

router = APIRouter(prefix="/api/contracts", tags=["contracts"])

ContractDep = Annotated[ContractService, Depends(get_contract_service)]


@router.post("/read")
async def read_contract(body: ReadContractArgs, service: ContractDep) -> dict:
    result = await service.read_contract(body.contract_address, body.abi, body.function_name, body.args, body.network)
    return {"result": result}


@router.post("/write")
async def write_contract(body: WriteContractArgs, service: ContractDep) -> dict:
    tx_hash = await service.write_contract(
        body.contract_address, body.abi, body.function_name, body.args, body.value, body.network
    )
    return {"tx_hash": tx_hash}


@router.get("/{address}/is-contract")
async def is_contract(address: str, service: ContractDep, network: NetworkQuery = None) -> dict:
    return {"address": address, "is_contract": await service.is_contract(address, network)}
