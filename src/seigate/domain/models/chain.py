from pydantic import BaseModel

from seigate.domain.models.types import BigInt


class ChainInfo(BaseModel):
    network: str
    chain_id: int
    cosmos_chain_id: str
    block_number: BigInt
    rpc_url: str
    native_symbol: str
    testnet: bool


class NetworkStatus(BaseModel):
    network: str
    chain_id: int
    block_height: BigInt
    rpc_url: str
    status: str = "online"
