"""Static description of one logical chain."""

from pydantic import BaseModel


class NetworkDescriptor(BaseModel):
    """A logical network: chain id, endpoint pools and native currency."""

    name: str
    chain_id: int
    cosmos_chain_id: str
    rpc_urls: tuple[str, ...]  # Ordered: index 0 is the primary endpoint
    ws_urls: tuple[str, ...]
    native_symbol: str = "SEI"
    native_decimals: int = 18
    testnet: bool = False

    model_config = {"frozen": True}

    @property
    def primary_rpc_url(self) -> str:
        return self.rpc_urls[0]
