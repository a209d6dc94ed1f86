"""Network metadata and live chain status."""

import logging

from seigate.domain.models import ChainInfo, NetworkStatus
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier, NetworkRegistry

logger = logging.getLogger(__name__)


class NetworkService:
    def __init__(self, factory: ChainClientFactory) -> None:
        self._factory = factory

    @property
    def registry(self) -> NetworkRegistry:
        return self._factory.registry

    def get_supported_networks(self) -> list[str]:
        return self.registry.get_supported_networks()

    async def get_chain_id(self, network: NetworkIdentifier | None = None) -> int:
        return await self._factory.public_client(network).get_chain_id()

    async def get_block_number(self, network: NetworkIdentifier | None = None) -> int:
        return await self._factory.public_client(network).get_block_number()

    async def get_chain_info(self, network: NetworkIdentifier | None = None) -> ChainInfo:
        """Static descriptor data combined with the node's own chain id and height."""
        client = self._factory.public_client(network)
        descriptor = client.descriptor
        chain_id = await client.get_chain_id()
        if chain_id != descriptor.chain_id:
            logger.warning("Node at %s reports chain %d, expected %d", client.endpoint, chain_id, descriptor.chain_id)
        return ChainInfo(
            network=descriptor.name,
            chain_id=chain_id,
            cosmos_chain_id=descriptor.cosmos_chain_id,
            block_number=await client.get_block_number(),
            rpc_url=client.endpoint,
            native_symbol=descriptor.native_symbol,
            testnet=descriptor.testnet,
        )

    async def get_network_status(self, network: NetworkIdentifier | None = None) -> NetworkStatus:
        client = self._factory.public_client(network)
        return NetworkStatus(
            network=client.descriptor.name,
            chain_id=client.chain_id,
            block_height=await client.get_block_number(),
            rpc_url=client.endpoint,
        )
