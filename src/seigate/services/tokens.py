"""Native and ERC-20 balances and token metadata."""

import asyncio
import logging

from seigate.domain.models import Balance, TokenAmount, TokenBalance, TokenInfo, TokenMetadata
from seigate.exceptions import EndpointUnavailableError, NodeCommunicationError
from seigate.infra.chain.abi import ERC20_ABI
from seigate.infra.chain.client import ChainClient
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.utils.addresses import to_evm_address

logger = logging.getLogger(__name__)


async def read_token_metadata(client: ChainClient, token: str) -> TokenMetadata:
    """name/symbol/decimals of an ERC-20. ``decimals`` is required; name and symbol are optional in the standard."""
    name, symbol, decimals = await asyncio.gather(
        _optional_call(client, token, "name"),
        _optional_call(client, token, "symbol"),
        client.call_function(token, ERC20_ABI, "decimals", []),
    )
    return TokenMetadata(address=token, name=name, symbol=symbol, decimals=int(decimals))


async def _optional_call(client: ChainClient, token: str, fn: str) -> str | None:
    try:
        return await client.call_function(token, ERC20_ABI, fn, [])
    except EndpointUnavailableError:
        raise
    except NodeCommunicationError as exc:
        logger.debug("%s() unavailable on %s: %s", fn, token, exc)
        return None


class TokenService:
    def __init__(self, factory: ChainClientFactory) -> None:
        self._factory = factory

    async def get_balance(self, address: str, network: NetworkIdentifier | None = None) -> Balance:
        """Native SEI balance. An address the chain has never seen reads as zero, not as an error."""
        evm_address = to_evm_address(address)
        client = self._factory.public_client(network)
        wei = await client.get_balance(evm_address)
        return Balance(
            address=address,
            network=client.descriptor.name,
            wei=wei,
            symbol=client.descriptor.native_symbol,
            decimals=client.descriptor.native_decimals,
        )

    async def get_token_metadata(self, token_address: str, network: NetworkIdentifier | None = None) -> TokenMetadata:
        token = to_evm_address(token_address)
        return await read_token_metadata(self._factory.public_client(network), token)

    async def get_token_info(self, token_address: str, network: NetworkIdentifier | None = None) -> TokenInfo:
        token = to_evm_address(token_address)
        client = self._factory.public_client(network)
        metadata = await read_token_metadata(client, token)
        supply = await client.call_function(token, ERC20_ABI, "totalSupply", [])
        return TokenInfo(
            **metadata.model_dump(),
            total_supply=TokenAmount(raw=supply, decimals=metadata.decimals or 0),
        )

    async def get_erc20_balance(
        self,
        token_address: str,
        owner_address: str,
        network: NetworkIdentifier | None = None,
    ) -> TokenBalance:
        token = to_evm_address(token_address)
        owner = to_evm_address(owner_address)
        client = self._factory.public_client(network)
        metadata = await read_token_metadata(client, token)
        raw = await client.call_function(token, ERC20_ABI, "balanceOf", [owner])
        return TokenBalance(
            raw=raw,
            decimals=metadata.decimals or 0,
            owner=owner,
            network=client.descriptor.name,
            token=metadata,
        )
