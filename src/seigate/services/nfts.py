"""ERC-721 / ERC-1155 reads."""

import logging
from typing import Any

from seigate.domain.models import NftBalance, NftCollection, NftInfo, NftOwnership
from seigate.exceptions import EndpointUnavailableError, NodeCommunicationError
from seigate.infra.chain.abi import ERC721_ABI, ERC1155_ABI
from seigate.infra.chain.client import ChainClient
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.utils.addresses import to_evm_address
from seigate.utils.units import parse_token_id

logger = logging.getLogger(__name__)


async def _try_call(client: ChainClient, contract: str, abi: list[dict], fn: str, args: list[Any]) -> Any:
    """Optional-extension reads (name, symbol, totalSupply, ownerOf of a burned token)."""
    try:
        return await client.call_function(contract, abi, fn, args)
    except EndpointUnavailableError:
        raise
    except NodeCommunicationError as exc:
        logger.debug("%s unavailable on %s: %s", fn, contract, exc)
        return None


class NftService:
    def __init__(self, factory: ChainClientFactory) -> None:
        self._factory = factory

    async def get_nft_info(
        self,
        token_address: str,
        token_id: str | int,
        network: NetworkIdentifier | None = None,
    ) -> NftInfo:
        contract = to_evm_address(token_address)
        tid = parse_token_id(token_id)
        client = self._factory.public_client(network)
        token_uri = await client.call_function(contract, ERC721_ABI, "tokenURI", [tid])
        return NftInfo(
            contract=contract,
            token_id=tid,
            network=client.descriptor.name,
            name=await _try_call(client, contract, ERC721_ABI, "name", []),
            symbol=await _try_call(client, contract, ERC721_ABI, "symbol", []),
            token_uri=token_uri,
            owner=await _try_call(client, contract, ERC721_ABI, "ownerOf", [tid]),
        )

    async def is_nft_owner(
        self,
        token_address: str,
        owner_address: str,
        token_id: str | int,
        network: NetworkIdentifier | None = None,
    ) -> NftOwnership:
        contract = to_evm_address(token_address)
        owner = to_evm_address(owner_address)
        tid = parse_token_id(token_id)
        client = self._factory.public_client(network)
        actual = await client.call_function(contract, ERC721_ABI, "ownerOf", [tid])
        return NftOwnership(
            contract=contract,
            owner=owner,
            token_id=tid,
            network=client.descriptor.name,
            is_owner=str(actual).lower() == owner.lower(),
        )

    async def get_erc721_balance(
        self,
        token_address: str,
        owner_address: str,
        network: NetworkIdentifier | None = None,
    ) -> NftBalance:
        contract = to_evm_address(token_address)
        owner = to_evm_address(owner_address)
        client = self._factory.public_client(network)
        balance = await client.call_function(contract, ERC721_ABI, "balanceOf", [owner])
        return NftBalance(contract=contract, owner=owner, network=client.descriptor.name, balance=balance)

    async def get_erc1155_token_uri(
        self,
        token_address: str,
        token_id: str | int,
        network: NetworkIdentifier | None = None,
    ) -> str:
        contract = to_evm_address(token_address)
        tid = parse_token_id(token_id)
        return await self._factory.public_client(network).call_function(contract, ERC1155_ABI, "uri", [tid])

    async def get_erc1155_balance(
        self,
        token_address: str,
        owner_address: str,
        token_id: str | int,
        network: NetworkIdentifier | None = None,
    ) -> NftBalance:
        contract = to_evm_address(token_address)
        owner = to_evm_address(owner_address)
        tid = parse_token_id(token_id)
        client = self._factory.public_client(network)
        balance = await client.call_function(contract, ERC1155_ABI, "balanceOf", [owner, tid])
        return NftBalance(contract=contract, owner=owner, network=client.descriptor.name, balance=balance, token_id=tid)

    async def get_nft_collection(self, token_address: str, network: NetworkIdentifier | None = None) -> NftCollection:
        contract = to_evm_address(token_address)
        client = self._factory.public_client(network)
        return NftCollection(
            contract=contract,
            network=client.descriptor.name,
            name=await _try_call(client, contract, ERC721_ABI, "name", []),
            symbol=await _try_call(client, contract, ERC721_ABI, "symbol", []),
            total_supply=await _try_call(client, contract, ERC721_ABI, "totalSupply", []),
        )
