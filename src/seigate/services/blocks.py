"""Block lookups, normalized to JSON-safe dicts."""

from typing import Any

from seigate.exceptions import ValidationError
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.utils.addresses import validate_hash
from seigate.utils.serialization import serialize


class BlockService:
    def __init__(self, factory: ChainClientFactory) -> None:
        self._factory = factory

    async def get_block_by_number(
        self,
        block_number: int | str,
        network: NetworkIdentifier | None = None,
        full_transactions: bool = False,
    ) -> dict[str, Any]:
        try:
            number = int(block_number)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid block number: {block_number}") from None
        if number < 0:
            raise ValidationError(f"Invalid block number: {block_number}")
        block = await self._factory.public_client(network).get_block(number, full_transactions)
        return serialize(block)

    async def get_block_by_hash(
        self,
        block_hash: str,
        network: NetworkIdentifier | None = None,
        full_transactions: bool = False,
    ) -> dict[str, Any]:
        validate_hash(block_hash, "block hash")
        block = await self._factory.public_client(network).get_block(block_hash, full_transactions)
        return serialize(block)

    async def get_latest_block(self, network: NetworkIdentifier | None = None, full_transactions: bool = False) -> dict[str, Any]:
        block = await self._factory.public_client(network).get_block("latest", full_transactions)
        return serialize(block)
