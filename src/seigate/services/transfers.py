"""Signed transfers and approvals using the configured key."""

import logging

from seigate.domain.models import TokenAmount, TokenMetadata, TransferResult
from seigate.infra.chain.abi import ERC20_ABI, ERC721_ABI, ERC1155_ABI
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.services.tokens import read_token_metadata
from seigate.utils.addresses import to_evm_address
from seigate.utils.units import NATIVE_DECIMALS, parse_token_id, parse_units

logger = logging.getLogger(__name__)


class TransferService:
    """Each operation submits one transaction and returns its hash without waiting for inclusion.

    Node rejections (insufficient funds, reverts during gas estimation) surface as
    ``NodeCommunicationError`` carrying the node's message.
    """

    def __init__(self, factory: ChainClientFactory, private_key: str = "") -> None:
        self._factory = factory
        self._private_key = private_key

    async def transfer_sei(self, to_address: str, amount: str, network: NetworkIdentifier | None = None) -> TransferResult:
        to = to_evm_address(to_address)
        value = parse_units(amount, NATIVE_DECIMALS)
        async with self._factory.signing_client(self._private_key, network) as client:
            tx_hash = await client.send_value(to, value)
            logger.info("Sent %s %s to %s: %s", amount, client.descriptor.native_symbol, to, tx_hash)
            return TransferResult(
                tx_hash=tx_hash,
                network=client.descriptor.name,
                from_address=client.address,
                to_address=to,
                amount=TokenAmount(raw=value, decimals=NATIVE_DECIMALS),
                token=TokenMetadata(
                    address="native",
                    name=client.descriptor.native_symbol,
                    symbol=client.descriptor.native_symbol,
                    decimals=NATIVE_DECIMALS,
                ),
            )

    async def _erc20_call(
        self,
        function_name: str,
        token_address: str,
        counterparty: str,
        amount: str,
        network: NetworkIdentifier | None,
    ) -> TransferResult:
        token = to_evm_address(token_address)
        other = to_evm_address(counterparty)
        async with self._factory.signing_client(self._private_key, network) as client:
            metadata = await read_token_metadata(client, token)
            raw = parse_units(amount, metadata.decimals or 0)
            tx_hash = await client.send_function(token, ERC20_ABI, function_name, [other, raw])
            logger.info("%s %s %s -> %s: %s", function_name, amount, metadata.symbol, other, tx_hash)
            return TransferResult(
                tx_hash=tx_hash,
                network=client.descriptor.name,
                from_address=client.address,
                to_address=other,
                amount=TokenAmount(raw=raw, decimals=metadata.decimals or 0),
                token=metadata,
            )

    async def transfer_erc20(
        self,
        token_address: str,
        to_address: str,
        amount: str,
        network: NetworkIdentifier | None = None,
    ) -> TransferResult:
        return await self._erc20_call("transfer", token_address, to_address, amount, network)

    async def approve_erc20(
        self,
        token_address: str,
        spender_address: str,
        amount: str,
        network: NetworkIdentifier | None = None,
    ) -> TransferResult:
        """``to_address`` of the result is the spender."""
        return await self._erc20_call("approve", token_address, spender_address, amount, network)

    async def transfer_erc721(
        self,
        token_address: str,
        to_address: str,
        token_id: str | int,
        network: NetworkIdentifier | None = None,
    ) -> TransferResult:
        token = to_evm_address(token_address)
        to = to_evm_address(to_address)
        tid = parse_token_id(token_id)
        async with self._factory.signing_client(self._private_key, network) as client:
            tx_hash = await client.send_function(token, ERC721_ABI, "transferFrom", [client.address, to, tid])
            return TransferResult(
                tx_hash=tx_hash,
                network=client.descriptor.name,
                from_address=client.address,
                to_address=to,
                amount=TokenAmount(raw=1, decimals=0),
                token=TokenMetadata(address=token, decimals=0),
                token_id=tid,
            )

    async def transfer_erc1155(
        self,
        token_address: str,
        to_address: str,
        token_id: str | int,
        amount: str,
        network: NetworkIdentifier | None = None,
    ) -> TransferResult:
        token = to_evm_address(token_address)
        to = to_evm_address(to_address)
        tid = parse_token_id(token_id)
        quantity = parse_units(amount, 0)
        async with self._factory.signing_client(self._private_key, network) as client:
            tx_hash = await client.send_function(
                token, ERC1155_ABI, "safeTransferFrom", [client.address, to, tid, quantity, b""]
            )
            return TransferResult(
                tx_hash=tx_hash,
                network=client.descriptor.name,
                from_address=client.address,
                to_address=to,
                amount=TokenAmount(raw=quantity, decimals=0),
                token=TokenMetadata(address=token, decimals=0),
                token_id=tid,
            )
