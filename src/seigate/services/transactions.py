"""Single-transaction reads and gas estimation."""

from typing import Any

from seigate.exceptions import ValidationError
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.utils.addresses import to_evm_address, validate_hash
from seigate.utils.fees import receipt_fee_wei
from seigate.utils.serialization import serialize
from seigate.utils.units import format_ether, parse_ether


class TransactionService:
    def __init__(self, factory: ChainClientFactory) -> None:
        self._factory = factory

    async def get_transaction(self, tx_hash: str, network: NetworkIdentifier | None = None) -> dict[str, Any]:
        validate_hash(tx_hash)
        tx = await self._factory.public_client(network).get_transaction(tx_hash)
        return serialize(tx)

    async def get_transaction_receipt(self, tx_hash: str, network: NetworkIdentifier | None = None) -> dict[str, Any]:
        """Receipt plus the fee actually paid (``fee`` in wei, ``fee_formatted`` in SEI)."""
        validate_hash(tx_hash)
        receipt = await self._factory.public_client(network).get_transaction_receipt(tx_hash)
        fee = receipt_fee_wei(receipt)
        result = serialize(receipt)
        result["fee"] = str(fee)
        result["fee_formatted"] = format_ether(fee)
        return result

    async def get_transaction_count(self, address: str, network: NetworkIdentifier | None = None) -> int:
        return await self._factory.public_client(network).get_transaction_count(to_evm_address(address))

    async def estimate_gas(
        self,
        to: str,
        value: str | None = None,
        data: str | None = None,
        network: NetworkIdentifier | None = None,
    ) -> int:
        """Gas units for a call to ``to``. ``value`` is in SEI, ``data`` is 0x-prefixed call data."""
        tx: dict[str, Any] = {"to": to_evm_address(to)}
        if value:
            tx["value"] = parse_ether(value)
        if data:
            if not data.startswith("0x"):
                raise ValidationError(f"Call data must be 0x-prefixed hex: {data}")
            tx["data"] = data
        return await self._factory.public_client(network).estimate_gas(tx)
