"""Arbitrary contract reads and writes driven by a caller-supplied ABI."""

import json
import logging
from typing import Any

from seigate.exceptions import ValidationError
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.utils.addresses import to_evm_address
from seigate.utils.serialization import serialize
from seigate.utils.units import parse_ether

logger = logging.getLogger(__name__)


def parse_abi(abi: str | list | dict) -> list[dict]:
    """Accept an ABI as a JSON string, a list of fragments or a single fragment."""
    if isinstance(abi, str):
        try:
            abi = json.loads(abi)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid ABI JSON: {exc.msg}") from None
    if isinstance(abi, dict):
        abi = [abi]
    if not isinstance(abi, list) or not all(isinstance(item, dict) for item in abi):
        raise ValidationError("ABI must be a list of JSON objects")
    return abi


def find_function(abi: list[dict], function_name: str, arg_count: int | None = None) -> dict:
    candidates = [
        item for item in abi
        if item.get("type", "function") == "function" and item.get("name") == function_name
    ]
    if not candidates:
        raise ValidationError(f"Function {function_name} not found in ABI")
    if arg_count is not None:
        for item in candidates:
            if len(item.get("inputs", [])) == arg_count:
                return item
        expected = len(candidates[0].get("inputs", []))
        raise ValidationError(f"{function_name} expects {expected} arguments, got {arg_count}")
    return candidates[0]


def coerce_argument(abi_type: str, value: Any) -> Any:
    """Convert JSON-friendly values (decimal strings, "true") into what the ABI encoder expects."""
    if abi_type.endswith("]"):
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                raise ValidationError(f"Expected a JSON array for {abi_type}, got {value!r}") from None
        if not isinstance(value, list):
            raise ValidationError(f"Expected an array for {abi_type}, got {value!r}")
        inner = abi_type[: abi_type.rindex("[")]
        return [coerce_argument(inner, item) for item in value]

    if abi_type.startswith(("uint", "int")):
        if isinstance(value, bool):
            raise ValidationError(f"Expected an integer for {abi_type}, got {value!r}")
        try:
            return int(value, 0) if isinstance(value, str) else int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Expected an integer for {abi_type}, got {value!r}") from None
    if abi_type == "address":
        return to_evm_address(value)
    if abi_type == "bool":
        if isinstance(value, str):
            if value.lower() not in ("true", "false"):
                raise ValidationError(f"Expected true/false for bool, got {value!r}")
            return value.lower() == "true"
        return bool(value)
    return value


def coerce_arguments(fragment: dict, args: list[Any]) -> list[Any]:
    inputs = fragment.get("inputs", [])
    return [coerce_argument(spec.get("type", ""), arg) for spec, arg in zip(inputs, args)]


class ContractService:
    def __init__(self, factory: ChainClientFactory, private_key: str = "") -> None:
        self._factory = factory
        self._private_key = private_key

    async def read_contract(
        self,
        contract_address: str,
        abi: str | list | dict,
        function_name: str,
        args: list[Any] | None = None,
        network: NetworkIdentifier | None = None,
    ) -> Any:
        """eth_call; the decoded result is returned as-is, made JSON-safe."""
        contract = to_evm_address(contract_address)
        fragments = parse_abi(abi)
        args = args or []
        fragment = find_function(fragments, function_name, len(args))
        result = await self._factory.public_client(network).call_function(
            contract, fragments, function_name, coerce_arguments(fragment, args)
        )
        return serialize(result)

    async def write_contract(
        self,
        contract_address: str,
        abi: str | list | dict,
        function_name: str,
        args: list[Any] | None = None,
        value: str | None = None,
        network: NetworkIdentifier | None = None,
    ) -> str:
        """Submit a state-changing call with the configured key. Returns the hash without waiting."""
        contract = to_evm_address(contract_address)
        fragments = parse_abi(abi)
        args = args or []
        fragment = find_function(fragments, function_name, len(args))
        value_wei = parse_ether(value) if value else 0
        async with self._factory.signing_client(self._private_key, network) as client:
            tx_hash = await client.send_function(
                contract, fragments, function_name, coerce_arguments(fragment, args), value=value_wei
            )
        logger.info("Submitted %s on %s: %s", function_name, contract, tx_hash)
        return tx_hash

    async def is_contract(self, address: str, network: NetworkIdentifier | None = None) -> bool:
        code = await self._factory.public_client(network).get_code(to_evm_address(address))
        return len(code) > 0
