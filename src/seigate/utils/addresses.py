"""Address validation. Two shapes are accepted: EVM hex and Sei bech32."""

import re

from eth_utils import to_checksum_address

from seigate.exceptions import InvalidAddressError, ValidationError

_EVM_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")
_BECH32_RE = re.compile(r"^sei1[0-9a-z]{38}$")
_HASH_RE = re.compile(r"^0x[a-fA-F0-9]{64}$")


def validate_address(address: str) -> str:
    """Return the address unchanged if it is a valid EVM or Sei bech32 address."""
    if isinstance(address, str) and (_EVM_RE.match(address) or _BECH32_RE.match(address)):
        return address
    raise InvalidAddressError(f"Invalid address: {address}")


def is_evm_address(address: str) -> bool:
    return isinstance(address, str) and bool(_EVM_RE.match(address))


def to_evm_address(address: str) -> str:
    """Validate and checksum an address for use in an EVM call.

    Bech32 addresses pass :func:`validate_address` but cannot be used against the EVM RPC.
    """
    validate_address(address)
    if not is_evm_address(address):
        raise InvalidAddressError(f"Address {address} is a Cosmos address; EVM queries need a 0x address")
    return to_checksum_address(address)


def validate_hash(value: str, what: str = "transaction hash") -> str:
    if isinstance(value, str) and _HASH_RE.match(value):
        return value
    raise ValidationError(f"Invalid {what}: {value}")
