"""Gas fee calculation utilities."""

from collections.abc import Mapping


def _as_int(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, str):
        return int(value, 16) if value.startswith("0x") else int(value)
    return int(value)  # type: ignore[arg-type]


def calculate_fee_wei(gas_used: object, gas_price: object) -> int:
    """gasUsed x gasPrice, exact integer arithmetic. Accepts ints, decimal or hex strings."""
    return _as_int(gas_used) * _as_int(gas_price)


def receipt_fee_wei(receipt: Mapping) -> int:
    """Fee paid by a mined transaction.

    Prefers ``effectiveGasPrice`` (EIP-1559 receipts) and falls back to ``gasPrice``.
    """
    gas_price = receipt.get("effectiveGasPrice")
    if gas_price is None:
        gas_price = receipt.get("gasPrice", 0)
    return calculate_fee_wei(receipt.get("gasUsed", 0), gas_price)

