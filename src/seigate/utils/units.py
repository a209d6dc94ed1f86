"""Integer <-> decimal-string conversion for token amounts.

Amounts are never routed through float: the raw integer (smallest unit) is the
source of truth and the formatted string is derived from it.
"""

import re

from seigate.exceptions import ValidationError

NATIVE_DECIMALS = 18

_AMOUNT_RE = re.compile(r"^\d+(\.\d+)?$")


def format_units(raw: int, decimals: int) -> str:
    """Render ``raw / 10**decimals`` without trailing zeros ("0", "1.5", "0.000001")."""
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    negative = raw < 0
    digits = str(abs(raw))
    if decimals == 0:
        formatted = digits
    else:
        digits = digits.rjust(decimals + 1, "0")
        whole, fraction = digits[:-decimals], digits[-decimals:].rstrip("0")
        formatted = f"{whole}.{fraction}" if fraction else whole
    return f"-{formatted}" if negative else formatted


def parse_units(amount: str, decimals: int) -> int:
    """Parse a human amount ("10", "0.25") into the smallest unit.

    Rejects signs, exponents and more fractional digits than ``decimals`` allows.
    """
    text = str(amount).strip()
    if not _AMOUNT_RE.match(text):
        raise ValidationError(f"Invalid amount: {amount!r}")
    whole, _, fraction = text.partition(".")
    if len(fraction) > decimals:
        raise ValidationError(f"Amount {amount} has more than {decimals} decimal places")
    return int(whole) * 10**decimals + int(fraction.ljust(decimals, "0") or "0")


def format_ether(wei: int) -> str:
    return format_units(wei, NATIVE_DECIMALS)


def parse_ether(amount: str) -> int:
    return parse_units(amount, NATIVE_DECIMALS)


def parse_token_id(token_id: str | int) -> int:
    """Token ids arrive as decimal strings (they routinely exceed 2**53)."""
    if isinstance(token_id, bool):
        raise ValidationError(f"tokenId must be a valid integer string, got {token_id!r}")
    if isinstance(token_id, int):
        value = token_id
    else:
        text = str(token_id).strip()
        try:
            value = int(text, 16) if text.lower().startswith("0x") else int(text)
        except ValueError:
            raise ValidationError(f"tokenId must be a valid integer string, got {token_id!r}") from None
    if value < 0:
        raise ValidationError(f"tokenId must be non-negative, got {token_id!r}")
    return value
