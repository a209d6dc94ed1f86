"""Deep conversion of node payloads into JSON-safe structures."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel


def to_hex(value: Any) -> str:
    """HexBytes / bytes -> "0x..." string; strings pass through."""
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if value is None:
        return ""
    return str(value)


def serialize(obj: Any) -> Any:
    """Recursively stringify integers and hex-encode bytes at every nesting depth.

    Booleans stay booleans; mappings (including web3 ``AttributeDict``) become dicts.
    Pydantic models are dumped with their own JSON serializers.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, bool) or obj is None:
        return obj
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, (bytes, bytearray)):
        return to_hex(obj)
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Mapping):
        return {str(k): serialize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [serialize(v) for v in obj]
    return obj
