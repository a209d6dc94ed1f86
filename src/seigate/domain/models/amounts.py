"""Quantities: raw integer amounts with derived human-readable forms."""

from pydantic import BaseModel, computed_field

from seigate.domain.models.types import BigInt
from seigate.utils.units import NATIVE_DECIMALS, format_units


class TokenAmount(BaseModel):
    """A token quantity. ``raw`` (smallest unit) is the source of truth."""

    raw: BigInt
    decimals: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def formatted(self) -> str:
        return format_units(self.raw, self.decimals)


class Balance(BaseModel):
    """Native-token holding snapshot for one address."""

    address: str
    network: str
    wei: BigInt
    symbol: str = "SEI"
    decimals: int = NATIVE_DECIMALS

    @computed_field  # type: ignore[prop-decorator]
    @property
    def formatted(self) -> str:
        return format_units(self.wei, self.decimals)


class TokenMetadata(BaseModel):
    address: str
    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None


class TokenInfo(TokenMetadata):
    total_supply: TokenAmount | None = None


class TokenBalance(TokenAmount):
    owner: str
    network: str
    token: TokenMetadata


class TransferResult(BaseModel):
    """Outcome of a submitted transfer/approve. Only the hash is known; inclusion is not awaited."""

    tx_hash: str
    network: str
    from_address: str
    to_address: str
    amount: TokenAmount | None = None
    token: TokenMetadata | None = None
    token_id: BigInt | None = None
