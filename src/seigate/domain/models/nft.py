from pydantic import BaseModel

from seigate.domain.models.types import BigInt


class NftInfo(BaseModel):
    contract: str
    token_id: BigInt
    network: str
    name: str | None = None
    symbol: str | None = None
    token_uri: str | None = None
    owner: str | None = None
    standard: str = "ERC721"


class NftCollection(BaseModel):
    contract: str
    network: str
    name: str | None = None
    symbol: str | None = None
    total_supply: BigInt | None = None  # None when the contract has no totalSupply()


class NftBalance(BaseModel):
    contract: str
    owner: str
    network: str
    balance: BigInt
    token_id: BigInt | None = None  # Set for ERC1155


class NftOwnership(BaseModel):
    contract: str
    owner: str
    token_id: BigInt
    network: str
    is_owner: bool
