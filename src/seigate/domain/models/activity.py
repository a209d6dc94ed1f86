"""Reconstructed views over recent chain history."""

from datetime import datetime

from pydantic import BaseModel, computed_field

from seigate.domain.enums import TxStatus, TxType
from seigate.domain.models.types import BigInt


class TransactionRecord(BaseModel):
    """One on-chain transaction as seen by the block scanner."""

    hash: str
    from_address: str
    to_address: str | None  # None = contract creation
    value: BigInt
    gas_used: BigInt
    gas_price: BigInt
    block_number: int
    timestamp: datetime
    status: TxStatus
    type: TxType

    @property
    def fee_wei(self) -> int:
        return self.gas_used * self.gas_price

    @computed_field  # type: ignore[prop-decorator]
    @property
    def fee(self) -> str:
        return str(self.fee_wei)


class TransactionHistory(BaseModel):
    """Bounded list of matches from the scanned window.

    An empty list only means nothing matched inside the window, not that the
    address never transacted.
    """

    address: str
    network: str
    transactions: list[TransactionRecord]
    blocks_scanned: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_count(self) -> int:
        return len(self.transactions)


class RecentTransaction(BaseModel):
    hash: str
    type: TxType
    amount: str  # Value in wei
    timestamp: datetime


class WalletActivitySummary(BaseModel):
    address: str
    network: str
    transaction_count: int  # Chain nonce: exact
    last_activity: datetime | None = None
    last_activity_estimated: bool = False  # True when derived heuristically, not observed
    recent_transactions: list[RecentTransaction] = []


class WalletAnalysis(BaseModel):
    address: str
    network: str
    balance: dict[str, str]
    transaction_count: int
    last_activity: datetime | None = None
    last_activity_estimated: bool = False
    risk_score: float
    recent_transactions: list[RecentTransaction] = []
    data_source: str = "real_blockchain_data"
