from seigate.domain.models.activity import (
    RecentTransaction,
    TransactionHistory,
    TransactionRecord,
    WalletActivitySummary,
    WalletAnalysis,
)
from seigate.domain.models.amounts import (
    Balance,
    TokenAmount,
    TokenBalance,
    TokenInfo,
    TokenMetadata,
    TransferResult,
)
from seigate.domain.models.chain import ChainInfo, NetworkStatus
from seigate.domain.models.market import MarketData, TokenPrice
from seigate.domain.models.network import NetworkDescriptor
from seigate.domain.models.nft import NftBalance, NftCollection, NftInfo, NftOwnership

__all__ = [
    "Balance",
    "ChainInfo",
    "MarketData",
    "NetworkDescriptor",
    "NetworkStatus",
    "NftBalance",
    "NftCollection",
    "NftInfo",
    "NftOwnership",
    "RecentTransaction",
    "TokenAmount",
    "TokenBalance",
    "TokenInfo",
    "TokenMetadata",
    "TokenPrice",
    "TransactionHistory",
    "TransactionRecord",
    "TransferResult",
    "WalletActivitySummary",
    "WalletAnalysis",
]
