from seigate.domain.enums.network import Network
from seigate.domain.enums.transaction import TxStatus, TxType

__all__ = [
    "Network",
    "TxStatus",
    "TxType",
]
