from enum import Enum


class TxType(str, Enum):
    TRANSFER = "transfer"
    CONTRACT = "contract"
    SWAP = "swap"
    OTHER = "other"


class TxStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
