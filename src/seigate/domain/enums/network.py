from enum import Enum


class Network(str, Enum):
    """Canonical network names. Values match the public aliases accepted by the registry."""

    SEI = "sei"
    SEI_TESTNET = "sei-testnet"
    SEI_DEVNET = "sei-devnet"
