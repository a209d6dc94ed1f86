"""Network registry: logical network names / chain ids -> endpoint pools."""

import logging

from seigate.domain.enums import Network
from seigate.domain.models import NetworkDescriptor
from seigate.exceptions import UnsupportedNetworkError

logger = logging.getLogger(__name__)

SEI_MAINNET_CHAIN_ID = 1329
SEI_TESTNET_CHAIN_ID = 1328
SEI_DEVNET_CHAIN_ID = 713_715

# Ordered pools: index 0 is the primary endpoint, the rest are failover candidates
SEI_RPC_ENDPOINTS: dict[int, tuple[str, ...]] = {
    SEI_MAINNET_CHAIN_ID: (
        "https://evm-rpc.sei-apis.com",
        "https://sei-evm-rpc.stakeme.pro",
        "https://node.histori.xyz/sei-mainnet/8ry9f6t9dct1se2hlagxnd9n2a",
        "https://sei.drpc.org",
    ),
    SEI_TESTNET_CHAIN_ID: ("https://evm-rpc-testnet.sei-apis.com",),
    SEI_DEVNET_CHAIN_ID: ("https://evm-rpc-arctic-1.sei-apis.com",),
}

SEI_WS_ENDPOINTS: dict[int, tuple[str, ...]] = {
    SEI_MAINNET_CHAIN_ID: ("wss://evm-ws.sei-apis.com", "wss://sei.drpc.org"),
    SEI_TESTNET_CHAIN_ID: ("wss://evm-ws-testnet.sei-apis.com",),
    SEI_DEVNET_CHAIN_ID: ("wss://evm-ws-arctic-1.sei-apis.com",),
}

DESCRIPTORS: dict[int, NetworkDescriptor] = {
    SEI_MAINNET_CHAIN_ID: NetworkDescriptor(
        name=Network.SEI.value,
        chain_id=SEI_MAINNET_CHAIN_ID,
        cosmos_chain_id="pacific-1",
        rpc_urls=SEI_RPC_ENDPOINTS[SEI_MAINNET_CHAIN_ID],
        ws_urls=SEI_WS_ENDPOINTS[SEI_MAINNET_CHAIN_ID],
    ),
    SEI_TESTNET_CHAIN_ID: NetworkDescriptor(
        name=Network.SEI_TESTNET.value,
        chain_id=SEI_TESTNET_CHAIN_ID,
        cosmos_chain_id="atlantic-2",
        rpc_urls=SEI_RPC_ENDPOINTS[SEI_TESTNET_CHAIN_ID],
        ws_urls=SEI_WS_ENDPOINTS[SEI_TESTNET_CHAIN_ID],
        testnet=True,
    ),
    SEI_DEVNET_CHAIN_ID: NetworkDescriptor(
        name=Network.SEI_DEVNET.value,
        chain_id=SEI_DEVNET_CHAIN_ID,
        cosmos_chain_id="arctic-1",
        rpc_urls=SEI_RPC_ENDPOINTS[SEI_DEVNET_CHAIN_ID],
        ws_urls=SEI_WS_ENDPOINTS[SEI_DEVNET_CHAIN_ID],
        testnet=True,
    ),
}

# Lower-case alias -> chain id. Hyphenated aliases are never listed publicly.
NETWORK_ALIASES: dict[str, int] = {
    "sei": SEI_MAINNET_CHAIN_ID,
    "sei-testnet": SEI_TESTNET_CHAIN_ID,
    "sei-devnet": SEI_DEVNET_CHAIN_ID,
    "pacific-1": SEI_MAINNET_CHAIN_ID,
    "atlantic-2": SEI_TESTNET_CHAIN_ID,
    "arctic-1": SEI_DEVNET_CHAIN_ID,
}

NetworkIdentifier = int | str


class NetworkRegistry:
    """Resolves network identifiers to descriptors and endpoint pools.

    Two resolution policies coexist on purpose:

    * :meth:`resolve_chain_id` never fails. Unknown names fall back to the
      default network's chain id. Used for URL lookups.
    * :meth:`get_descriptor` raises :class:`UnsupportedNetworkError` for an
      unknown name. Used whenever a client is built, so a typo in a request
      surfaces as an error instead of silently querying another chain.
    """

    def __init__(self, default_network: str = Network.SEI_TESTNET.value, default_rpc_url: str = "") -> None:
        key = default_network.lower()
        if key not in NETWORK_ALIASES:
            raise UnsupportedNetworkError(f"Unsupported default network: {default_network}")
        self._default_network = key
        self._default_chain_id = NETWORK_ALIASES[key]
        self._default_rpc_url = default_rpc_url or DESCRIPTORS[self._default_chain_id].primary_rpc_url

    @property
    def default_network(self) -> str:
        return self._default_network

    @property
    def default_chain_id(self) -> int:
        return self._default_chain_id

    def resolve_chain_id(self, identifier: NetworkIdentifier | None = None) -> int:
        """Alias (case-insensitive) or numeric id -> chain id; unknown names -> default chain id."""
        if identifier is None:
            return self._default_chain_id
        if isinstance(identifier, int):
            return identifier

        name = identifier.strip().lower()
        if name in NETWORK_ALIASES:
            return NETWORK_ALIASES[name]
        try:
            return int(name)
        except ValueError:
            logger.debug("Unknown network %r, falling back to chain %d", identifier, self._default_chain_id)
            return self._default_chain_id

    def get_descriptor(self, identifier: NetworkIdentifier | None = None) -> NetworkDescriptor:
        """Descriptor for a network; unknown names raise, unknown numeric ids map to mainnet."""
        if identifier is None:
            return DESCRIPTORS[self._default_chain_id]
        if isinstance(identifier, str):
            name = identifier.strip().lower()
            if name in NETWORK_ALIASES:
                return DESCRIPTORS[NETWORK_ALIASES[name]]
            if not name.isdigit():
                raise UnsupportedNetworkError(f"Unsupported network: {identifier}")
            identifier = int(name)
        return DESCRIPTORS.get(identifier, DESCRIPTORS[SEI_MAINNET_CHAIN_ID])

    def get_rpc_url(self, identifier: NetworkIdentifier | None = None) -> str:
        pool = SEI_RPC_ENDPOINTS.get(self.resolve_chain_id(identifier))
        return pool[0] if pool else self._default_rpc_url

    def get_rpc_url_pool(self, identifier: NetworkIdentifier | None = None) -> list[str]:
        pool = SEI_RPC_ENDPOINTS.get(self.resolve_chain_id(identifier))
        return list(pool) if pool else [self._default_rpc_url]

    def get_ws_url(self, identifier: NetworkIdentifier | None = None) -> str:
        return self.get_ws_url_pool(identifier)[0]

    def get_ws_url_pool(self, identifier: NetworkIdentifier | None = None) -> list[str]:
        chain_id = self.resolve_chain_id(identifier)
        return list(SEI_WS_ENDPOINTS.get(chain_id, SEI_WS_ENDPOINTS[SEI_MAINNET_CHAIN_ID]))

    @staticmethod
    def get_supported_networks() -> list[str]:
        """Public network names. Hyphenated aliases (sei-testnet, pacific-1, ...) are excluded."""
        return [name for name in NETWORK_ALIASES if "-" not in name]
