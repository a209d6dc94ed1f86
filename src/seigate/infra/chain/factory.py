"""Builds read and signing chain clients for a resolved network."""

import binascii
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from eth_account import Account
from eth_account.signers.local import LocalAccount

from seigate.exceptions import InvalidKeyError
from seigate.infra.chain.client import ChainClient
from seigate.infra.chain.registry import NetworkIdentifier, NetworkRegistry

logger = logging.getLogger(__name__)


def load_account(private_key: str) -> LocalAccount:
    """Parse a hex private key (``0x`` prefix optional). Pure, no network access."""
    if not isinstance(private_key, str) or not private_key.strip():
        raise InvalidKeyError("Private key is empty")
    key = private_key.strip()
    if not key.startswith("0x"):
        key = f"0x{key}"
    try:
        return Account.from_key(key)
    except (ValueError, TypeError, binascii.Error) as exc:
        raise InvalidKeyError(f"Invalid private key: {exc}") from None


def derive_address(private_key: str) -> str:
    return load_account(private_key).address


class ChainClientFactory:
    """Read clients are cached per chain id; signing clients are built per call."""

    def __init__(self, registry: NetworkRegistry, failover: bool = False, timeout: float = 30.0) -> None:
        self._registry = registry
        self._failover = failover
        self._timeout = timeout
        self._public: dict[int, ChainClient] = {}

    @property
    def registry(self) -> NetworkRegistry:
        return self._registry

    def _build(self, network: NetworkIdentifier | None, account: LocalAccount | None) -> ChainClient:
        descriptor = self._registry.get_descriptor(network)
        return ChainClient(
            descriptor,
            self._registry.get_rpc_url_pool(descriptor.chain_id),
            account=account,
            failover=self._failover,
            timeout=self._timeout,
        )

    def public_client(self, network: NetworkIdentifier | None = None) -> ChainClient:
        descriptor = self._registry.get_descriptor(network)
        client = self._public.get(descriptor.chain_id)
        if client is None:
            client = self._build(descriptor.chain_id, None)
            self._public[descriptor.chain_id] = client
            logger.debug("Created read client for chain %d at %s", descriptor.chain_id, client.endpoint)
        return client

    def wallet_client(self, private_key: str, network: NetworkIdentifier | None = None) -> ChainClient:
        return self._build(network, load_account(private_key))

    @asynccontextmanager
    async def signing_client(self, private_key: str, network: NetworkIdentifier | None = None) -> AsyncIterator[ChainClient]:
        """Per-call signing client, disconnected on exit."""
        if not private_key:
            raise InvalidKeyError("No signing key configured (set PRIVATE_KEY)")
        client = self.wallet_client(private_key, network)
        try:
            yield client
        finally:
            await client.aclose()

    async def aclose(self) -> None:
        for client in self._public.values():
            await client.aclose()
        self._public.clear()
