from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest

from seigate.exceptions import InvalidKeyError
from seigate.infra.chain.registry import DESCRIPTORS, SEI_TESTNET_CHAIN_ID, NetworkRegistry

TEST_SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"  # Anvil account #0

CHAIN_METHODS = (
    "get_chain_id",
    "get_block_number",
    "get_block",
    "get_balance",
    "get_transaction",
    "get_transaction_receipt",
    "get_transaction_count",
    "estimate_gas",
    "get_code",
    "call_function",
    "send_function",
    "send_value",
    "aclose",
)


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def chain_client():
    """ChainClient stand-in bound to sei-testnet; every RPC method is an AsyncMock."""
    descriptor = DESCRIPTORS[SEI_TESTNET_CHAIN_ID]
    client = MagicMock()
    client.descriptor = descriptor
    client.chain_id = descriptor.chain_id
    client.endpoint = descriptor.primary_rpc_url
    client.address = TEST_SIGNER
    for name in CHAIN_METHODS:
        setattr(client, name, AsyncMock())
    return client


@pytest.fixture()
def factory(chain_client):
    """ChainClientFactory stand-in handing out ``chain_client`` for reads and signing."""
    mock = MagicMock()
    mock.registry = NetworkRegistry()
    mock.public_client.return_value = chain_client

    @asynccontextmanager
    async def signing_client(private_key, network=None):
        if not private_key:
            raise InvalidKeyError("No signing key configured (set PRIVATE_KEY)")
        yield chain_client

    mock.signing_client = signing_client
    return mock
