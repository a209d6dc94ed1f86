"""Async EVM JSON-RPC client bound to one network's endpoint pool."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import aiohttp
from eth_account.signers.local import LocalAccount
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import (
    BlockNotFound,
    MismatchedABI,
    TransactionNotFound,
    Web3Exception,
    Web3ValidationError,
)

from seigate.domain.models import NetworkDescriptor
from seigate.exceptions import (
    ChainDataNotFoundError,
    EndpointUnavailableError,
    InvalidKeyError,
    NodeCommunicationError,
    ValidationError,
)
from seigate.utils.serialization import to_hex

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChainClient:
    """Read (and optionally signing) client for one network.

    Only ``endpoints[0]`` is used unless ``failover`` is enabled, in which case a
    transport failure moves the same request to the next endpoint in the pool.
    Node-level errors (reverts, unknown hashes, insufficient funds) never fail over.
    """

    def __init__(
        self,
        descriptor: NetworkDescriptor,
        endpoints: list[str],
        account: LocalAccount | None = None,
        failover: bool = False,
        timeout: float = 30.0,
    ) -> None:
        if not endpoints:
            raise ValueError(f"No RPC endpoints for chain {descriptor.chain_id}")
        self._descriptor = descriptor
        self._endpoints = list(endpoints)
        self._account = account
        self._failover = failover
        self._timeout = timeout
        self._providers: dict[int, AsyncWeb3] = {}

    @property
    def descriptor(self) -> NetworkDescriptor:
        return self._descriptor

    @property
    def chain_id(self) -> int:
        return self._descriptor.chain_id

    @property
    def endpoint(self) -> str:
        return self._endpoints[0]

    @property
    def address(self) -> str | None:
        return self._account.address if self._account is not None else None

    def _web3(self, index: int) -> AsyncWeb3:
        if index not in self._providers:
            provider = AsyncHTTPProvider(
                self._endpoints[index],
                request_kwargs={"timeout": aiohttp.ClientTimeout(total=self._timeout)},
                exception_retry_configuration=None,
            )
            self._providers[index] = AsyncWeb3(provider)
        return self._providers[index]

    async def _request(self, label: str, call: Callable[[AsyncWeb3], Awaitable[T]]) -> T:
        attempts = len(self._endpoints) if self._failover else 1
        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            retry=retry_if_exception_type(EndpointUnavailableError),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                index = attempt.retry_state.attempt_number - 1
                endpoint = self._endpoints[index]
                try:
                    return await call(self._web3(index))
                except (aiohttp.ClientError, TimeoutError, OSError) as exc:
                    logger.warning("%s failed on %s: %s", label, endpoint, exc)
                    raise EndpointUnavailableError(f"{label} failed: endpoint {endpoint} unreachable ({exc})") from exc
                except (TransactionNotFound, BlockNotFound) as exc:
                    raise ChainDataNotFoundError(f"{label}: {exc}") from exc
                except (MismatchedABI, Web3ValidationError) as exc:
                    raise ValidationError(f"{label}: {exc}") from exc
                except (Web3Exception, ValueError, TypeError) as exc:
                    raise NodeCommunicationError(f"{label} failed: {exc}") from exc
        raise AssertionError("unreachable")  # AsyncRetrying re-raises the last error

    # -- reads ---------------------------------------------------------------

    async def get_chain_id(self) -> int:
        async def call(w3: AsyncWeb3) -> int:
            return await w3.eth.chain_id

        return await self._request("eth_chainId", call)

    async def get_block_number(self) -> int:
        async def call(w3: AsyncWeb3) -> int:
            return await w3.eth.block_number

        return await self._request("eth_blockNumber", call)

    async def get_block(self, block_identifier: int | str, full_transactions: bool = False) -> Any:
        async def call(w3: AsyncWeb3) -> Any:
            return await w3.eth.get_block(block_identifier, full_transactions=full_transactions)

        return await self._request(f"get block {block_identifier}", call)

    async def get_balance(self, address: str) -> int:
        async def call(w3: AsyncWeb3) -> int:
            return await w3.eth.get_balance(address)

        return await self._request(f"get balance of {address}", call)

    async def get_transaction(self, tx_hash: str) -> Any:
        async def call(w3: AsyncWeb3) -> Any:
            return await w3.eth.get_transaction(tx_hash)

        return await self._request(f"get transaction {tx_hash}", call)

    async def get_transaction_receipt(self, tx_hash: str) -> Any:
        async def call(w3: AsyncWeb3) -> Any:
            return await w3.eth.get_transaction_receipt(tx_hash)

        return await self._request(f"get receipt {tx_hash}", call)

    async def get_transaction_count(self, address: str) -> int:
        async def call(w3: AsyncWeb3) -> int:
            return await w3.eth.get_transaction_count(address)

        return await self._request(f"get transaction count of {address}", call)

    async def estimate_gas(self, tx: dict[str, Any]) -> int:
        async def call(w3: AsyncWeb3) -> int:
            return await w3.eth.estimate_gas(tx)

        return await self._request("estimate gas", call)

    async def get_code(self, address: str) -> bytes:
        async def call(w3: AsyncWeb3) -> bytes:
            return bytes(await w3.eth.get_code(address))

        return await self._request(f"get code at {address}", call)

    async def call_function(self, address: str, abi: list[dict], function_name: str, args: list[Any]) -> Any:
        async def call(w3: AsyncWeb3) -> Any:
            contract = w3.eth.contract(address=address, abi=abi)
            return await contract.functions[function_name](*args).call()

        return await self._request(f"call {function_name} on {address}", call)

    # -- writes --------------------------------------------------------------

    def _require_account(self) -> LocalAccount:
        if self._account is None:
            raise InvalidKeyError("This client has no signing key")
        return self._account

    async def _sign_and_send(self, w3: AsyncWeb3, tx: dict[str, Any]) -> str:
        signed = self._require_account().sign_transaction(tx)
        tx_hash = await w3.eth.send_raw_transaction(signed.raw_transaction)
        return to_hex(tx_hash)

    async def send_function(
        self,
        address: str,
        abi: list[dict],
        function_name: str,
        args: list[Any],
        value: int = 0,
    ) -> str:
        """Build, sign and submit a contract call. Returns the hash without waiting for inclusion."""
        account = self._require_account()

        async def call(w3: AsyncWeb3) -> str:
            contract = w3.eth.contract(address=address, abi=abi)
            nonce = await w3.eth.get_transaction_count(account.address, "pending")
            tx = await contract.functions[function_name](*args).build_transaction({
                "from": account.address,
                "nonce": nonce,
                "chainId": self.chain_id,
                "value": value,
            })
            return await self._sign_and_send(w3, tx)

        return await self._request(f"send {function_name} to {address}", call)

    async def send_value(self, to: str, value: int) -> str:
        """Native-currency transfer. Returns the transaction hash."""
        account = self._require_account()

        async def call(w3: AsyncWeb3) -> str:
            tx: dict[str, Any] = {
                "from": account.address,
                "to": to,
                "value": value,
                "nonce": await w3.eth.get_transaction_count(account.address, "pending"),
                "chainId": self.chain_id,
                "gasPrice": await w3.eth.gas_price,
            }
            tx["gas"] = await w3.eth.estimate_gas(tx)
            return await self._sign_and_send(w3, tx)

        return await self._request(f"send {value} wei to {to}", call)

    async def aclose(self) -> None:
        for w3 in self._providers.values():
            await w3.provider.disconnect()
        self._providers.clear()
