"""Maps tool names to service calls and returns JSON-safe results."""

import inspect
import logging
from collections.abc import Callable
from typing import Any

import pydantic

from seigate.exceptions import ValidationError
from seigate.infra.price.coingecko import CoinGeckoProvider
from seigate.services.blocks import BlockService
from seigate.services.contracts import ContractService
from seigate.services.history import HistoryReconstructor
from seigate.services.network import NetworkService
from seigate.services.nfts import NftService
from seigate.services.tokens import TokenService
from seigate.services.transactions import TransactionService
from seigate.services.transfers import TransferService
from seigate.services.wallet import WalletService
from seigate.tools.catalog import TOOLS_BY_NAME, ToolArgs
from seigate.utils.serialization import serialize

logger = logging.getLogger(__name__)

HISTORY_MAX_LIMIT = 50

Handler = Callable[[Any], Any]


def clamp_limit(limit: int, maximum: int = HISTORY_MAX_LIMIT) -> int:
    return max(1, min(limit, maximum))


def _describe(exc: pydantic.ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error["loc"]) or "arguments"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class ToolDispatcher:
    def __init__(
        self,
        network: NetworkService,
        blocks: BlockService,
        tokens: TokenService,
        nfts: NftService,
        transactions: TransactionService,
        contracts: ContractService,
        history: HistoryReconstructor,
        wallet: WalletService,
        transfers: TransferService,
        market: CoinGeckoProvider,
    ) -> None:
        self._network = network
        self._nfts = nfts
        self._transactions = transactions
        self._contracts = contracts
        self._handlers: dict[str, Handler] = {
            "get_chain_info": lambda a: network.get_chain_info(a.network),
            "get_supported_networks": lambda a: {"networks": network.get_supported_networks()},
            "get_network_status": lambda a: network.get_network_status(a.network),
            "get_chain_id": self._get_chain_id,
            "get_block_number": self._get_block_number,
            "get_block_by_number": lambda a: blocks.get_block_by_number(a.block_number, a.network),
            "get_block_by_hash": lambda a: blocks.get_block_by_hash(a.block_hash, a.network),
            "get_latest_block": lambda a: blocks.get_latest_block(a.network),
            "get_balance": lambda a: tokens.get_balance(a.address, a.network),
            "get_erc20_balance": lambda a: tokens.get_erc20_balance(a.token_address, a.owner_address, a.network),
            "get_erc20_token_info": lambda a: tokens.get_token_info(a.token_address, a.network),
            "get_nft_info": lambda a: nfts.get_nft_info(a.token_address, a.token_id, a.network),
            "is_nft_owner": lambda a: nfts.is_nft_owner(a.token_address, a.owner_address, a.token_id, a.network),
            "get_erc721_balance": lambda a: nfts.get_erc721_balance(a.token_address, a.owner_address, a.network),
            "get_erc1155_token_uri": self._get_erc1155_token_uri,
            "get_erc1155_balance": lambda a: nfts.get_erc1155_balance(a.token_address, a.owner_address, a.token_id, a.network),
            "get_nft_collection": lambda a: nfts.get_nft_collection(a.token_address, a.network),
            "get_transaction": lambda a: transactions.get_transaction(a.tx_hash, a.network),
            "get_transaction_receipt": lambda a: transactions.get_transaction_receipt(a.tx_hash, a.network),
            "get_transaction_count": self._get_transaction_count,
            "estimate_gas": self._estimate_gas,
            "read_contract": self._read_contract,
            "is_contract": self._is_contract,
            "get_transaction_history": lambda a: history.get_transaction_history(a.address, a.network, clamp_limit(a.limit)),
            "get_wallet_activity": lambda a: history.get_wallet_activity(a.address, a.network),
            "analyze_wallet": lambda a: wallet.analyze_wallet(a.address, a.network),
            "get_signer_address": lambda a: {"address": wallet.get_signer_address()},
            "get_market_data": lambda a: market.get_market_data(),
            "get_token_price": lambda a: market.get_token_price(a.symbol),
            "transfer_sei": lambda a: transfers.transfer_sei(a.to_address, a.amount, a.network),
            "transfer_erc20": lambda a: transfers.transfer_erc20(a.token_address, a.to_address, a.amount, a.network),
            "approve_erc20": lambda a: transfers.approve_erc20(a.token_address, a.spender_address, a.amount, a.network),
            "transfer_erc721": lambda a: transfers.transfer_erc721(a.token_address, a.to_address, a.token_id, a.network),
            "transfer_erc1155": lambda a: transfers.transfer_erc1155(
                a.token_address, a.to_address, a.token_id, a.amount, a.network
            ),
            "write_contract": self._write_contract,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def _network_name(self, args: ToolArgs) -> str:
        return self._network.registry.get_descriptor(getattr(args, "network", None)).name

    async def _get_chain_id(self, args: Any) -> dict[str, Any]:
        return {"network": self._network_name(args), "chain_id": await self._network.get_chain_id(args.network)}

    async def _get_block_number(self, args: Any) -> dict[str, Any]:
        return {"network": self._network_name(args), "block_number": await self._network.get_block_number(args.network)}

    async def _get_erc1155_token_uri(self, args: Any) -> dict[str, Any]:
        uri = await self._nfts.get_erc1155_token_uri(args.token_address, args.token_id, args.network)
        return {"contract": args.token_address, "token_id": args.token_id, "uri": uri}

    async def _get_transaction_count(self, args: Any) -> dict[str, Any]:
        count = await self._transactions.get_transaction_count(args.address, args.network)
        return {"address": args.address, "network": self._network_name(args), "transaction_count": count}

    async def _estimate_gas(self, args: Any) -> dict[str, Any]:
        gas = await self._transactions.estimate_gas(args.to, args.value, args.data, args.network)
        return {"network": self._network_name(args), "gas": gas}

    async def _read_contract(self, args: Any) -> dict[str, Any]:
        result = await self._contracts.read_contract(
            args.contract_address, args.abi, args.function_name, args.args, args.network
        )
        return {"contract": args.contract_address, "function_name": args.function_name, "result": result}

    async def _is_contract(self, args: Any) -> dict[str, Any]:
        is_contract = await self._contracts.is_contract(args.address, args.network)
        return {"address": args.address, "network": self._network_name(args), "is_contract": is_contract}

    async def _write_contract(self, args: Any) -> dict[str, Any]:
        tx_hash = await self._contracts.write_contract(
            args.contract_address, args.abi, args.function_name, args.args, args.value, args.network
        )
        return {"contract": args.contract_address, "function_name": args.function_name, "tx_hash": tx_hash}

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """Validate ``arguments`` against the tool's schema, run it and return a JSON-safe result."""
        spec = TOOLS_BY_NAME.get(name)
        handler = self._handlers.get(name)
        if spec is None or handler is None:
            raise ValidationError(f"Unknown function: {name}")
        try:
            args = spec.args_model.model_validate(arguments or {})
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid arguments for {name}: {_describe(exc)}") from None

        logger.debug("Dispatching %s", name)
        result = handler(args)
        if inspect.isawaitable(result):
            result = await result
        return serialize(result)
