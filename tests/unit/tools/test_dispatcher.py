from unittest.mock import AsyncMock, MagicMock

import pytest

from seigate.domain.models import Balance
from seigate.exceptions import ValidationError
from seigate.infra.chain.registry import NetworkRegistry
from seigate.tools.catalog import TOOLS_BY_NAME
from seigate.tools.dispatcher import HISTORY_MAX_LIMIT, ToolDispatcher, clamp_limit

ADDRESS = "0x000000000000000000000000000000000000dEaD"


def _service(*methods: str) -> MagicMock:
    service = MagicMock()
    for name in methods:
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture()
def services():
    network = _service("get_chain_info", "get_network_status", "get_chain_id", "get_block_number")
    network.registry = NetworkRegistry()
    network.get_supported_networks.return_value = ["sei"]
    return {
        "network": network,
        "blocks": _service("get_block_by_number", "get_block_by_hash", "get_latest_block"),
        "tokens": _service("get_balance", "get_erc20_balance", "get_token_info"),
        "nfts": _service("get_nft_info", "get_erc1155_token_uri"),
        "transactions": _service("get_transaction_count", "estimate_gas"),
        "contracts": _service("read_contract", "write_contract", "is_contract"),
        "history": _service("get_transaction_history", "get_wallet_activity"),
        "wallet": _service("analyze_wallet"),
        "transfers": _service("transfer_sei"),
        "market": _service("get_market_data", "get_token_price"),
    }


@pytest.fixture()
def dispatcher(services):
    return ToolDispatcher(**services)


class TestClampLimit:
    @pytest.mark.parametrize("limit,expected", [(0, 1), (-3, 1), (10, 10), (50, 50), (500, HISTORY_MAX_LIMIT)])
    def test_clamp(self, limit, expected):
        assert clamp_limit(limit) == expected


class TestDispatch:
    def test_every_tool_has_a_handler(self, dispatcher):
        assert set(dispatcher.tool_names) == set(TOOLS_BY_NAME)

    async def test_unknown_function(self, dispatcher):
        with pytest.raises(ValidationError, match="Unknown function: get_logs"):
            await dispatcher.dispatch("get_logs", {})

    async def test_missing_argument(self, dispatcher, services):
        with pytest.raises(ValidationError, match="Invalid arguments for get_balance"):
            await dispatcher.dispatch("get_balance", {})
        services["tokens"].get_balance.assert_not_awaited()

    async def test_result_is_serialized(self, dispatcher, services):
        services["tokens"].get_balance.return_value = Balance(address=ADDRESS, network="sei", wei=10**18)

        result = await dispatcher.dispatch("get_balance", {"address": ADDRESS, "network": "sei"})

        services["tokens"].get_balance.assert_awaited_once_with(ADDRESS, "sei")
        assert result["wei"] == str(10**18)
        assert result["formatted"] == "1"

    async def test_block_number_wrapper(self, dispatcher, services):
        services["network"].get_block_number.return_value = 123

        result = await dispatcher.dispatch("get_block_number", None)

        assert result == {"network": "sei-testnet", "block_number": "123"}

    async def test_camel_case_arguments(self, dispatcher, services):
        services["tokens"].get_erc20_balance.return_value = {}

        await dispatcher.dispatch("get_erc20_balance", {"tokenAddress": "0xT", "ownerAddress": ADDRESS})

        services["tokens"].get_erc20_balance.assert_awaited_once_with("0xT", ADDRESS, None)

    async def test_numeric_block_number_accepted(self, dispatcher, services):
        services["blocks"].get_block_by_number.return_value = {"number": "10"}
        await dispatcher.dispatch("get_block_by_number", {"blockNumber": 10})
        services["blocks"].get_block_by_number.assert_awaited_once_with("10", None)

    @pytest.mark.parametrize("limit,expected", [(None, 10), (500, 50), (0, 1), (25, 25)])
    async def test_history_limit_clamped(self, dispatcher, services, limit, expected):
        services["history"].get_transaction_history.return_value = {"transactions": []}
        arguments = {"address": ADDRESS}
        if limit is not None:
            arguments["limit"] = limit

        await dispatcher.dispatch("get_transaction_history", arguments)

        services["history"].get_transaction_history.assert_awaited_once_with(ADDRESS, None, expected)

    async def test_supported_networks(self, dispatcher):
        assert await dispatcher.dispatch("get_supported_networks") == {"networks": ["sei"]}

    async def test_estimate_gas(self, dispatcher, services):
        services["transactions"].estimate_gas.return_value = 21000
        result = await dispatcher.dispatch("estimate_gas", {"to": ADDRESS, "value": "0.1"})
        assert result == {"network": "sei-testnet", "gas": "21000"}
