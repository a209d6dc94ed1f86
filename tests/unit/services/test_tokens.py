import pytest

from seigate.exceptions import InvalidAddressError, NodeCommunicationError
from seigate.services.tokens import TokenService

TOKEN = "0x3894085Ef7Ff0f0aeDf52E2A2704928d1Ec074F1"
OWNER = "0x000000000000000000000000000000000000dEaD"


def _contract(values: dict):
    """call_function side effect answering from ``values``; missing functions revert."""

    def call(address, abi, fn, args):
        if fn not in values:
            raise NodeCommunicationError(f"call {fn} on {address} failed: execution reverted")
        return values[fn]

    return call


class TestNativeBalance:
    async def test_zero_balance_is_not_an_error(self, factory, chain_client):
        chain_client.get_balance.return_value = 0

        balance = await TokenService(factory).get_balance(OWNER)

        assert balance.model_dump(mode="json")["wei"] == "0"
        assert balance.formatted == "0"
        assert balance.symbol == "SEI"
        assert balance.network == "sei-testnet"
        chain_client.get_balance.assert_awaited_once_with(OWNER)

    async def test_formatted(self, factory, chain_client):
        chain_client.get_balance.return_value = 1_500_000_000_000_000_000
        balance = await TokenService(factory).get_balance(OWNER.lower())
        assert balance.formatted == "1.5"

    async def test_invalid_address_fails_before_network(self, factory, chain_client):
        with pytest.raises(InvalidAddressError):
            await TokenService(factory).get_balance("0xnope")
        chain_client.get_balance.assert_not_awaited()
        factory.public_client.assert_not_called()


class TestErc20:
    async def test_token_info(self, factory, chain_client):
        chain_client.call_function.side_effect = _contract(
            {"name": "USD Coin", "symbol": "USDC", "decimals": 6, "totalSupply": 1_000_000_500_000}
        )

        info = await TokenService(factory).get_token_info(TOKEN)

        assert info.symbol == "USDC"
        assert info.decimals == 6
        assert info.total_supply.formatted == "1000000.5"

    async def test_name_and_symbol_optional(self, factory, chain_client):
        chain_client.call_function.side_effect = _contract({"decimals": 18})

        metadata = await TokenService(factory).get_token_metadata(TOKEN)

        assert metadata.name is None
        assert metadata.symbol is None
        assert metadata.decimals == 18

    async def test_decimals_required(self, factory, chain_client):
        chain_client.call_function.side_effect = _contract({"name": "Broken"})
        with pytest.raises(NodeCommunicationError):
            await TokenService(factory).get_token_metadata(TOKEN)

    async def test_balance(self, factory, chain_client):
        chain_client.call_function.side_effect = _contract(
            {"name": "USD Coin", "symbol": "USDC", "decimals": 6, "balanceOf": 2_500_000}
        )

        balance = await TokenService(factory).get_erc20_balance(TOKEN, OWNER)

        assert balance.raw == 2_500_000
        assert balance.formatted == "2.5"
        assert balance.owner == OWNER
        assert balance.token.symbol == "USDC"
