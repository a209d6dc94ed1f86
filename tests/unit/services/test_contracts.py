import json

import pytest

from seigate.exceptions import InvalidKeyError, NodeCommunicationError, ValidationError
from seigate.services.contracts import (
    ContractService,
    coerce_argument,
    find_function,
    parse_abi,
)

CONTRACT = "0x3894085Ef7Ff0f0aeDf52E2A2704928d1Ec074F1"
HOLDER = "0x000000000000000000000000000000000000dEaD"

BALANCE_OF = {
    "type": "function",
    "name": "balanceOf",
    "stateMutability": "view",
    "inputs": [{"name": "owner", "type": "address"}],
    "outputs": [{"name": "", "type": "uint256"}],
}
MINT = {
    "type": "function",
    "name": "mint",
    "stateMutability": "payable",
    "inputs": [{"name": "to", "type": "address"}, {"name": "ids", "type": "uint256[]"}],
    "outputs": [],
}


class TestParseAbi:
    def test_json_string(self):
        assert parse_abi(json.dumps([BALANCE_OF])) == [BALANCE_OF]

    def test_single_fragment(self):
        assert parse_abi(BALANCE_OF) == [BALANCE_OF]

    def test_malformed_json(self):
        with pytest.raises(ValidationError, match="Invalid ABI JSON"):
            parse_abi('[{"type": "function", "name": ')

    def test_wrong_shape(self):
        with pytest.raises(ValidationError):
            parse_abi("[1, 2]")


class TestFindFunction:
    def test_found(self):
        assert find_function([BALANCE_OF, MINT], "mint", 2) is MINT

    def test_missing(self):
        with pytest.raises(ValidationError, match="not found"):
            find_function([BALANCE_OF], "transfer")

    def test_wrong_arity(self):
        with pytest.raises(ValidationError, match="expects 1 arguments, got 2"):
            find_function([BALANCE_OF], "balanceOf", 2)


class TestCoerceArgument:
    def test_integers_from_strings(self):
        assert coerce_argument("uint256", "1000000000000000000000") == 10**21
        assert coerce_argument("int8", "0x10") == 16

    def test_integer_rejects_garbage(self):
        with pytest.raises(ValidationError):
            coerce_argument("uint256", "ten")
        with pytest.raises(ValidationError):
            coerce_argument("uint256", True)

    def test_address_checksummed(self):
        assert coerce_argument("address", HOLDER.lower()) == HOLDER

    def test_bool(self):
        assert coerce_argument("bool", "TRUE") is True
        assert coerce_argument("bool", False) is False
        with pytest.raises(ValidationError):
            coerce_argument("bool", "yes")

    def test_arrays(self):
        assert coerce_argument("uint256[]", ["1", 2]) == [1, 2]
        assert coerce_argument("uint256[2]", "[3, 4]") == [3, 4]

    def test_passthrough(self):
        assert coerce_argument("string", "hello") == "hello"


class TestContractService:
    async def test_read_contract(self, factory, chain_client):
        chain_client.call_function.return_value = 10**21

        result = await ContractService(factory).read_contract(
            CONTRACT, json.dumps([BALANCE_OF]), "balanceOf", [HOLDER.lower()]
        )

        assert result == str(10**21)
        address, abi, fn, args = chain_client.call_function.await_args.args
        assert address == CONTRACT
        assert fn == "balanceOf"
        assert args == [HOLDER]

    async def test_malformed_abi_is_validation_error(self, factory, chain_client):
        with pytest.raises(ValidationError) as excinfo:
            await ContractService(factory).read_contract(CONTRACT, "{not json", "balanceOf", [HOLDER])
        assert not isinstance(excinfo.value, NodeCommunicationError)
        chain_client.call_function.assert_not_awaited()

    async def test_write_contract(self, factory, chain_client):
        chain_client.send_function.return_value = "0x" + "ab" * 32
        service = ContractService(factory, private_key="0xkey")

        tx_hash = await service.write_contract(CONTRACT, [MINT], "mint", [HOLDER, ["1", "2"]], value="0.5")

        assert tx_hash == "0x" + "ab" * 32
        kwargs = chain_client.send_function.await_args.kwargs
        assert kwargs["value"] == 500_000_000_000_000_000
        assert chain_client.send_function.await_args.args[3] == [HOLDER, [1, 2]]

    async def test_write_requires_key(self, factory):
        with pytest.raises(InvalidKeyError):
            await ContractService(factory).write_contract(CONTRACT, [MINT], "mint", [HOLDER, []])

    async def test_is_contract(self, factory, chain_client):
        chain_client.get_code.return_value = b"\x60\x80"
        assert await ContractService(factory).is_contract(CONTRACT) is True
        chain_client.get_code.return_value = b""
        assert await ContractService(factory).is_contract(HOLDER) is False
