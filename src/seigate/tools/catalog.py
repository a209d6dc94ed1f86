"""Tool descriptions shared by the MCP server and the natural-language gateway.

Each tool's parameters are a pydantic model; its JSON schema is what clients see
and ``model_validate`` is how incoming arguments are checked.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NETWORK_HELP = "Network name or chain id (sei, sei-testnet, sei-devnet, 1329, ...). Defaults to the server's network."


class ToolArgs(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)


class NetworkArgs(ToolArgs):
    network: str | None = Field(None, description=NETWORK_HELP)


class AddressArgs(NetworkArgs):
    address: str = Field(description="Wallet or contract address (0x...)")


class HistoryArgs(AddressArgs):
    limit: int = Field(10, description="Maximum number of transactions to return (1-50)")


class BlockNumberArgs(NetworkArgs):
    block_number: str = Field(description="Block number as a decimal string")


class BlockHashArgs(NetworkArgs):
    block_hash: str = Field(description="Block hash (0x + 64 hex characters)")


class TxHashArgs(NetworkArgs):
    tx_hash: str = Field(description="Transaction hash (0x + 64 hex characters)")


class EstimateGasArgs(NetworkArgs):
    to: str = Field(description="Recipient or contract address")
    value: str | None = Field(None, description="Amount of SEI to send, e.g. '0.1'")
    data: str | None = Field(None, description="0x-prefixed call data")


class TokenArgs(NetworkArgs):
    token_address: str = Field(description="Token contract address")


class TokenOwnerArgs(TokenArgs):
    owner_address: str = Field(description="Holder's wallet address")


class TokenIdArgs(TokenArgs):
    token_id: str = Field(description="Token id as a decimal string")


class TokenOwnerIdArgs(TokenOwnerArgs):
    token_id: str = Field(description="Token id as a decimal string")


class ReadContractArgs(NetworkArgs):
    contract_address: str = Field(description="Contract address")
    abi: str = Field(description="Contract ABI as a JSON string (the function fragment is enough)")
    function_name: str = Field(description="Function to call")
    args: list[Any] = Field(default_factory=list, description="Function arguments in order")


class WriteContractArgs(ReadContractArgs):
    value: str | None = Field(None, description="Amount of SEI to send with the call")


class TransferSeiArgs(NetworkArgs):
    to_address: str = Field(description="Recipient address")
    amount: str = Field(description="Amount of SEI, e.g. '1.5'")


class TransferErc20Args(TokenArgs):
    to_address: str = Field(description="Recipient address")
    amount: str = Field(description="Token amount in whole units, e.g. '10.25'")


class ApproveErc20Args(TokenArgs):
    spender_address: str = Field(description="Address allowed to spend the tokens")
    amount: str = Field(description="Allowance in whole token units")


class TransferErc721Args(TokenArgs):
    to_address: str = Field(description="Recipient address")
    token_id: str = Field(description="Token id as a decimal string")


class TransferErc1155Args(TransferErc721Args):
    amount: str = Field(description="Number of tokens to transfer")


class TokenPriceArgs(ToolArgs):
    symbol: str = Field(description="Token symbol: SEI, WSEI, USDC, USDT, ETH, WETH, BTC or WBTC")


class NoArgs(ToolArgs):
    pass


def _simplify(schema: Any) -> Any:
    """Collapse ``Optional[X]`` to ``X`` and drop titles and null defaults."""
    if isinstance(schema, list):
        return [_simplify(item) for item in schema]
    if not isinstance(schema, dict):
        return schema
    any_of = schema.get("anyOf")
    if any_of:
        non_null = [s for s in any_of if s.get("type") != "null"]
        if len(non_null) == 1:
            schema = {**{k: v for k, v in schema.items() if k != "anyOf"}, **non_null[0]}
    if schema.get("type") == "array" and not schema.get("items"):
        schema = {**schema, "items": {"type": "string"}}
    return {
        key: _simplify(value)
        for key, value in schema.items()
        if not (key == "title" and isinstance(value, str)) and not (key == "default" and value is None)
    }


class ToolSpec(BaseModel):
    name: str
    description: str
    args_model: type[ToolArgs]
    read_only: bool = True

    @property
    def parameters(self) -> dict[str, Any]:
        schema = _simplify(self.args_model.model_json_schema(by_alias=True))
        schema.setdefault("properties", {})
        return schema

    def to_openai(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {"name": self.name, "description": self.description, "parameters": self.parameters},
        }


TOOLS: tuple[ToolSpec, ...] = (
    # Network
    ToolSpec(name="get_chain_info", description="Get chain id, current block number and RPC URL for a network.", args_model=NetworkArgs),
    ToolSpec(name="get_supported_networks", description="List the public network names this server supports.", args_model=NoArgs),
    ToolSpec(name="get_network_status", description="Get live status (block height, endpoint) of a network.", args_model=NetworkArgs),
    ToolSpec(name="get_chain_id", description="Get the chain id reported by the network's node.", args_model=NetworkArgs),
    ToolSpec(name="get_block_number", description="Get the latest block number.", args_model=NetworkArgs),
    # Blocks
    ToolSpec(name="get_block_by_number", description="Get a block by its number.", args_model=BlockNumberArgs),
    ToolSpec(name="get_block_by_hash", description="Get a block by its hash.", args_model=BlockHashArgs),
    ToolSpec(name="get_latest_block", description="Get the most recent block.", args_model=NetworkArgs),
    # Balances and tokens
    ToolSpec(name="get_balance", description="Get the native SEI balance of an address.", args_model=AddressArgs),
    ToolSpec(name="get_erc20_balance", description="Get an address's balance of an ERC20 token.", args_model=TokenOwnerArgs),
    ToolSpec(name="get_erc20_token_info", description="Get name, symbol, decimals and total supply of an ERC20 token.", args_model=TokenArgs),
    # NFTs
    ToolSpec(name="get_nft_info", description="Get name, symbol, token URI and owner of an ERC721 token.", args_model=TokenIdArgs),
    ToolSpec(name="is_nft_owner", description="Check whether an address owns a specific ERC721 token.", args_model=TokenOwnerIdArgs),
    ToolSpec(name="get_erc721_balance", description="Count the ERC721 tokens of a collection held by an address.", args_model=TokenOwnerArgs),
    ToolSpec(name="get_erc1155_token_uri", description="Get the metadata URI of an ERC1155 token id.", args_model=TokenIdArgs),
    ToolSpec(name="get_erc1155_balance", description="Get an address's balance of an ERC1155 token id.", args_model=TokenOwnerIdArgs),
    ToolSpec(name="get_nft_collection", description="Get name, symbol and total supply of an NFT collection.", args_model=TokenArgs),
    # Transactions
    ToolSpec(name="get_transaction", description="Get a transaction by hash.", args_model=TxHashArgs),
    ToolSpec(name="get_transaction_receipt", description="Get a transaction receipt (status, gas used, logs, fee).", args_model=TxHashArgs),
    ToolSpec(name="get_transaction_count", description="Get the number of transactions sent from an address (nonce).", args_model=AddressArgs),
    ToolSpec(name="estimate_gas", description="Estimate the gas a transaction would use.", args_model=EstimateGasArgs),
    # Contracts
    ToolSpec(name="read_contract", description="Call a read-only contract function.", args_model=ReadContractArgs),
    ToolSpec(name="is_contract", description="Check whether an address has deployed contract code.", args_model=AddressArgs),
    # Derived views
    ToolSpec(
        name="get_transaction_history",
        description="Get recent transactions for an address by scanning the latest blocks. "
        "An empty result only means nothing was found in the scanned window.",
        args_model=HistoryArgs,
    ),
    ToolSpec(name="get_wallet_activity", description="Summarize an address's transaction count and recent activity.", args_model=AddressArgs),
    ToolSpec(name="analyze_wallet", description="Analyze a wallet: balance, activity and a heuristic risk score.", args_model=AddressArgs),
    ToolSpec(name="get_signer_address", description="Get the address of the server's configured signing key.", args_model=NoArgs),
    # Market
    ToolSpec(name="get_market_data", description="Get SEI price, 24h change, volume and market cap.", args_model=NoArgs),
    ToolSpec(name="get_token_price", description="Get the USD price of a supported token.", args_model=TokenPriceArgs),
    # State-changing
    ToolSpec(name="transfer_sei", description="Send native SEI from the server's wallet.", args_model=TransferSeiArgs, read_only=False),
    ToolSpec(name="transfer_erc20", description="Send ERC20 tokens from the server's wallet.", args_model=TransferErc20Args, read_only=False),
    ToolSpec(name="approve_erc20", description="Approve a spender for ERC20 tokens held by the server's wallet.", args_model=ApproveErc20Args, read_only=False),
    ToolSpec(name="transfer_erc721", description="Transfer an ERC721 token from the server's wallet.", args_model=TransferErc721Args, read_only=False),
    ToolSpec(name="transfer_erc1155", description="Transfer ERC1155 tokens from the server's wallet.", args_model=TransferErc1155Args, read_only=False),
    ToolSpec(name="write_contract", description="Call a state-changing contract function from the server's wallet.", args_model=WriteContractArgs, read_only=False),
)

TOOLS_BY_NAME: dict[str, ToolSpec] = {tool.name: tool for tool in TOOLS}


def list_tools(include_writes: bool = True) -> list[ToolSpec]:
    return [tool for tool in TOOLS if include_writes or tool.read_only]
