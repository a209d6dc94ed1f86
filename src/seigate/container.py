from dependency_injector import containers, providers

from seigate.config import Settings
from seigate.infra.chain.factory import ChainClientFactory
from seigate.infra.chain.registry import NetworkRegistry
from seigate.infra.http.rate_limited_client import RateLimitedClient
from seigate.infra.llm.client import LanguageModel
from seigate.infra.price.coingecko import CoinGeckoProvider
from seigate.mcp.server import build_mcp_server
from seigate.mcp.sessions import SessionRegistry
from seigate.services.assistant import AssistantService
from seigate.services.blocks import BlockService
from seigate.services.contracts import ContractService
from seigate.services.history import HistoryReconstructor
from seigate.services.network import NetworkService
from seigate.services.nfts import NftService
from seigate.services.tokens import TokenService
from seigate.services.transactions import TransactionService
from seigate.services.transfers import TransferService
from seigate.services.wallet import WalletService
from seigate.tools.dispatcher import ToolDispatcher


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["seigate.api.deps"])

    settings = providers.Singleton(Settings)

    network_registry = providers.Singleton(
        NetworkRegistry,
        default_network=settings.provided.default_network,
        default_rpc_url=settings.provided.default_rpc_url,
    )

    chain_clients = providers.Singleton(
        ChainClientFactory,
        registry=network_registry,
        failover=settings.provided.rpc_failover,
        timeout=settings.provided.rpc_timeout,
    )

    http_client = providers.Singleton(RateLimitedClient, rate_per_second=5.0, timeout=30.0)

    coingecko = providers.Singleton(
        CoinGeckoProvider,
        http_client=http_client,
        api_key=settings.provided.coingecko_api_key,
    )

    llm = providers.Singleton(
        LanguageModel,
        api_key=settings.provided.llm_api_key,
        base_url=settings.provided.llm_base_url,
        model=settings.provided.llm_model,
    )

    network_service = providers.Singleton(NetworkService, factory=chain_clients)
    block_service = providers.Singleton(BlockService, factory=chain_clients)
    token_service = providers.Singleton(TokenService, factory=chain_clients)
    nft_service = providers.Singleton(NftService, factory=chain_clients)
    transaction_service = providers.Singleton(TransactionService, factory=chain_clients)
    contract_service = providers.Singleton(
        ContractService,
        factory=chain_clients,
        private_key=settings.provided.private_key,
    )
    history = providers.Singleton(
        HistoryReconstructor,
        factory=chain_clients,
        scan_window=settings.provided.history_scan_window,
    )
    wallet_service = providers.Singleton(
        WalletService,
        tokens=token_service,
        history=history,
        private_key=settings.provided.private_key,
    )
    transfer_service = providers.Singleton(
        TransferService,
        factory=chain_clients,
        private_key=settings.provided.private_key,
    )

    dispatcher = providers.Singleton(
        ToolDispatcher,
        network=network_service,
        blocks=block_service,
        tokens=token_service,
        nfts=nft_service,
        transactions=transaction_service,
        contracts=contract_service,
        history=history,
        wallet=wallet_service,
        transfers=transfer_service,
        market=coingecko,
    )

    assistant = providers.Singleton(
        AssistantService,
        llm=llm,
        dispatcher=dispatcher,
        allow_writes=settings.provided.assistant_allow_writes,
    )

    sessions = providers.Singleton(SessionRegistry)

    mcp_server = providers.Singleton(build_mcp_server, dispatcher=dispatcher)
