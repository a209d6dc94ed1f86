from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from mcp.server.lowlevel import Server

from seigate.container import Container
from seigate.infra.price.coingecko import CoinGeckoProvider
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


@inject
def get_network_service(service: NetworkService = Depends(Provide[Container.network_service])) -> NetworkService:
    return service


@inject
def get_block_service(service: BlockService = Depends(Provide[Container.block_service])) -> BlockService:
    return service


@inject
def get_token_service(service: TokenService = Depends(Provide[Container.token_service])) -> TokenService:
    return service


@inject
def get_nft_service(service: NftService = Depends(Provide[Container.nft_service])) -> NftService:
    return service


@inject
def get_transaction_service(
    service: TransactionService = Depends(Provide[Container.transaction_service]),
) -> TransactionService:
    return service


@inject
def get_contract_service(service: ContractService = Depends(Provide[Container.contract_service])) -> ContractService:
    return service


@inject
def get_history(service: HistoryReconstructor = Depends(Provide[Container.history])) -> HistoryReconstructor:
    return service


@inject
def get_wallet_service(service: WalletService = Depends(Provide[Container.wallet_service])) -> WalletService:
    return service


@inject
def get_transfer_service(service: TransferService = Depends(Provide[Container.transfer_service])) -> TransferService:
    return service


@inject
def get_market(provider: CoinGeckoProvider = Depends(Provide[Container.coingecko])) -> CoinGeckoProvider:
    return provider


@inject
def get_assistant(service: AssistantService = Depends(Provide[Container.assistant])) -> AssistantService:
    return service


@inject
def get_sessions(registry: SessionRegistry = Depends(Provide[Container.sessions])) -> SessionRegistry:
    return registry


@inject
def get_mcp_server(server: Server = Depends(Provide[Container.mcp_server])) -> Server:
    return server
