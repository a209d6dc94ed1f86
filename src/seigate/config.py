from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_network: str = "sei-testnet"
    default_rpc_url: str = "https://evm-rpc-testnet.sei-apis.com"
    private_key: str = ""
    rpc_failover: bool = False
    rpc_timeout: float = 30.0
    history_scan_window: int = 100  # Blocks scanned for history / activity views
    llm_api_key: str = ""
    llm_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    llm_model: str = "gemini-2.5-flash-lite"
    assistant_allow_writes: bool = False
    coingecko_api_key: str = ""
    host: str = "0.0.0.0"
    port: int = 3004
    log_level: str = "INFO"
    debug: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
