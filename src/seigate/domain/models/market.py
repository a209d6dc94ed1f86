"""Market data snapshots (USD)."""

from datetime import datetime

from pydantic import BaseModel


class TokenPrice(BaseModel):
    symbol: str
    coin_id: str
    price_usd: float
    change_24h: float | None = None
    volume_24h: float | None = None
    market_cap: float | None = None


class MarketData(BaseModel):
    symbol: str = "SEI"
    price_usd: float
    change_24h: float | None = None
    volume_24h: float | None = None
    market_cap: float | None = None
    circulating_supply: float | None = None
    last_updated: datetime | None = None
    source: str = "coingecko"
