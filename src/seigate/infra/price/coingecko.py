"""CoinGecko market data for SEI and a few majors traded on Sei."""

import asyncio
import logging
from datetime import datetime

import httpx

from seigate.domain.models import MarketData, TokenPrice
from seigate.exceptions import ExternalServiceError, ValidationError
from seigate.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)

SEI_COINGECKO_ID = "sei-network"

SYMBOL_TO_COINGECKO: dict[str, str] = {
    "SEI": SEI_COINGECKO_ID,
    "WSEI": SEI_COINGECKO_ID,
    "USDC": "usd-coin",
    "USDT": "tether",
    "ETH": "ethereum",
    "WETH": "ethereum",
    "BTC": "bitcoin",
    "WBTC": "bitcoin",
}

BASE_URL = "https://api.coingecko.com"

MAX_RETRIES = 3


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class CoinGeckoProvider:
    """Spot prices from the public CoinGecko API, retrying 429s with exponential backoff."""

    def __init__(self, http_client: RateLimitedClient, api_key: str = "") -> None:
        self._http = http_client
        self._api_key = api_key

    async def _get(self, path: str, params: dict[str, str], label: str) -> dict:
        if self._api_key:
            params = {**params, "x_cg_demo_api_key": self._api_key}
        url = f"{BASE_URL}/api/v3{path}"

        for attempt in range(MAX_RETRIES):
            try:
                response = await self._http.get(url, params=params)
            except httpx.HTTPError as exc:
                logger.warning("CoinGecko request for %s failed (attempt %d): %s", label, attempt + 1, exc)
                if attempt < MAX_RETRIES - 1:
                    await asyncio.sleep(2**attempt)
                continue

            if response.status_code == 429:
                wait = 2 ** (attempt + 1)  # 2, 4, 8 seconds
                logger.info("CoinGecko 429 rate limit for %s, waiting %ds...", label, wait)
                await asyncio.sleep(wait)
                continue

            if response.status_code != 200:
                raise ExternalServiceError(f"CoinGecko API error: {response.status_code} for {label}")
            return response.json()

        raise ExternalServiceError(f"CoinGecko exhausted retries for {label}")

    async def get_market_data(self) -> MarketData:
        """Current SEI price, 24h change/volume and market cap."""
        data = await self._get(
            f"/coins/{SEI_COINGECKO_ID}",
            {
                "localization": "false",
                "tickers": "false",
                "market_data": "true",
                "community_data": "false",
                "developer_data": "false",
                "sparkline": "false",
            },
            "SEI market data",
        )
        market = data.get("market_data") or {}
        if not market.get("current_price", {}).get("usd"):
            raise ExternalServiceError("CoinGecko returned no SEI price")
        return MarketData(
            price_usd=market["current_price"]["usd"],
            change_24h=market.get("price_change_percentage_24h"),
            volume_24h=(market.get("total_volume") or {}).get("usd"),
            market_cap=(market.get("market_cap") or {}).get("usd"),
            circulating_supply=market.get("circulating_supply"),
            last_updated=_parse_timestamp(data.get("last_updated")),
        )

    async def get_token_price(self, symbol: str) -> TokenPrice:
        upper = symbol.strip().upper()
        coin_id = SYMBOL_TO_COINGECKO.get(upper)
        if coin_id is None:
            raise ValidationError(f"Token {symbol} not supported. Supported: {', '.join(SYMBOL_TO_COINGECKO)}")

        data = await self._get(
            "/simple/price",
            {
                "ids": coin_id,
                "vs_currencies": "usd",
                "include_24hr_change": "true",
                "include_24hr_vol": "true",
                "include_market_cap": "true",
            },
            upper,
        )
        quote = data.get(coin_id)
        if not quote or "usd" not in quote:
            raise ExternalServiceError(f"CoinGecko returned no price for {upper}")
        return TokenPrice(
            symbol=upper,
            coin_id=coin_id,
            price_usd=quote["usd"],
            change_24h=quote.get("usd_24h_change"),
            volume_24h=quote.get("usd_24h_vol"),
            market_cap=quote.get("usd_market_cap"),
        )
