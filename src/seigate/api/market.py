from typing import Annotated

from fastapi import APIRouter, Depends

from seigate.api.deps import get_market
from seigate.domain.models import MarketData, TokenPrice
from seigate.infra.price.coingecko import CoinGeckoProvider

router = APIRouter(prefix="/api/market", tags=["market"])

MarketDep = Annotated[CoinGeckoProvider, Depends(get_market)]


@router.get("", response_model=MarketData)
async def market_data(provider: MarketDep) -> MarketData:
    return await provider.get_market_data()


@router.get("/price/{symbol}", response_model=TokenPrice)
async def token_price(symbol: str, provider: MarketDep) -> TokenPrice:
    return await provider.get_token_price(symbol)
