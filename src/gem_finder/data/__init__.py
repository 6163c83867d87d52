"""Market data module."""

from .connector import MarketDataSource, CoinGeckoConnector, MarketDataError, decode_markets

__all__ = [
    "MarketDataSource",
    "CoinGeckoConnector",
    "MarketDataError",
    "decode_markets",
]
