"""Market data source interface and the CoinGecko implementation."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import asyncio
import logging

import aiohttp
from pydantic import ValidationError

from ..core.models import MarketRecord

logger = logging.getLogger(__name__)


class MarketDataError(Exception):
    """Raised when market data cannot be acquired or decoded."""


def decode_markets(payload: Any) -> List[MarketRecord]:
    """Decode a ``/coins/markets`` JSON array into records.

    Entries that are not objects, have no ``id`` or fail validation are
    skipped; the order of the remaining entries is kept.
    """
    if not isinstance(payload, list):
        raise MarketDataError(f"Expected a JSON array of markets, got {type(payload).__name__}")

    records: List[MarketRecord] = []
    skipped = 0
    for entry in payload:
        if not isinstance(entry, dict) or not entry.get('id'):
            skipped += 1
            continue
        try:
            records.append(MarketRecord.from_api(entry))
        except ValidationError as e:
            logger.warning(f"Skipping malformed market entry {entry.get('id')}: {e}")
            skipped += 1

    if skipped:
        logger.warning(f"Skipped {skipped} malformed market entries")
    logger.debug(f"Decoded {len(records)} market records")
    return records


class MarketDataSource(ABC):
    """Abstract base class for market data sources."""

    @abstractmethod
    async def fetch_markets(self) -> List[MarketRecord]:
        """Fetch one page of market records."""
        pass

    @abstractmethod
    async def close(self):
        """Release any open connections."""
        pass


class CoinGeckoConnector(MarketDataSource):
    """Fetches market data from the CoinGecko ``/coins/markets`` endpoint."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the connector."""
        self.config = config or {}
        self.base_url = self.config.get('base_url', 'https://api.coingecko.com/api/v3').rstrip('/')
        self.vs_currency = self.config.get('vs_currency', 'usd')
        self.per_page = self.config.get('per_page', 250)
        self.timeout = self.config.get('timeout', 30)
        self._session: Optional[aiohttp.ClientSession] = None
        logger.info(f"CoinGecko connector initialized ({self.base_url})")

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    def _params(self) -> Dict[str, str]:
        return {
            'vs_currency': self.vs_currency,
            'order': 'volume_desc',
            'per_page': str(self.per_page),
            'page': '1',
            'sparkline': 'false',
            'price_change_percentage': '24h,7d',
        }

    async def fetch_markets(self) -> List[MarketRecord]:
        """Fetch and decode the markets page."""
        session = await self._get_session()
        url = f"{self.base_url}/coins/markets"

        try:
            async with session.get(url, params=self._params()) as response:
                if response.status != 200:
                    body = await response.text()
                    logger.error(f"Market data request failed: HTTP {response.status}")
                    raise MarketDataError(f"Failed to fetch data: HTTP {response.status} {body[:200]}")
                payload = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching market data: {e}")
            raise MarketDataError(f"Failed to fetch data: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"Market data request timed out after {self.timeout}s")
            raise MarketDataError(f"Failed to fetch data: timed out after {self.timeout}s") from e
        except ValueError as e:
            logger.error(f"Market data response is not valid JSON: {e}")
            raise MarketDataError(f"Failed to decode data: {e}") from e

        records = decode_markets(payload)
        logger.info(f"Fetched {len(records)} market records")
        return records

    async def close(self):
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.info("Closed CoinGecko session")
