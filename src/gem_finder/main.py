"""Gem finder application entry point."""

import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from .core.enums import ScanStatus, SortDirection, SortField
from .core.models import ScanResult
from .data.connector import CoinGeckoConnector, MarketDataSource
from .reporting.export import export_to_csv
from .reporting.formatters import format_scan_result
from .scanner.gem_scanner import GemScanner

logger = logging.getLogger(__name__)


def setup_logging(level: str = 'INFO', log_file: Optional[str] = 'gem_finder.log'):
    """Configure root logging for the application."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


class GemFinder:
    """Wires the data source, scanner and reporting together."""

    def __init__(self, config: Optional[Dict] = None, source: Optional[MarketDataSource] = None):
        """Initialize the gem finder."""
        defaults = self._default_config()
        if config:
            for key, val in config.items():
                if isinstance(val, dict) and key in defaults and isinstance(defaults[key], dict):
                    defaults[key].update(val)
                else:
                    defaults[key] = val
        self.config = defaults

        self.source = source or CoinGeckoConnector(self.config['coingecko'])
        self.scanner = GemScanner(self.config['scanner'])

        logger.info("Gem finder initialized")

    def _default_config(self) -> Dict:
        """Default configuration."""
        return {
            'coingecko': {
                'base_url': 'https://api.coingecko.com/api/v3',
                'vs_currency': 'usd',
                'per_page': 250,
                'timeout': 30,
            },
            'scanner': {
                'top_n': 10,
                'sort_field': SortField.POTENTIAL_SCORE.value,
                'sort_direction': SortDirection.DESC.value,
                'max_market_cap': 100_000_000,
                'min_volume_ratio': 0.1,
                'enforce_advertised_criteria': False,
            },
            'export': {
                'csv_path': None,
            },
        }

    async def run_once(self) -> ScanResult:
        """One fetch-render cycle: scan, print the report, optionally export."""
        result = await self.scanner.scan_market(self.source)
        print(format_scan_result(result, self.scanner.criteria()))

        csv_path = self.config['export'].get('csv_path')
        if csv_path and result.status == ScanStatus.READY:
            export_to_csv(result.candidates, Path(csv_path))

        return result

    async def close(self):
        await self.source.close()


def _parse_bool(raw: str) -> Optional[bool]:
    if raw in ('1', 'true', 'yes'):
        return True
    if raw in ('0', 'false', 'no'):
        return False
    return None


def _config_from_env() -> Dict:
    """Build config dict from environment variables."""
    config: Dict = {}

    # CoinGecko
    base_url = os.getenv('COINGECKO_BASE_URL', '').strip()
    timeout = os.getenv('COINGECKO_TIMEOUT', '').strip()
    per_page = os.getenv('COINGECKO_PER_PAGE', '').strip()
    if base_url or timeout or per_page:
        config['coingecko'] = {}
        if base_url:
            config['coingecko']['base_url'] = base_url
        if timeout:
            config['coingecko']['timeout'] = float(timeout)
        if per_page:
            config['coingecko']['per_page'] = int(per_page)

    # Scanner
    top_n = os.getenv('GEM_TOP_N', '').strip()
    sort_field = os.getenv('GEM_SORT_FIELD', '').strip()
    sort_direction = os.getenv('GEM_SORT_DIRECTION', '').strip().lower()
    max_cap = os.getenv('GEM_MAX_MARKET_CAP', '').strip()
    min_ratio = os.getenv('GEM_MIN_VOLUME_RATIO', '').strip()
    enforce = _parse_bool(os.getenv('GEM_ENFORCE_ADVERTISED_CRITERIA', '').strip().lower())
    if any([top_n, sort_field, sort_direction, max_cap, min_ratio]) or enforce is not None:
        config['scanner'] = {}
        if top_n:
            config['scanner']['top_n'] = int(top_n)
        if sort_field:
            config['scanner']['sort_field'] = SortField(sort_field).value
        if sort_direction:
            config['scanner']['sort_direction'] = SortDirection(sort_direction).value
        if max_cap:
            config['scanner']['max_market_cap'] = float(max_cap)
        if min_ratio:
            config['scanner']['min_volume_ratio'] = float(min_ratio)
        if enforce is not None:
            config['scanner']['enforce_advertised_criteria'] = enforce

    # Export
    csv_path = os.getenv('GEM_EXPORT_CSV', '').strip()
    if csv_path:
        config['export'] = {'csv_path': csv_path}

    return config


async def main():
    """Main entry point."""
    load_dotenv()
    setup_logging(os.getenv('LOG_LEVEL', 'INFO'))

    config = _config_from_env()
    finder = GemFinder(config if config else None)

    try:
        result = await finder.run_once()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
        return 1
    finally:
        await finder.close()

    return 0 if result.status == ScanStatus.READY else 1


def run():
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
