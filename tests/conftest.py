"""Pytest configuration and fixtures."""

import pytest

from gem_finder.core.models import MarketRecord


def make_record(
    id="token",
    market_cap=5_000_000,
    total_volume=3_000_000,
    price_change_percentage_24h=0.0,
    total_supply=None,
    circulating_supply=None,
    **kwargs,
):
    """Build a MarketRecord with sensible defaults."""
    return MarketRecord(
        id=id,
        name=kwargs.pop("name", id.title()),
        symbol=kwargs.pop("symbol", id[:3]),
        market_cap=market_cap,
        total_volume=total_volume,
        price_change_percentage_24h=price_change_percentage_24h,
        total_supply=total_supply,
        circulating_supply=circulating_supply,
        **kwargs,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def scenario_a_record():
    """Micro cap, heavy volume, strong momentum, low circulating supply."""
    return make_record(
        id="alpha",
        market_cap=5_000_000,
        total_volume=3_000_000,
        price_change_percentage_24h=20,
        total_supply=100,
        circulating_supply=20,
    )


@pytest.fixture
def scenario_b_record():
    """Thinly traded record (volume/cap ratio 0.025)."""
    return make_record(
        id="bravo",
        market_cap=80_000_000,
        total_volume=2_000_000,
        price_change_percentage_24h=5,
    )


@pytest.fixture
def sample_api_payload():
    """Raw /coins/markets entries as the API returns them."""
    return [
        {
            "id": "alpha-token",
            "symbol": "alp",
            "name": "Alpha Token",
            "image": "https://example.com/alpha.png",
            "current_price": 0.05,
            "market_cap": 5_000_000,
            "total_volume": 3_000_000,
            "price_change_percentage_24h": 20.0,
            "price_change_percentage_7d_in_currency": 35.5,
            "total_supply": 100_000_000,
            "circulating_supply": 20_000_000,
        },
        {
            "id": "bitcoin",
            "symbol": "btc",
            "name": "Bitcoin",
            "image": "https://example.com/btc.png",
            "current_price": 60_000.0,
            "market_cap": 1_200_000_000_000,
            "total_volume": 30_000_000_000,
            "price_change_percentage_24h": 1.2,
            "price_change_percentage_7d_in_currency": -2.0,
            "total_supply": 21_000_000,
            "circulating_supply": 19_700_000,
        },
        {
            "id": "gamma",
            "symbol": "gam",
            "name": "Gamma",
            "image": None,
            "current_price": 1.1,
            "market_cap": 40_000_000,
            "total_volume": 14_000_000,
            "price_change_percentage_24h": 9.5,
            "total_supply": None,
            "circulating_supply": 1_000_000,
        },
    ]
