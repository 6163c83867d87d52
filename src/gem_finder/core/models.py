"""Core data models for the gem finder."""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, validator

from .enums import ScanStatus


def _coerce_amount(value: Any) -> float:
    """Turn a missing or non-numeric amount into 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(amount) or math.isinf(amount):
        return 0.0
    return amount


def _coerce_optional(value: Any) -> Optional[float]:
    """Turn a non-numeric optional amount into None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(amount) or math.isinf(amount):
        return None
    return amount


class MarketRecord(BaseModel):
    """One market-data entry as returned by the markets endpoint."""

    # Identity
    id: str = Field(description="Opaque unique identifier")
    name: str = Field(default="", description="Display name")
    symbol: str = Field(default="", description="Ticker symbol")
    image_url: Optional[str] = Field(default=None, description="Logo URL")

    # Market data
    current_price: Optional[float] = Field(default=None, description="Current price")
    market_cap: float = Field(default=0.0, description="Market cap in currency units")
    total_volume: float = Field(default=0.0, description="Trailing 24h volume in currency units")
    price_change_percentage_24h: Optional[float] = Field(default=None, description="24h price change %")
    price_change_percentage_7d: Optional[float] = Field(default=None, description="7d price change %")

    # Supply
    total_supply: Optional[float] = Field(default=None, description="Total supply")
    circulating_supply: Optional[float] = Field(default=None, description="Circulating supply")

    class Config:
        frozen = True

    @validator('market_cap', 'total_volume', pre=True, always=True)
    def coerce_amount(cls, v):
        return _coerce_amount(v)

    @validator(
        'current_price', 'price_change_percentage_24h', 'price_change_percentage_7d',
        'total_supply', 'circulating_supply',
        pre=True,
    )
    def coerce_optional(cls, v):
        return _coerce_optional(v)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "MarketRecord":
        """Build a record from a raw ``/coins/markets`` entry."""
        return cls(
            id=str(payload['id']),
            name=payload.get('name') or "",
            symbol=payload.get('symbol') or "",
            image_url=payload.get('image'),
            current_price=payload.get('current_price'),
            market_cap=payload.get('market_cap'),
            total_volume=payload.get('total_volume'),
            price_change_percentage_24h=payload.get('price_change_percentage_24h'),
            price_change_percentage_7d=payload.get('price_change_percentage_7d_in_currency'),
            total_supply=payload.get('total_supply'),
            circulating_supply=payload.get('circulating_supply'),
        )

    @property
    def market_cap_millions(self) -> float:
        return self.market_cap / 1_000_000

    @property
    def volume_to_market_cap(self) -> float:
        """24h volume divided by market cap, 0.0 without a positive cap."""
        if self.market_cap <= 0:
            return 0.0
        return self.total_volume / self.market_cap

    @property
    def supply_ratio(self) -> Optional[float]:
        """Circulating over total supply, None unless both are known."""
        if not self.total_supply or not self.circulating_supply:
            return None
        return self.circulating_supply / self.total_supply


class PotentialScore(BaseModel):
    """Heuristic growth-potential score of one record."""

    value: int = Field(default=0, ge=0, description="Sum of triggered rule points")
    factors: List[str] = Field(default_factory=list, description="One explanation per triggered rule")


class FilterCriterion(BaseModel):
    """A discovery criterion as shown to the user."""

    name: str
    value: str
    description: str


class ChartPoint(BaseModel):
    """One bar of the top-N chart."""

    label: str = Field(description="Upper-cased symbol")
    score: int = Field(description="Potential score")
    market_cap: float = Field(description="Market cap in currency units")


class GemCandidate(BaseModel):
    """A ranked record with its score and narrative, ready for display."""

    record: MarketRecord
    score: PotentialScore
    narrative: str = ""


class ScanResult(BaseModel):
    """Snapshot of the dashboard after one fetch-render cycle."""

    status: ScanStatus = Field(default=ScanStatus.LOADING, description="Dashboard state")
    candidates: List[GemCandidate] = Field(default_factory=list, description="Top-N ranked gems")
    chart: List[ChartPoint] = Field(default_factory=list, description="Chart projection of the candidates")
    error: Optional[str] = Field(default=None, description="Acquisition error message")
    fetched_at: Optional[datetime] = Field(default=None, description="When the data was fetched")
    total_records: int = Field(default=0, description="Records received from the source")
    filtered_records: int = Field(default=0, description="Records passing the filter")
