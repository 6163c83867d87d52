"""Core enumerations for the gem finder."""

from enum import Enum


class SortField(str, Enum):
    """Fields the candidate list can be sorted by."""
    POTENTIAL_SCORE = "potential_score"
    MARKET_CAP = "market_cap"
    TOTAL_VOLUME = "total_volume"
    CURRENT_PRICE = "current_price"
    PRICE_CHANGE_24H = "price_change_percentage_24h"
    PRICE_CHANGE_7D = "price_change_percentage_7d"
    TOTAL_SUPPLY = "total_supply"
    CIRCULATING_SUPPLY = "circulating_supply"


class SortDirection(str, Enum):
    """Sort directions."""
    ASC = "asc"
    DESC = "desc"


class ScanStatus(str, Enum):
    """Dashboard state of a scan."""
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
