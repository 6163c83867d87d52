"""Plain-language summary of a candidate."""

from ..core.models import MarketRecord

STRONG_VOLUME_RATIO = 0.3


def generate_narrative(record: MarketRecord) -> str:
    """One sentence on the record's cap, volume, momentum and supply."""
    clauses = [
        f"{record.name} shows promise with a market cap of only ${record.market_cap_millions:.2f}M."
    ]

    ratio = record.volume_to_market_cap
    if ratio > STRONG_VOLUME_RATIO:
        clauses.append(f"It has strong trading volume at {ratio * 100:.1f}% of its market cap.")

    change = record.price_change_percentage_24h
    if change is not None and change > 0:
        clauses.append(f"Price is up {change:.1f}% in the last 24h.")

    supply_ratio = record.supply_ratio
    if supply_ratio is not None:
        clauses.append(f"Only {supply_ratio * 100:.1f}% of total supply is in circulation.")

    return " ".join(clauses)
