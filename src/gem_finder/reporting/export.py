"""Tabular export of ranked candidates."""

import logging
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from ..core.models import GemCandidate

logger = logging.getLogger(__name__)

COLUMNS: List[str] = [
    "rank",
    "id",
    "name",
    "symbol",
    "score",
    "market_cap",
    "total_volume",
    "volume_to_market_cap",
    "price_change_percentage_24h",
    "price_change_percentage_7d",
    "supply_ratio",
    "factors",
    "narrative",
]


def candidates_to_frame(candidates: Sequence[GemCandidate]) -> pd.DataFrame:
    """One row per candidate, in rank order, factors joined by ``"; "``."""
    rows = []
    for rank, c in enumerate(candidates, start=1):
        record = c.record
        rows.append({
            "rank": rank,
            "id": record.id,
            "name": record.name,
            "symbol": record.symbol.upper(),
            "score": c.score.value,
            "market_cap": record.market_cap,
            "total_volume": record.total_volume,
            "volume_to_market_cap": record.volume_to_market_cap,
            "price_change_percentage_24h": record.price_change_percentage_24h,
            "price_change_percentage_7d": record.price_change_percentage_7d,
            "supply_ratio": record.supply_ratio,
            "factors": "; ".join(c.score.factors),
            "narrative": c.narrative,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def export_to_csv(candidates: Sequence[GemCandidate], path: Path) -> Path:
    """Write *candidates* to a UTF-8 CSV file and return ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    candidates_to_frame(candidates).to_csv(path, index=False, encoding="utf-8")
    logger.info(f"Exported {len(candidates)} candidates to {path}")
    return path
