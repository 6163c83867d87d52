"""
Plain-text terminal rendering of a scan.

Every formatter returns a multi-line string; printing is left to the caller.
Raw currency figures are shown with thousands grouping, everything else
uses the fixed precision of the narrative text.
"""

from typing import List, Sequence

from ..core.enums import ScanStatus
from ..core.models import ChartPoint, FilterCriterion, GemCandidate, ScanResult

FACTOR_SEPARATOR = " • "
BAR_CHAR = "#"


def format_currency(amount: float) -> str:
    return f"${amount:,.0f}"


# -- Criteria -----------------------------------------------------------------


def format_criteria(criteria: Sequence[FilterCriterion]) -> str:
    lines = ["Discovery Filters"]
    for c in criteria:
        lines.append(f"  {c.name:<26} {c.value:<10} {c.description}")
    return "\n".join(lines)


# -- Chart --------------------------------------------------------------------


def format_chart(points: Sequence[ChartPoint]) -> str:
    """Horizontal bar per point, one bar character per score point."""
    lines = [f"Top {len(points)} Potential Gems"]
    if not points:
        lines.append("  (no candidates)")
        return "\n".join(lines)

    width = max(len(p.label) for p in points)
    for p in points:
        bar = BAR_CHAR * p.score
        lines.append(f"  {p.label:<{width}} | {bar:<17} {p.score:>2}  cap {format_currency(p.market_cap)}")
    return "\n".join(lines)


# -- Candidate list -----------------------------------------------------------


def format_candidates(candidates: Sequence[GemCandidate]) -> str:
    lines: List[str] = ["Detailed Gem Analysis"]
    if not candidates:
        lines.append("  (no candidates)")
        return "\n".join(lines)

    for rank, c in enumerate(candidates, start=1):
        record = c.record
        lines.append(f"  {rank:>2}. {record.name} ({record.symbol.upper()})  Score: {c.score.value}")
        lines.append(f"      {c.narrative}")
        if c.score.factors:
            lines.append(f"      Key factors: {FACTOR_SEPARATOR.join(c.score.factors)}")
    return "\n".join(lines)


# -- Full report --------------------------------------------------------------


def format_scan_result(result: ScanResult, criteria: Sequence[FilterCriterion] = ()) -> str:
    """Render the dashboard for any scan state."""
    if result.status == ScanStatus.LOADING:
        return "Loading cryptocurrency data..."
    if result.status == ScanStatus.ERROR:
        return f"Error: {result.error}"

    sections = ["Crypto Gem Finder", "Discover hidden gems with high growth potential"]
    if result.fetched_at is not None:
        sections.append(
            f"Fetched {result.fetched_at:%Y-%m-%d %H:%M:%S %Z}: "
            f"{result.filtered_records} of {result.total_records} tokens passed the filters"
        )
    if criteria:
        sections.append(format_criteria(criteria))
    sections.append(format_chart(result.chart))
    sections.append(format_candidates(result.candidates))
    return "\n\n".join(sections)
