"""Terminal and file reporting for scan results."""

from .export import candidates_to_frame, export_to_csv
from .formatters import format_candidates, format_chart, format_criteria, format_scan_result

__all__ = [
    "candidates_to_frame",
    "export_to_csv",
    "format_candidates",
    "format_chart",
    "format_criteria",
    "format_scan_result",
]
