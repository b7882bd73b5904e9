"""Services"""

from career_log_export.services.export_stats import ExportStats, count_matching, get_export_stats
from career_log_export.services.record_filter import filter_records, is_selection_active

__all__ = [
    "ExportStats",
    "count_matching",
    "filter_records",
    "get_export_stats",
    "is_selection_active",
]
