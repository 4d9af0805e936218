"""Player pool pipeline (filtering, sorting, pagination, export, summaries)."""

from .export import display_headers, to_delimited_text
from .filtering import filter_records
from .pagination import PageResult, paginate
from .processing import build_page, process_records
from .sorting import collation_key, compare_values, sort_records
from .summary import ViewSummary, summarize_records

__all__ = [
    "PageResult",
    "ViewSummary",
    "build_page",
    "collation_key",
    "compare_values",
    "display_headers",
    "filter_records",
    "paginate",
    "process_records",
    "sort_records",
    "summarize_records",
    "to_delimited_text",
]
