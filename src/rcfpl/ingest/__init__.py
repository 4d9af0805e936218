"""Input adapters that load the player metrics dataset."""

from .metrics import DatasetError, extract_clubs, load_metrics_json, parse_metrics

__all__ = [
    "DatasetError",
    "extract_clubs",
    "load_metrics_json",
    "parse_metrics",
]
