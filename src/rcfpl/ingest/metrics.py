"""Load the published player-metrics JSON into validated records."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List

from pydantic import ValidationError

from rcfpl.config.settings import MIN_APPEARANCES_FOR_SCORE
from rcfpl.models import PlayerMetricRecord


logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when a metrics dataset does not match the record contract."""


def parse_metrics(
    payload: Any,
    *,
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE,
) -> List[PlayerMetricRecord]:
    """Validate a decoded JSON payload (an array of player objects).

    Low-sample rows must carry a consistency score of 0.
    """

    if not isinstance(payload, list):
        raise DatasetError(f"Invalid data format: expected array, got {type(payload).__name__}")

    records: List[PlayerMetricRecord] = []
    seen_ids: set[int] = set()
    for index, row in enumerate(payload):
        if not isinstance(row, dict):
            raise DatasetError(f"Row {index} is not an object")
        try:
            record = PlayerMetricRecord.model_validate(row)
        except ValidationError as exc:
            label = row.get("web_name") or row.get("id") or "?"
            raise DatasetError(f"Row {index} ({label}) is invalid: {exc}") from exc
        if record.is_low_sample(min_appearances) and record.consistency_score != 0.0:
            raise DatasetError(
                f"Row {index} ({record.name}) has {record.appearances} appearances "
                f"but consistency_score {record.consistency_score:g}; expected 0"
            )
        if record.id in seen_ids:
            raise DatasetError(f"Row {index} repeats player id {record.id}")
        seen_ids.add(record.id)
        records.append(record)

    if not records:
        logger.warning("Player metrics data is empty")
    return records


def load_metrics_json(
    path: Path,
    *,
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE,
) -> List[PlayerMetricRecord]:
    """Read and validate ``player-metrics.json`` from disk."""

    if not path.exists():
        raise DatasetError(f"Player metrics file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Player metrics file {path} is not valid JSON: {exc}") from exc

    records = parse_metrics(payload, min_appearances=min_appearances)
    logger.info("Loaded %d player metric records from %s", len(records), path)
    return records


def extract_clubs(records: Iterable[PlayerMetricRecord]) -> List[str]:
    """Sorted unique club codes, ignoring blanks."""

    return sorted({record.team for record in records if record.team})
