"""Command-line interface for browsing and exporting player consistency metrics."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rcfpl.config import get_position, load_settings
from rcfpl.config_loader import QueryProfile
from rcfpl.ingest import DatasetError, load_metrics_json
from rcfpl.models import FIELD_ACCESSORS, PlayerMetricRecord
from rcfpl.pipeline import (
    display_headers,
    paginate,
    process_records,
    summarize_records,
    to_delimited_text,
)
from rcfpl.scoring import validate_scores


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse FPL return consistency metrics")
    parser.add_argument("dataset", type=Path, help="Path to player-metrics.json")
    parser.add_argument("--search", default=None, help="Case-insensitive player name search (2+ characters)")
    parser.add_argument("--club", default=None, help="Club code to filter on (e.g., ARS, LIV)")
    parser.add_argument("--position", default=None, help="Position to filter on (GKP, DEF, MID, FWD)")
    parser.add_argument("--sort-by", default=None, help="Column to sort on (attribute or dataset key)")
    parser.add_argument("--order", choices=("asc", "desc"), default=None, help="Sort direction")
    parser.add_argument("--page", type=int, default=1, help="Page to display")
    parser.add_argument("--page-size", type=int, default=None, help="Rows per page (default RCFPL_PAGE_SIZE or 20)")
    parser.add_argument("--output", type=Path, default=None, help="Write the full filtered view as CSV")
    parser.add_argument("--load-profile", type=Path, default=None, help="Load query profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save query profile JSON")
    parser.add_argument("--summary", action="store_true", help="Print summary statistics for the view")
    parser.add_argument(
        "--validate-scores",
        action="store_true",
        help="Recompute consistency scores and report disagreements (exit 1 on mismatch)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _resolve_profile(args: argparse.Namespace) -> QueryProfile:
    profile = QueryProfile.load(args.load_profile) if args.load_profile else QueryProfile()
    if args.search is not None:
        profile.search = args.search
    if args.club is not None:
        profile.club = args.club.upper() or None
    if args.position is not None:
        profile.position = args.position or None
    if args.sort_by is not None:
        profile.sort_by = args.sort_by
    if args.order is not None:
        profile.sort_direction = args.order
    if profile.position:
        try:
            profile.position = get_position(profile.position).position.value
        except KeyError as exc:
            raise SystemExit(f"Unknown position {profile.position!r}") from exc
    return profile


def _format_cell(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(getattr(value, "value", value))


def _print_rows(records: Sequence[PlayerMetricRecord], min_appearances: int) -> None:
    headers = display_headers(records)
    accessors = [FIELD_ACCESSORS[header] for header in headers]
    print(" | ".join(headers))
    for record in records:
        cells = [_format_cell(accessor(record)) for accessor in accessors]
        if record.is_low_sample(min_appearances):
            cells[-1] = f"{cells[-1]} (low sample)"
        print(" | ".join(cells))


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = load_settings()

    try:
        records = load_metrics_json(args.dataset, min_appearances=settings.min_appearances)
    except DatasetError as exc:
        raise SystemExit(str(exc)) from exc

    profile = _resolve_profile(args)
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved query profile to {args.save_profile}")

    query = profile.to_query()
    processed = process_records(records, query)

    if args.output:
        args.output.write_text(to_delimited_text(processed), encoding="utf-8", newline="")
        print(f"Wrote {len(processed)} players to {args.output}")

    page_size = args.page_size if args.page_size is not None else settings.page_size
    page = paginate(processed, args.page, max(1, page_size))
    if not query.is_default:
        print(
            f"Filters: search={query.search_text!r} club={query.club_filter or '-'} "
            f"position={query.position_filter or '-'} sort={query.sort_field} {query.sort_direction}"
        )
    print(
        f"Showing {page.first_item_number}-{page.last_item_number} of {page.total_item_count} players "
        f"(page {page.current_page}/{page.page_count})"
    )
    _print_rows(page.items, min_appearances=settings.min_appearances)

    if args.summary:
        summary = summarize_records(processed, min_appearances=settings.min_appearances)
        print(
            f"Eligible players: {summary.eligible_players} "
            f"(low sample: {summary.low_sample_players}, clubs: {summary.club_count})"
        )
        if summary.score_mean is not None:
            print(
                "Consistency score: mean={:.1f} median={:.1f} std={:.1f}".format(
                    summary.score_mean,
                    summary.score_median,
                    summary.score_std,
                )
            )

    if args.validate_scores:
        mismatches = validate_scores(
            records,
            weights=settings.weights,
            min_appearances=settings.min_appearances,
            precision=settings.score_precision,
        )
        if not mismatches:
            print(f"All {len(records)} consistency scores match the recomputed values")
            return 0
        preview = ", ".join(
            f"{item.name} (stored {item.stored:g}, expected {item.expected:g})" for item in mismatches[:5]
        )
        more = len(mismatches) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Score mismatches: {preview}{suffix}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
