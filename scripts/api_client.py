"""Lightweight REST client for the rcfpl API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_params(args: argparse.Namespace) -> dict[str, str]:
    params: dict[str, str] = {}
    if args.search:
        params["search"] = args.search
    if args.club:
        params["club"] = args.club
    if args.position:
        params["position"] = args.position
    if args.sort_by:
        params["sort_by"] = args.sort_by
    if args.order:
        params["sort_direction"] = args.order
    return params


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the rcfpl REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--search", default="", help="Player name search")
    parser.add_argument("--club", default="", help="Club code filter")
    parser.add_argument("--position", default="", help="Position filter (GKP, DEF, MID, FWD)")
    parser.add_argument("--sort-by", default="", help="Sort column")
    parser.add_argument("--order", choices=("asc", "desc"), default=None, help="Sort direction")
    parser.add_argument("--page", type=int, default=1, help="Page to fetch")
    parser.add_argument("--list-clubs", action="store_true", help="List club codes and exit")
    parser.add_argument("--summary", action="store_true", help="Print the view summary and exit")
    parser.add_argument("--validate", action="store_true", help="Print score validation results and exit")
    parser.add_argument("--export-path", type=Path, help="Download the filtered view as CSV to this path")
    args = parser.parse_args()

    params = build_params(args)
    with httpx.Client(base_url=args.base_url) as client:
        if args.list_clubs:
            resp = client.get("/clubs")
            resp.raise_for_status()
            print(", ".join(resp.json()))
            return
        if args.summary:
            resp = client.get("/summary", params=params)
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.validate:
            resp = client.get("/scores/validate")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.export_path:
            resp = client.get("/players/export.csv", params=params)
            resp.raise_for_status()
            args.export_path.write_bytes(resp.content)
            print(f"CSV export saved to {args.export_path}")
            return

        resp = client.get("/players", params={**params, "page": str(args.page)})
        if resp.status_code == 503:
            raise SystemExit("server has no dataset loaded (set RCFPL_DATA_PATH)")
        resp.raise_for_status()
        payload = resp.json()
        print(f"Page {payload['current_page']}/{payload['total_pages']} ({payload['total_items']} players)")
        for row in payload["items"]:
            flag = " (low sample)" if row["low_sample"] else ""
            print(f"{row['web_name']} [{row['team']} {row['element_type']}] score={row['consistency_score']}{flag}")


if __name__ == "__main__":
    main()
