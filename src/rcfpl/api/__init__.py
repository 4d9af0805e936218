"""REST API exposing the player metrics pipeline."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Literal, Sequence

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import Response

from rcfpl.api.schemas import (
    PlayerPageResponse,
    PlayerRowResponse,
    ScoreMismatchResponse,
    ScoreValidationResponse,
    ViewSummaryResponse,
)
from rcfpl.config import Position, Settings, load_settings
from rcfpl.config.settings import MAX_PAGE_SIZE
from rcfpl.ingest import extract_clubs, load_metrics_json
from rcfpl.models import PlayerMetricRecord, QueryState
from rcfpl.pipeline import build_page, process_records, summarize_records, to_delimited_text
from rcfpl.scoring import validate_scores


logger = logging.getLogger(__name__)

EXPORT_FILENAME = "fpl_return_consistency.csv"


def _row(record: PlayerMetricRecord, min_appearances: int) -> PlayerRowResponse:
    return PlayerRowResponse(
        **record.model_dump(),
        low_sample=record.is_low_sample(min_appearances),
    )


def create_app(
    records: Sequence[PlayerMetricRecord] | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    if records is None and settings.data_path is not None:
        records = load_metrics_json(settings.data_path, min_appearances=settings.min_appearances)

    app = FastAPI(title="rcfpl return consistency")
    app.state.settings = settings
    app.state.records = tuple(records) if records is not None else None
    if app.state.records is None:
        logger.warning("No player metrics dataset configured; set RCFPL_DATA_PATH")
    else:
        logger.info("Serving %d player metric records", len(app.state.records))

    def dataset() -> tuple[PlayerMetricRecord, ...]:
        if app.state.records is None:
            raise HTTPException(status_code=503, detail="Player metrics dataset is not configured")
        return app.state.records

    def query_state(
        search: str = "",
        club: str | None = None,
        position: Position | None = None,
        sort_by: str = settings.default_sort_by,
        sort_direction: Literal["asc", "desc"] = settings.default_sort_order,
    ) -> QueryState:
        return QueryState(
            search_text=search,
            club_filter=club or None,
            position_filter=position,
            sort_field=sort_by,
            sort_direction=sort_direction,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=PlayerPageResponse)
    async def list_players(
        query: QueryState = Depends(query_state),
        page: int = 1,
        page_size: int = Query(settings.page_size, ge=1, le=MAX_PAGE_SIZE),
        records: tuple[PlayerMetricRecord, ...] = Depends(dataset),
    ) -> PlayerPageResponse:
        result = build_page(records, query, page, page_size)
        return PlayerPageResponse(
            items=[_row(record, settings.min_appearances) for record in result.items],
            current_page=result.current_page,
            total_pages=result.page_count,
            total_items=result.total_item_count,
            page_size=result.page_size,
        )

    @app.get("/players/export.csv")
    async def export_players(
        query: QueryState = Depends(query_state),
        records: tuple[PlayerMetricRecord, ...] = Depends(dataset),
    ) -> Response:
        csv_text = to_delimited_text(process_records(records, query))
        return Response(
            content=csv_text,
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
        )

    @app.get("/clubs")
    async def list_clubs(records: tuple[PlayerMetricRecord, ...] = Depends(dataset)) -> list[str]:
        return extract_clubs(records)

    @app.get("/summary", response_model=ViewSummaryResponse)
    async def summary(
        query: QueryState = Depends(query_state),
        records: tuple[PlayerMetricRecord, ...] = Depends(dataset),
    ) -> ViewSummaryResponse:
        view = summarize_records(
            process_records(records, query),
            min_appearances=settings.min_appearances,
        )
        return ViewSummaryResponse(**asdict(view))

    @app.get("/scores/validate", response_model=ScoreValidationResponse)
    async def scores_validate(
        records: tuple[PlayerMetricRecord, ...] = Depends(dataset),
    ) -> ScoreValidationResponse:
        mismatches = validate_scores(
            records,
            weights=settings.weights,
            min_appearances=settings.min_appearances,
            precision=settings.score_precision,
        )
        return ScoreValidationResponse(
            checked_players=len(records),
            mismatches=[
                ScoreMismatchResponse(
                    player_id=item.player_id,
                    name=item.name,
                    stored=item.stored,
                    expected=item.expected,
                )
                for item in mismatches
            ],
        )

    return app
