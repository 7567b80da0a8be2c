"""REST API for the college basketball stats dashboard."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from cbbstats.analysis import classify_player, compare_all_domains, compute_all_averages, progression_table
from cbbstats.analysis.comparison import ComparisonFinding
from cbbstats.analysis.progression import ProgressionTable
from cbbstats.api.schemas import (
    AnalysisResponse,
    AveragesResponse,
    BasketballStatsResponse,
    DomainComparisonResponse,
    FilterOptionsResponse,
    FindingResponse,
    HealthResponse,
    PlayerFilterResponse,
    PlayerFilterSummary,
    PlayerImageResponse,
    PositionOption,
    ProgressionCellResponse,
    ProgressionColumnResponse,
    ProgressionResponse,
    ProgressionRowResponse,
)
from cbbstats.config import POSITIONS, Settings, parse_position
from cbbstats.config.settings import DEFAULT_PROGRESSION_START_YEAR
from cbbstats.dashboard import FilterCriteria, filter_options, filter_players
from cbbstats.images import ImageLookup
from cbbstats.ingest import DatasetProvider
from cbbstats.models import PlayerSeasonRecord


logger = logging.getLogger(__name__)

SAMPLE_SIZE = 5


def _finding_to_response(finding: ComparisonFinding) -> FindingResponse:
    return FindingResponse(
        label=finding.label,
        observed_value=finding.observed_value,
        reference_value=finding.reference_value,
        polarity=finding.polarity,
        metric=finding.metric,
    )


def _table_to_response(player_name: str, table: ProgressionTable) -> ProgressionResponse:
    if not table.has_history:
        return ProgressionResponse(
            success=True,
            player_name=player_name,
            progression=[],
            total_years=0,
            message="No historical data available for this player.",
        )
    return ProgressionResponse(
        success=True,
        player_name=player_name,
        progression=table.seasons,
        total_years=len(table.seasons),
        position=table.position.value if table.position else None,
        metrics=[
            ProgressionColumnResponse(key=m.key, label=m.label, higher_is_better=m.higher_is_better)
            for m in table.metrics
        ],
        rows=[
            ProgressionRowResponse(
                year=row.season.year,
                season=row.label,
                team=row.season.team,
                gp=row.season.GP,
                cells=[
                    ProgressionCellResponse(
                        key=cell.key,
                        label=cell.label,
                        value=cell.value,
                        display=cell.display,
                        trend=cell.trend.value,
                    )
                    for cell in row.cells
                ],
            )
            for row in table.rows
        ],
    )


def _season_roster(provider: DatasetProvider, year: int | None) -> tuple[int | None, list[PlayerSeasonRecord]]:
    resolved = year if year is not None else provider.latest_year()
    if resolved is None:
        return None, []
    return resolved, provider.fetch_roster(resolved)


def create_app(
    settings: Settings | None = None,
    *,
    provider: DatasetProvider | None = None,
    image_lookup: ImageLookup | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    provider = provider or DatasetProvider(settings.dataset)
    image_lookup = image_lookup or ImageLookup(settings.image_base_url, timeout=settings.image_timeout)

    app = FastAPI(title="cbbstats")
    app.state.settings = settings
    app.state.provider = provider
    app.state.image_lookup = image_lookup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            status="OK",
            timestamp=datetime.now(timezone.utc).isoformat(),
            environment=settings.environment,
        )

    @app.get("/basketball-stats", response_model=BasketballStatsResponse)
    async def basketball_stats(year: int | None = None) -> BasketballStatsResponse:
        players = provider.fetch_roster(year)
        return BasketballStatsResponse(
            message="Data fetched and converted successfully",
            total_players=len(players),
            sample_data=players[:SAMPLE_SIZE],
            players=players,
        )

    @app.get("/player-image/{player_name}", response_model=PlayerImageResponse)
    async def player_image(player_name: str) -> PlayerImageResponse:
        image_url = await image_lookup.lookup(player_name)
        if image_url is None:
            return PlayerImageResponse(
                success=False,
                image_url=None,
                player_name=player_name,
                message="Image not found",
            )
        return PlayerImageResponse(success=True, image_url=image_url, player_name=player_name)

    @app.get("/player-progression/{player_name}", response_model=ProgressionResponse)
    async def player_progression(
        player_name: str,
        start_year: int = Query(DEFAULT_PROGRESSION_START_YEAR, alias="startYear"),
    ) -> ProgressionResponse:
        seasons = provider.player_history(player_name, start_year)
        return _table_to_response(player_name, progression_table(seasons))

    @app.get("/averages", response_model=AveragesResponse)
    async def averages(year: int | None = None) -> AveragesResponse:
        resolved, roster = _season_roster(provider, year)
        tables = compute_all_averages(roster).as_dict()
        return AveragesResponse(year=resolved, **tables)

    @app.get("/players", response_model=PlayerFilterResponse)
    async def players(
        year: int | None = None,
        search: str | None = None,
        position: Literal["G", "F", "C"] | None = None,
        conference: str | None = None,
        team: str | None = None,
        class_year: str | None = None,
        player_type: Literal["all", "starter", "bench", "limited"] = "all",
        min_ppg: float | None = None,
        max_ppg: float | None = None,
        min_efg: float | None = None,
        max_efg: float | None = None,
        min_bpm: float | None = None,
        max_bpm: float | None = None,
        min_height: int | None = None,
        max_height: int | None = None,
        sort_by: Literal["name", "pts", "eFG", "bpm", "ORtg", "usg", "Min_per"] = "name",
        sort_direction: Literal["asc", "desc"] = "asc",
        limit: int | None = Query(None, ge=1, le=1000),
    ) -> PlayerFilterResponse:
        _, roster = _season_roster(provider, year)
        criteria = FilterCriteria(
            search=search or None,
            position=parse_position(position) if position else None,
            conference=conference,
            team=team,
            class_year=class_year,
            player_type=player_type,
            min_ppg=min_ppg,
            max_ppg=max_ppg,
            min_efg=min_efg,
            max_efg=max_efg,
            min_bpm=min_bpm,
            max_bpm=max_bpm,
            min_height=min_height,
            max_height=max_height,
            sort_by=sort_by,
            sort_direction=sort_direction,
            limit=limit,
        )
        result = filter_players(roster, criteria)
        summary = result.summary
        return PlayerFilterResponse(
            summary=PlayerFilterSummary(
                available_players=summary.available_players,
                selected_players=summary.selected_players,
                ppg_mean=summary.ppg_mean,
                efg_mean=summary.efg_mean,
                bpm_mean=summary.bpm_mean,
            ),
            players=result.players,
        )

    @app.get("/filter-options", response_model=FilterOptionsResponse)
    async def options(year: int | None = None) -> FilterOptionsResponse:
        _, roster = _season_roster(provider, year)
        values = filter_options(roster)
        return FilterOptionsResponse(
            conferences=values.conferences,
            teams=values.teams,
            class_years=values.class_years,
            positions=[PositionOption(value=p.value, label=p.label) for p in POSITIONS],
        )

    @app.get("/players/{pid}/analysis", response_model=AnalysisResponse)
    async def player_analysis(pid: int, year: int | None = None) -> AnalysisResponse:
        player = provider.find_player(pid, year)
        if player is None:
            raise HTTPException(status_code=404, detail=f"player {pid} not found")
        averages = compute_all_averages(provider.fetch_roster(player.year))
        result = classify_player(player, averages)
        if result.position is None:
            logger.info("Player %s has unmapped role %r; no comparison made", pid, player.role)
        return AnalysisResponse(
            player=player,
            position=result.position.value if result.position else None,
            strengths=[_finding_to_response(f) for f in result.strengths],
            weaknesses=[_finding_to_response(f) for f in result.weaknesses],
            domains={
                name: DomainComparisonResponse(
                    player_stats=comparison.player_stats,
                    position_average=comparison.position_average,
                    differences=comparison.differences,
                )
                for name, comparison in compare_all_domains(player, averages).items()
            },
        )

    return app
