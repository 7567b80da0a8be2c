from __future__ import annotations

from typing import List

from pydantic import BaseModel

from cbbstats.models import PlayerSeasonRecord


class PlayerFilterSummary(BaseModel):
    available_players: int
    selected_players: int
    ppg_mean: float | None
    efg_mean: float | None
    bpm_mean: float | None


class PlayerFilterResponse(BaseModel):
    summary: PlayerFilterSummary
    players: List[PlayerSeasonRecord]


class PositionOption(BaseModel):
    value: str
    label: str


class FilterOptionsResponse(BaseModel):
    conferences: List[str]
    teams: List[str]
    class_years: List[str]
    positions: List[PositionOption]
