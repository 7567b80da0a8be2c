from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from cbbstats.api.schemas.stats import CamelModel
from cbbstats.models import PlayerSeasonRecord


class FindingResponse(CamelModel):
    label: str
    observed_value: str
    reference_value: str
    polarity: Literal["strength", "weakness"]
    metric: str


class DomainComparisonResponse(CamelModel):
    player_stats: Dict[str, float]
    position_average: Dict[str, float]
    differences: Dict[str, float]


class AnalysisResponse(BaseModel):
    player: PlayerSeasonRecord
    position: str | None
    strengths: List[FindingResponse]
    weaknesses: List[FindingResponse]
    domains: Dict[str, DomainComparisonResponse] = Field(default_factory=dict)


class ProgressionCellResponse(BaseModel):
    key: str
    label: str
    value: float
    display: str
    trend: Literal["improvement", "decline", "neutral"]


class ProgressionRowResponse(BaseModel):
    year: int
    season: str
    team: str
    gp: int
    cells: List[ProgressionCellResponse]


class ProgressionColumnResponse(BaseModel):
    key: str
    label: str
    higher_is_better: bool


class ProgressionResponse(CamelModel):
    success: bool
    player_name: str
    progression: List[PlayerSeasonRecord]
    total_years: int
    position: str | None = None
    metrics: List[ProgressionColumnResponse] = []
    rows: List[ProgressionRowResponse] = []
    message: str | None = None
