from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from cbbstats.models import PlayerSeasonRecord


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str


class BasketballStatsResponse(CamelModel):
    message: str
    total_players: int
    sample_data: List[PlayerSeasonRecord]
    players: List[PlayerSeasonRecord]


class PlayerImageResponse(CamelModel):
    success: bool
    image_url: str | None
    player_name: str
    message: str | None = None


class AveragesResponse(BaseModel):
    year: int | None
    shooting: Dict[str, Dict[str, float]]
    defensive: Dict[str, Dict[str, float]]
    playmaking: Dict[str, Dict[str, float]]
    offensive: Dict[str, Dict[str, float]]
