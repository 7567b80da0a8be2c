"""Pydantic models for API I/O."""

from .analysis import (
    AnalysisResponse,
    DomainComparisonResponse,
    FindingResponse,
    ProgressionCellResponse,
    ProgressionColumnResponse,
    ProgressionResponse,
    ProgressionRowResponse,
)
from .dashboard import FilterOptionsResponse, PlayerFilterResponse, PlayerFilterSummary, PositionOption
from .stats import AveragesResponse, BasketballStatsResponse, HealthResponse, PlayerImageResponse

__all__ = [
    "AnalysisResponse",
    "DomainComparisonResponse",
    "FindingResponse",
    "ProgressionCellResponse",
    "ProgressionColumnResponse",
    "ProgressionResponse",
    "ProgressionRowResponse",
    "FilterOptionsResponse",
    "PlayerFilterResponse",
    "PlayerFilterSummary",
    "PositionOption",
    "AveragesResponse",
    "BasketballStatsResponse",
    "HealthResponse",
    "PlayerImageResponse",
]
