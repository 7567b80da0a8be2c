"""Per-player season statistics record."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerSeasonRecord(BaseModel):
    """One player's statistics for one season.

    ``pid`` is not reliable across seasons in the source data, so ``(pid, year)``
    is the composite key. Shooting fractions (``TP_per``, ``twoP_per``,
    ``FT_per``) are stored as 0-1 values while ``eFG`` and ``TS_per`` are 0-100;
    both conventions are kept exactly as supplied.
    """

    pid: int
    player_name: str
    year: int
    team: str = ""
    conf: str = ""
    role: str = ""
    yr: str = ""
    ht: str = ""

    GP: int = Field(default=0, ge=0)
    Min_per: float = Field(default=0.0, ge=0.0, le=100.0)

    eFG: float = Field(default=0.0, ge=0.0)
    TS_per: float = Field(default=0.0, ge=0.0)
    TP_per: float = Field(default=0.0, ge=0.0)
    twoP_per: float = Field(default=0.0, ge=0.0)
    FT_per: float = Field(default=0.0, ge=0.0)

    stl_per: float = Field(default=0.0, ge=0.0)
    blk_per: float = Field(default=0.0, ge=0.0)
    DRB_per: float = Field(default=0.0, ge=0.0)
    drtg: float = Field(default=0.0, ge=0.0)
    dbpm: float = 0.0

    AST_per: float = Field(default=0.0, ge=0.0)
    TO_per: float = Field(default=0.0, ge=0.0)
    astTov: float = Field(default=0.0, ge=0.0)
    usg: float = Field(default=0.0, ge=0.0)

    ORtg: float = Field(default=0.0, ge=0.0)
    bpm: float = 0.0
    pts: float = Field(default=0.0, ge=0.0)
    ftr: float = Field(default=0.0, ge=0.0)
    ORB_per: float = Field(default=0.0, ge=0.0)

    ast: float = Field(default=0.0, ge=0.0)
    treb: float = Field(default=0.0, ge=0.0)
    stl: float = Field(default=0.0, ge=0.0)
    blk: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[int, int]:
        return (self.pid, self.year)

    def stat(self, field: str) -> float:
        """Return a numeric field by name."""

        return float(getattr(self, field))
