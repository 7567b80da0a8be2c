"""Canonical record types shared across ingest, analysis and API layers."""

from .player import PlayerSeasonRecord

__all__ = ["PlayerSeasonRecord"]
