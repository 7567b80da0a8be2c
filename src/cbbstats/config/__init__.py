"""Configuration: position table, statistical domains and runtime settings."""

from .domains import DEFENSIVE, OFFENSIVE, PLAYMAKING, SHOOTING, DomainSchema, get_domain, iter_domains
from .positions import POSITIONS, Position, iter_roles, parse_position, position_for_role
from .settings import Settings

__all__ = [
    "DEFENSIVE",
    "OFFENSIVE",
    "PLAYMAKING",
    "SHOOTING",
    "DomainSchema",
    "get_domain",
    "iter_domains",
    "POSITIONS",
    "Position",
    "iter_roles",
    "parse_position",
    "position_for_role",
    "Settings",
]
