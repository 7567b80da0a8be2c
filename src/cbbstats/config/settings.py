"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple


logger = logging.getLogger(__name__)

_DATASET_ENV = "CBBSTATS_DATASET"
_ENVIRONMENT_ENV = "CBBSTATS_ENV"
_IMAGE_BASE_URL_ENV = "CBBSTATS_IMAGE_BASE_URL"
_IMAGE_TIMEOUT_ENV = "CBBSTATS_IMAGE_TIMEOUT"
_CORS_ORIGINS_ENV = "CBBSTATS_CORS_ORIGINS"

DEFAULT_IMAGE_BASE_URL = "https://www.sports-reference.com/req/202505131/cbb/images/players"
DEFAULT_IMAGE_TIMEOUT = 5.0
DEFAULT_PROGRESSION_START_YEAR = 2022

_DEV_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
)


def _env_float(
    env: Mapping[str, str],
    name: str,
    default: float,
    *,
    clamp_min: float | None = None,
) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_list(env: Mapping[str, str], name: str) -> Tuple[str, ...] | None:
    raw = env.get(name)
    if raw is None:
        return None
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    dataset: Optional[str] = None
    environment: str = "development"
    image_base_url: str = DEFAULT_IMAGE_BASE_URL
    image_timeout: float = DEFAULT_IMAGE_TIMEOUT
    cors_origins: Tuple[str, ...] = field(default=_DEV_CORS_ORIGINS)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if env is None else env
        cors = _env_list(env, _CORS_ORIGINS_ENV)
        return cls(
            dataset=env.get(_DATASET_ENV) or None,
            environment=env.get(_ENVIRONMENT_ENV, "development"),
            image_base_url=env.get(_IMAGE_BASE_URL_ENV, DEFAULT_IMAGE_BASE_URL).rstrip("/"),
            image_timeout=_env_float(env, _IMAGE_TIMEOUT_ENV, DEFAULT_IMAGE_TIMEOUT, clamp_min=0.1),
            cors_origins=cors if cors is not None else _DEV_CORS_ORIGINS,
        )
