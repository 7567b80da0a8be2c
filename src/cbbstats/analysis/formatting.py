"""Display formatting for stat values."""

from __future__ import annotations

from typing import Callable


def fraction_pct(value: float) -> str:
    """0-1 shooting fractions shown as percentages, e.g. 0.372 -> "37.2%"."""

    return f"{value * 100:.1f}%"


def pct(value: float) -> str:
    return f"{value:.1f}%"


def plain(value: float) -> str:
    return f"{value:.1f}"


def suffixed(suffix: str) -> Callable[[float], str]:
    def fmt(value: float) -> str:
        return f"{value:.1f}{suffix}"

    return fmt
