"""In-memory cache for player image lookups keyed by player name."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional


logger = logging.getLogger(__name__)

ImageFetcher = Callable[[str], Awaitable[Optional[str]]]

MISS = object()


class ImageCache:
    """Caches both found URLs and ``None`` (not found) results indefinitely.

    Concurrent ``get_or_fetch`` calls for the same name share one in-flight
    lookup.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Optional[str]] = {}
        self._pending: Dict[str, asyncio.Task[Optional[str]]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, name: str) -> object:
        """Return the cached value (possibly ``None``) or ``MISS``."""

        return self._values.get(name, MISS)

    async def get_or_fetch(self, name: str, fetcher: ImageFetcher) -> Optional[str]:
        if name in self._values:
            return self._values[name]

        task = self._pending.get(name)
        if task is None:
            task = asyncio.ensure_future(self._fetch(name, fetcher))
            self._pending[name] = task
        # A cancelled caller must not cancel the lookup other callers share.
        return await asyncio.shield(task)

    async def _fetch(self, name: str, fetcher: ImageFetcher) -> Optional[str]:
        current = asyncio.current_task()
        try:
            result = await fetcher(name)
        except Exception as exc:
            logger.warning("Image lookup for %s failed: %s", name, exc)
            result = None
        finally:
            owned = self._pending.get(name) is current
            if owned:
                del self._pending[name]
        # Invalidated while in flight: hand the result to waiters but do not store it.
        if owned:
            self._values[name] = result
        return result

    def invalidate(self, name: str | None = None) -> None:
        """Drop one cached name, or everything when ``name`` is None.

        Lookups still in flight for a dropped name are not written back.
        """

        if name is None:
            self._values.clear()
            self._pending.clear()
            return
        self._values.pop(name, None)
        self._pending.pop(name, None)
