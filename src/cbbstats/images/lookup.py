"""Resolve player headshot URLs by probing the image host."""

from __future__ import annotations

import logging
import re
from typing import Optional

import httpx

from cbbstats.config.settings import DEFAULT_IMAGE_BASE_URL, DEFAULT_IMAGE_TIMEOUT
from cbbstats.images.cache import ImageCache


logger = logging.getLogger(__name__)


def player_image_slug(player_name: str) -> str:
    """Image host slug for a display name, e.g. "Bruce Thornton" -> "bruce-thornton"."""

    lowered = player_name.lower()
    cleaned = re.sub(r"[^a-z0-9\s]", "", lowered)
    return re.sub(r"\s+", "-", cleaned.strip())


class ImageLookup:
    """HEAD-probes ``{base_url}/{slug}-1.jpg`` with a bounded timeout.

    Every failure mode (non-2xx, timeout, transport error) resolves to None.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_IMAGE_BASE_URL,
        *,
        timeout: float = DEFAULT_IMAGE_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        cache: ImageCache | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self.cache = cache or ImageCache()

    def image_url(self, player_name: str) -> str:
        return f"{self.base_url}/{player_image_slug(player_name)}-1.jpg"

    async def _probe(self, player_name: str) -> Optional[str]:
        url = self.image_url(player_name)
        try:
            if self._client is not None:
                response = await self._client.head(url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.head(url)
        except httpx.TimeoutException:
            logger.warning("Image request timeout for %s", player_name)
            return None
        except httpx.HTTPError as exc:
            logger.warning("Error fetching player image for %s: %s", player_name, exc)
            return None
        if response.is_success:
            return url
        logger.debug("No image for %s (status %s)", player_name, response.status_code)
        return None

    async def lookup(self, player_name: str) -> Optional[str]:
        return await self.cache.get_or_fetch(player_name, self._probe)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
