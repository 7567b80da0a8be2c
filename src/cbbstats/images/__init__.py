"""Player image lookup with name-keyed caching."""

from .cache import MISS, ImageCache
from .lookup import ImageLookup, player_image_slug

__all__ = ["MISS", "ImageCache", "ImageLookup", "player_image_slug"]
