"""Infrastructure helpers for fetching sources, caching and responses."""

from .cache import CACHE, ResponseCache, cache_key
from .network import FETCHER, SourceFetcher, join_base_and_path
from .responses import encode_png, send_png, send_png_bytes

__all__ = [
    "CACHE",
    "ResponseCache",
    "cache_key",
    "FETCHER",
    "SourceFetcher",
    "join_base_and_path",
    "encode_png",
    "send_png",
    "send_png_bytes",
]
