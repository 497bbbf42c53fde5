from __future__ import annotations

import io
import logging
import time
from typing import Callable

import requests
from PIL import Image

from ..config import SETTINGS


SessionFactory = Callable[[], requests.Session]

logger = logging.getLogger(__name__)


def join_base_and_path(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class SourceFetcher:
    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self._session_factory = session_factory or requests.Session
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": "pixel-transforms/1.0"})
        return session

    def fetch_source(self, source_url: str | None = None) -> Image.Image:
        """Download and decode the source image as ``RGBA``.

        Tries ``SETTINGS.retries + 1`` times with a linear back-off before
        giving up with ``RuntimeError``.
        """

        target_url = source_url or SETTINGS.source_url
        last_exception: Exception | None = None
        for attempt in range(1, SETTINGS.retries + 2):
            try:
                response = self._session.get(target_url, timeout=SETTINGS.timeout)
                response.raise_for_status()
                return Image.open(io.BytesIO(response.content)).convert("RGBA")
            except (requests.RequestException, OSError, Image.DecompressionBombError) as exc:
                logger.warning("Fetching %s failed (attempt %d): %s", target_url, attempt, exc)
                last_exception = exc
                time.sleep(0.4 * attempt)
        raise RuntimeError(f"Could not fetch source {target_url}: {last_exception}") from last_exception


FETCHER = SourceFetcher()
