from __future__ import annotations

import threading
import time
from typing import Dict, Optional, Tuple

from ..config import SETTINGS


CacheEntry = Tuple[float, bytes]
MAX_ENTRIES = 16


def cache_key(name: str, delta: int, cool_mode: str | None, source_url: str) -> str:
    return f"{name}|{delta}|{cool_mode or ''}|{source_url}"


class ResponseCache:
    """Rendered PNGs keyed by transform parameters.

    ``get`` only answers while an entry is younger than ``cache_ttl``. Expired
    entries are kept (until evicted) so ``get_stale`` can serve the last output
    rendered for the same key when the source is unreachable.
    """

    def __init__(self, max_entries: int = MAX_ENTRIES) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._max_entries = max_entries
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bytes]:
        if SETTINGS.cache_ttl <= 0:
            return None
        with self._lock:
            entry = self._entries.get(key)
        if not entry:
            return None
        stored_at, data = entry
        if time.time() - stored_at > SETTINGS.cache_ttl:
            return None
        return data

    def get_stale(self, key: str) -> Optional[bytes]:
        with self._lock:
            entry = self._entries.get(key)
        return entry[1] if entry else None

    def put(self, key: str, data: bytes) -> None:
        with self._lock:
            while len(self._entries) >= self._max_entries and key not in self._entries:
                oldest = min(self._entries.items(), key=lambda item: item[1][0])[0]
                self._entries.pop(oldest, None)
            self._entries[key] = (time.time(), data)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


CACHE = ResponseCache()
