"""In-process metadata cache."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from repodeck.cache.base import DEFAULT_TTL
from repodeck.vcs.models import RepositoryMetadata


def _utcnow() -> datetime:
    return datetime.now(UTC)


class MemoryMetadataCache:
    """Dict-backed cache; expiry is checked on read.

    ``clock`` is injectable so tests can move time forward.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[datetime, RepositoryMetadata]] = {}

    def get(self, url: str) -> RepositoryMetadata | None:
        entry = self._entries.get(url)
        if entry is None:
            return None
        expires_at, data = entry
        if self._clock() >= expires_at:
            del self._entries[url]
            return None
        return data

    def put(self, url: str, data: RepositoryMetadata, ttl: timedelta = DEFAULT_TTL) -> None:
        self._entries[url] = (self._clock() + ttl, data)

    def prune(self) -> int:
        now = self._clock()
        stale = [url for url, (expires_at, _) in self._entries.items() if now >= expires_at]
        for url in stale:
            del self._entries[url]
        return len(stale)

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def __len__(self) -> int:
        return len(self._entries)
