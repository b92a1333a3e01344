"""Metadata cache interface."""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol, runtime_checkable

from repodeck.vcs.models import RepositoryMetadata

DEFAULT_TTL = timedelta(hours=24)


@runtime_checkable
class MetadataCache(Protocol):
    """Read-through cache of RepositoryMetadata keyed by canonical URL.

    A missing entry and an expired entry are indistinguishable to callers:
    both return None. Writes are last-writer-wins.
    """

    def get(self, url: str) -> RepositoryMetadata | None: ...

    def put(self, url: str, data: RepositoryMetadata, ttl: timedelta = DEFAULT_TTL) -> None: ...

    def prune(self) -> int: ...

    def clear(self) -> int: ...
