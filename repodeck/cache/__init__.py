"""Repository metadata caches."""

from datetime import timedelta

from repodeck.cache.base import DEFAULT_TTL, MetadataCache
from repodeck.cache.file import FileMetadataCache
from repodeck.cache.memory import MemoryMetadataCache
from repodeck.config.models import CacheConfig


def create_cache(config: CacheConfig) -> MetadataCache | None:
    """File cache from config, or None when caching is disabled."""
    if not config.enabled:
        return None
    return FileMetadataCache(config.directory)


def cache_ttl(config: CacheConfig) -> timedelta:
    return timedelta(hours=config.ttl_hours)


__all__ = [
    "DEFAULT_TTL",
    "FileMetadataCache",
    "MemoryMetadataCache",
    "MetadataCache",
    "cache_ttl",
    "create_cache",
]
