"""On-disk metadata cache: one JSON file per repository plus a manifest."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

from repodeck.cache.base import DEFAULT_TTL
from repodeck.vcs.models import RepositoryMetadata

logger = logging.getLogger(__name__)

MANIFEST_VERSION = 1


def _utcnow() -> datetime:
    return datetime.now(UTC)


class FileMetadataCache:
    """Cache directory layout::

        <directory>/manifest.json     {"version": 1, "entries": {key: {...}}}
        <directory>/<sha256(url)>.json

    Unreadable manifests and entries are treated as misses. Write failures
    are logged and ignored; the cache is best-effort. Expired entries are
    pruned on every write.
    """

    def __init__(
        self,
        directory: str | Path,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.directory = Path(directory)
        self._clock = clock

    @staticmethod
    def _key(url: str) -> str:
        return hashlib.sha256(url.encode()).hexdigest()

    def _manifest_path(self) -> Path:
        return self.directory / "manifest.json"

    def _entry_path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def _load_manifest(self) -> dict:
        mp = self._manifest_path()
        if mp.is_file():
            try:
                manifest = json.loads(mp.read_text(encoding="utf-8"))
                if isinstance(manifest, dict) and isinstance(manifest.get("entries"), dict):
                    return manifest
            except (ValueError, OSError):
                pass
            logger.warning("Corrupt cache manifest at %s, rebuilding", mp)
        return {"version": MANIFEST_VERSION, "entries": {}}

    def _save_manifest(self, manifest: dict) -> None:
        mp = self._manifest_path()
        mp.parent.mkdir(parents=True, exist_ok=True)
        mp.write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    def get(self, url: str) -> RepositoryMetadata | None:
        key = self._key(url)
        entry = self._load_manifest()["entries"].get(key)
        if entry is None:
            return None

        try:
            expires_at = datetime.fromisoformat(entry["expires_at"])
        except (KeyError, TypeError, ValueError):
            return None
        if self._clock() >= expires_at:
            logger.debug("cache expired for %s", url)
            return None

        path = self._entry_path(key)
        if not path.is_file():
            return None
        try:
            return RepositoryMetadata.model_validate_json(path.read_text(encoding="utf-8"))
        except (ValueError, OSError):
            logger.warning("Unreadable cache entry for %s", url, exc_info=True)
            return None

    def put(self, url: str, data: RepositoryMetadata, ttl: timedelta = DEFAULT_TTL) -> None:
        key = self._key(url)
        now = self._clock()
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            payload = data.model_dump_json()
            self._entry_path(key).write_text(payload, encoding="utf-8")

            manifest = self._load_manifest()
            self._prune_entries(manifest, now)
            manifest["entries"][key] = {
                "url": url,
                "cached_at": now.isoformat(),
                "expires_at": (now + ttl).isoformat(),
                "size_bytes": len(payload.encode()),
            }
            self._save_manifest(manifest)
        except OSError:
            logger.warning("Failed to write cache for %s", url, exc_info=True)

    def _prune_entries(self, manifest: dict, now: datetime) -> int:
        """Drop expired or malformed entries from ``manifest`` and their files."""
        stale = []
        for key, entry in manifest["entries"].items():
            try:
                if now < datetime.fromisoformat(entry["expires_at"]):
                    continue
            except (KeyError, TypeError, ValueError):
                pass
            stale.append(key)
        for key in stale:
            del manifest["entries"][key]
            self._entry_path(key).unlink(missing_ok=True)
        return len(stale)

    def prune(self) -> int:
        """Delete expired entries. Returns the number removed."""
        if not self.directory.is_dir():
            return 0
        manifest = self._load_manifest()
        removed = self._prune_entries(manifest, self._clock())
        if removed:
            self._save_manifest(manifest)
        logger.info("pruned %d expired cache entries from %s", removed, self.directory)
        return removed

    def clear(self) -> int:
        """Delete every cached entry. Returns the number removed."""
        if not self.directory.is_dir():
            return 0
        removed = 0
        for path in self.directory.glob("*.json"):
            if path.name == "manifest.json":
                continue
            path.unlink(missing_ok=True)
            removed += 1
        self._manifest_path().unlink(missing_ok=True)
        logger.info("cleared %d cache entries from %s", removed, self.directory)
        return removed
