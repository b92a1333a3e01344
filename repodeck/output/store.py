"""JsonPresentationStore: persists SlidePresentations as JSON files on disk."""

from __future__ import annotations

import logging
import re
from collections import Counter
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from repodeck.config.models import StorageConfig
from repodeck.slides.models import SlidePresentation

logger = logging.getLogger(__name__)

INDEX_FILE = "_index.yaml"


def _sanitize_id(presentation_id: str) -> str:
    """Make a presentation id safe for use as a filename.

    Replaces ``/`` with ``--``, strips ``..`` segments and drops characters
    that are problematic on common filesystems.
    """
    name = presentation_id.replace("/", "--")
    name = name.replace("..", "")
    name = re.sub(r"[^\w\-\.@]", "", name)
    name = re.sub(r"-{3,}", "--", name)
    if not name or name.strip(".") == "":
        name = "_unnamed"
    return name


class PresentationSummary(BaseModel):
    """Listing row for a stored presentation."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    repository_url: str
    mode: str
    language: str
    duration: int
    slide_count: int
    updated_at: datetime

    @classmethod
    def of(cls, presentation: SlidePresentation) -> PresentationSummary:
        return cls(
            id=presentation.id,
            title=presentation.title,
            repository_url=presentation.repository.url,
            mode=presentation.mode,
            language=presentation.language,
            duration=presentation.duration,
            slide_count=len(presentation.slides),
            updated_at=presentation.updated_at,
        )


class StoreStats(BaseModel):
    total: int = 0
    by_mode: dict[str, int] = {}
    by_language: dict[str, int] = {}
    most_used_duration: int | None = None


@runtime_checkable
class PresentationStore(Protocol):
    """Persistence collaborator for finished presentations, keyed by id."""

    def save(self, presentation: SlidePresentation) -> Path: ...

    def get(self, presentation_id: str) -> SlidePresentation | None: ...

    def list(self) -> list[PresentationSummary]: ...

    def delete(self, presentation_id: str) -> bool: ...

    def search(self, query: str) -> list[PresentationSummary]: ...


class JsonPresentationStore:
    """Writes each presentation to ``<base_dir>/<id>.json``.

    Maintains an optional ``_index.yaml`` next to the files. Files that fail
    to parse are skipped with a warning when listing.
    """

    def __init__(self, config: StorageConfig) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)

    def path_for(self, presentation_id: str) -> Path:
        return self.base_dir / f"{_sanitize_id(presentation_id)}.json"

    def save(self, presentation: SlidePresentation, *, dry_run: bool = False) -> Path:
        """Write a presentation to disk, replacing any earlier version.

        Returns the Path of the written (or would-be) file.
        """
        dest = self.path_for(presentation.id)
        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        stored = presentation.model_copy(update={"updated_at": datetime.now(UTC)})
        payload = stored.model_dump_json(indent=2)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(payload, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(payload))

        if self.config.create_index:
            self._update_index(stored, dest)
        return dest

    def get(self, presentation_id: str) -> SlidePresentation | None:
        path = self.path_for(presentation_id)
        if not path.is_file():
            return None
        return SlidePresentation.model_validate_json(path.read_text(encoding="utf-8"))

    def _load_all(self) -> list[SlidePresentation]:
        if not self.base_dir.is_dir():
            return []
        loaded: list[SlidePresentation] = []
        for path in sorted(self.base_dir.glob("*.json")):
            try:
                loaded.append(
                    SlidePresentation.model_validate_json(path.read_text(encoding="utf-8"))
                )
            except (ValidationError, OSError):
                logger.warning("Skipping unreadable presentation %s", path, exc_info=True)
        return loaded

    def list(self) -> list[PresentationSummary]:
        """All stored presentations, most recently updated first."""
        summaries = [PresentationSummary.of(p) for p in self._load_all()]
        return sorted(summaries, key=lambda s: s.updated_at, reverse=True)

    def search(self, query: str) -> list[PresentationSummary]:
        """Case-insensitive substring match on title and repository URL."""
        needle = query.lower()
        return [
            s
            for s in self.list()
            if needle in s.title.lower() or needle in s.repository_url.lower()
        ]

    def delete(self, presentation_id: str) -> bool:
        path = self.path_for(presentation_id)
        if not path.is_file():
            return False
        path.unlink()
        logger.info("deleted %s", path)
        if self.config.create_index:
            self._remove_from_index(presentation_id)
        return True

    def stats(self) -> StoreStats:
        summaries = self.list()
        if not summaries:
            return StoreStats()
        durations = Counter(s.duration for s in summaries)
        return StoreStats(
            total=len(summaries),
            by_mode=dict(Counter(s.mode for s in summaries)),
            by_language=dict(Counter(s.language for s in summaries)),
            # Ties go to the longer deck.
            most_used_duration=max(durations, key=lambda d: (durations[d], d)),
        )

    # -- index management --------------------------------------------------

    def _index_path(self) -> Path:
        return self.base_dir / INDEX_FILE

    def _read_index(self) -> list[dict]:
        index_path = self._index_path()
        if not index_path.exists():
            return []
        loaded = yaml.safe_load(index_path.read_text(encoding="utf-8"))
        return loaded if isinstance(loaded, list) else []

    def _write_index(self, entries: list[dict]) -> None:
        self._index_path().write_text(
            yaml.safe_dump(entries, default_flow_style=False, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        logger.debug("updated index %s (%d entries)", self._index_path(), len(entries))

    def _update_index(self, presentation: SlidePresentation, path: Path) -> None:
        """Upsert the index entry for a written presentation."""
        entries = [e for e in self._read_index() if e.get("id") != presentation.id]
        entries.append({
            "id": presentation.id,
            "title": presentation.title,
            "repository": presentation.repository.url,
            "mode": presentation.mode,
            "language": presentation.language,
            "duration": presentation.duration,
            "path": str(path),
            "timestamp": presentation.updated_at.isoformat(),
        })
        self._write_index(entries)

    def _remove_from_index(self, presentation_id: str) -> None:
        entries = self._read_index()
        kept = [e for e in entries if e.get("id") != presentation_id]
        if len(kept) != len(entries):
            self._write_index(kept)
