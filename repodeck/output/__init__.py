"""Presentation persistence."""

from repodeck.output.store import (
    JsonPresentationStore,
    PresentationStore,
    PresentationSummary,
    StoreStats,
)

__all__ = ["JsonPresentationStore", "PresentationStore", "PresentationSummary", "StoreStats"]
