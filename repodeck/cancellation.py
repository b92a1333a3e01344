"""Cooperative cancellation shared between the orchestrator and I/O code."""

from __future__ import annotations

import threading

from repodeck.errors import GenerationCancelled


class CancellationToken:
    """A one-way flag a caller sets to abandon a generation run.

    Thread-safe, so metadata sources running inside ``asyncio.to_thread``
    can poll it between network calls.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self.reason: str = ""

    def cancel(self, reason: str = "cancelled by caller") -> None:
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise GenerationCancelled(self.reason or "cancelled")
