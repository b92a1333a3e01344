"""Exception hierarchy for repodeck.

Only the I/O boundary raises these. The pure stages (insights, narrative,
slides) never raise for well-typed input.
"""

from __future__ import annotations


class RepoDeckError(Exception):
    """Base exception for all repodeck errors."""


class InvalidInputError(RepoDeckError):
    """Raised when a repository URL cannot be parsed. Never retried."""

    def __init__(self, value: str, reason: str = "expected https://github.com/<owner>/<repo>") -> None:
        self.value = value
        super().__init__(f"Invalid repository URL {value!r}: {reason}")


class AcquisitionError(RepoDeckError):
    """Wraps a failed metadata fetch with the URL it was fetching."""

    def __init__(self, url: str, cause: Exception | None = None) -> None:
        self.url = url
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to fetch metadata for {url}{detail}")
        self.__cause__ = cause


class GenerationCancelled(RepoDeckError):
    """Raised inside a run when its cancellation token has been triggered."""
