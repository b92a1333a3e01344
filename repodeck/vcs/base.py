"""Abstract metadata acquisition interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from repodeck.cancellation import CancellationToken
from repodeck.vcs.models import RepositoryMetadata


class MetadataSource(ABC):
    """Fetches RepositoryMetadata for a repository URL.

    Implementations must raise InvalidInputError for URLs they cannot
    address and AcquisitionError for every other fetch failure, so the
    orchestrator can choose between degraded synthesis and hard failure.
    """

    @abstractmethod
    async def fetch(
        self, url: str, cancel: CancellationToken | None = None
    ) -> RepositoryMetadata:
        """Fetch metadata for the repository at ``url``.

        Args:
            url: Repository URL (e.g. https://github.com/owner/repo).
            cancel: Optional token polled between network calls.
        """
        ...
