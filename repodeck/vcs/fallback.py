"""Degraded metadata synthesis for when acquisition fails."""

from __future__ import annotations

from repodeck.vcs.models import RepositoryMetadata
from repodeck.vcs.urls import RepoRef


def synthesize_metadata(ref: RepoRef) -> RepositoryMetadata:
    """Build the smallest valid RepositoryMetadata from an owner/repo pair.

    Everything except identity is left empty so downstream stages fall back
    to their generic templates.
    """
    return RepositoryMetadata(
        owner=ref.owner,
        name=ref.repo,
        url=ref.url,
        degraded=True,
    )
