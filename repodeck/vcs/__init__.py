"""Repository metadata acquisition for repodeck."""

from repodeck.config.models import GitHubConfig
from repodeck.vcs.base import MetadataSource
from repodeck.vcs.fallback import synthesize_metadata
from repodeck.vcs.github import GitHubMetadataSource
from repodeck.vcs.models import (
    Commit,
    Dependency,
    LanguageStat,
    RepoFile,
    RepositoryMetadata,
)
from repodeck.vcs.urls import RepoRef, canonical_url, parse_repo_url


def create_source(config: GitHubConfig) -> MetadataSource:
    """Create a metadata source from config.

    The token is resolved from the environment variable named in
    config.token_env. A missing token is allowed; public repositories can be
    read unauthenticated at a lower rate limit.
    """
    return GitHubMetadataSource(config)


__all__ = [
    "Commit",
    "Dependency",
    "GitHubMetadataSource",
    "LanguageStat",
    "MetadataSource",
    "RepoFile",
    "RepoRef",
    "RepositoryMetadata",
    "canonical_url",
    "create_source",
    "parse_repo_url",
    "synthesize_metadata",
]
