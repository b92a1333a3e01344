"""GitHub metadata source using PyGithub."""

from __future__ import annotations

import asyncio
import logging
import os
from functools import cached_property

import requests
from github import Auth, Github, GithubException, UnknownObjectException
from github.Repository import Repository

from repodeck.cancellation import CancellationToken
from repodeck.config.models import GitHubConfig
from repodeck.errors import AcquisitionError
from repodeck.vcs.base import MetadataSource
from repodeck.vcs.manifests import MANIFEST_FILES, build_repo_file, parse_manifests
from repodeck.vcs.models import Commit, RepoFile, RepositoryMetadata
from repodeck.vcs.urls import parse_repo_url

logger = logging.getLogger(__name__)


class GitHubMetadataSource(MetadataSource):
    """GitHub implementation of MetadataSource using PyGithub.

    PyGithub is synchronous, so the whole fetch runs inside
    asyncio.to_thread() to avoid blocking the event loop. File lists are
    capped at ``config.max_files`` and commits at ``config.max_commits``.
    """

    def __init__(self, config: GitHubConfig | None = None, token: str | None = None):
        self.config = config or GitHubConfig()
        self._token = token or os.environ.get(self.config.token_env, "")

    @cached_property
    def _client(self) -> Github:
        if self._token:
            return Github(auth=Auth.Token(self._token), timeout=self.config.timeout)
        logger.debug("No %s set, using unauthenticated GitHub access", self.config.token_env)
        return Github(timeout=self.config.timeout)

    async def fetch(
        self, url: str, cancel: CancellationToken | None = None
    ) -> RepositoryMetadata:
        ref = parse_repo_url(url)

        def _sync() -> RepositoryMetadata:
            try:
                return self._build_metadata(ref.full_name, ref.url, cancel)
            except (GithubException, requests.RequestException, OSError) as e:
                raise AcquisitionError(ref.url, e) from e

        return await asyncio.to_thread(_sync)

    def _build_metadata(
        self, full_name: str, url: str, cancel: CancellationToken | None
    ) -> RepositoryMetadata:
        def _checkpoint() -> None:
            if cancel is not None:
                cancel.raise_if_cancelled()

        _checkpoint()
        repo = self._client.get_repo(full_name)
        _checkpoint()
        languages = repo.get_languages()
        _checkpoint()
        commits = self._commits(repo)
        _checkpoint()
        files = self._files(repo)
        _checkpoint()
        readme = self._readme(repo)
        _checkpoint()
        dependencies = parse_manifests(self._manifests(repo))

        logger.info(
            "fetched %s: %d files, %d commits, %d dependencies",
            full_name, len(files), len(commits), len(dependencies),
        )
        return RepositoryMetadata(
            owner=repo.owner.login,
            name=repo.name,
            url=url,
            description=repo.description or "",
            primary_language=repo.language or "Unknown",
            languages=languages,
            dependencies=tuple(dependencies),
            commits=tuple(commits),
            files=tuple(files),
            readme=readme,
            stars=repo.stargazers_count,
            forks=repo.forks_count,
            topics=tuple(repo.get_topics()),
            default_branch=repo.default_branch,
            created_at=repo.created_at,
            updated_at=repo.updated_at,
        )

    def _commits(self, repo: Repository) -> list[Commit]:
        result: list[Commit] = []
        for c in repo.get_commits()[: self.config.max_commits]:
            author = c.commit.author
            result.append(
                Commit(
                    sha=c.sha,
                    message=c.commit.message,
                    author=(author.name if author else None) or "Unknown",
                    timestamp=author.date if author else None,
                )
            )
        return result

    def _files(self, repo: Repository) -> list[RepoFile]:
        tree = repo.get_git_tree(repo.default_branch, recursive=True)
        blobs = [e for e in tree.tree if e.type == "blob"]
        return [build_repo_file(e.path, e.size) for e in blobs[: self.config.max_files]]

    def _readme(self, repo: Repository) -> str:
        try:
            return repo.get_readme().decoded_content.decode("utf-8", errors="replace")
        except UnknownObjectException:
            logger.debug("No README in %s", repo.full_name)
            return ""

    def _manifests(self, repo: Repository) -> dict[str, str]:
        found: dict[str, str] = {}
        for path in MANIFEST_FILES:
            try:
                content = repo.get_contents(path, ref=repo.default_branch)
            except UnknownObjectException:
                continue
            if isinstance(content, list):
                continue
            found[path] = content.decoded_content.decode("utf-8", errors="replace")
        return found
