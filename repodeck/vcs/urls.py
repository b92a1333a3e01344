"""Repository URL parsing."""

from __future__ import annotations

import re
from typing import NamedTuple

from repodeck.errors import InvalidInputError

_GITHUB_URL = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/"
    r"(?P<owner>[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)/"
    r"(?P<repo>[A-Za-z0-9_.-]+?)"
    r"(?:\.git)?/?(?:[/?#].*)?$",
    re.IGNORECASE,
)


class RepoRef(NamedTuple):
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"


def parse_repo_url(url: str) -> RepoRef:
    """Split a GitHub repository URL into (owner, repo).

    Accepts scheme-less URLs, trailing slashes, ``.git`` suffixes and deep
    links (``/tree/main/src``). Raises InvalidInputError for anything else.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidInputError(str(url), "empty URL")
    match = _GITHUB_URL.match(url.strip())
    if not match:
        raise InvalidInputError(url)
    repo = match.group("repo")
    if repo in (".", ".."):
        raise InvalidInputError(url, "repository name is not valid")
    return RepoRef(owner=match.group("owner"), repo=repo)


def canonical_url(url: str) -> str:
    """Normalize a repository URL so equivalent spellings share a cache key."""
    return parse_repo_url(url).url
