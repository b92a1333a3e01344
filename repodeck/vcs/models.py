"""Pydantic models for repository metadata."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Dependency(BaseModel):
    """A declared package dependency."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = "latest"
    kind: Literal["runtime", "dev"] = "runtime"


class Commit(BaseModel):
    """A single commit from the repository history."""

    model_config = ConfigDict(frozen=True)

    sha: str
    message: str = ""
    author: str = "Unknown"
    timestamp: datetime | None = None


class RepoFile(BaseModel):
    """A file (blob) in the repository tree."""

    model_config = ConfigDict(frozen=True)

    path: str
    size: int = 0
    type: str = "unknown"
    importance: int = Field(default=3, ge=3, le=10)


class LanguageStat(BaseModel):
    """Share of one language in the repository, by bytes."""

    model_config = ConfigDict(frozen=True)

    language: str
    bytes: int
    percentage: int


class RepositoryMetadata(BaseModel):
    """Everything the pipeline knows about a repository.

    Immutable once fetched. ``degraded`` is set when the record was
    synthesized from the URL alone because acquisition failed.
    """

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)
    url: str
    description: str = ""
    primary_language: str = "Unknown"
    languages: dict[str, int] = Field(
        default_factory=dict,
        description="Language breakdown in bytes (e.g. {'Python': 45000, 'Shell': 1200})",
    )
    dependencies: tuple[Dependency, ...] = ()
    commits: tuple[Commit, ...] = ()
    files: tuple[RepoFile, ...] = ()
    readme: str = ""
    stars: int = Field(default=0, ge=0)
    forks: int = Field(default=0, ge=0)
    topics: tuple[str, ...] = ()
    default_branch: str = "main"
    created_at: datetime | None = None
    updated_at: datetime | None = None
    degraded: bool = False

    @field_validator("owner", "name")
    @classmethod
    def validate_identity(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("owner and name cannot be empty or whitespace")
        return v

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def development_months(self) -> int:
        """Whole 30-day months between creation and the last update."""
        if self.created_at is None or self.updated_at is None:
            return 0
        return max((self.updated_at - self.created_at).days // 30, 0)

    def language_stats(self) -> list[LanguageStat]:
        """Language shares sorted by bytes descending, percentages rounded."""
        total = sum(self.languages.values())
        if total <= 0:
            return []
        ordered = sorted(self.languages.items(), key=lambda kv: (-kv[1], kv[0]))
        return [
            LanguageStat(
                language=name,
                bytes=count,
                percentage=round(count * 100 / total),
            )
            for name, count in ordered
        ]
