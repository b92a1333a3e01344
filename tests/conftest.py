"""Shared test fixtures for repodeck."""

from datetime import UTC, datetime

import pytest
from unittest.mock import AsyncMock, MagicMock

from repodeck.config.models import RepoDeckConfig, StorageConfig
from repodeck.insights import compute_insights
from repodeck.narrative import generate_story
from repodeck.vcs.base import MetadataSource
from repodeck.vcs.models import Commit, Dependency, RepoFile, RepositoryMetadata


def make_commits(n: int) -> tuple[Commit, ...]:
    return tuple(
        Commit(sha=f"{i:07x}", message=f"commit {i}", author="dev")
        for i in range(n)
    )


@pytest.fixture
def sample_metadata():
    """TypeScript web app: 42 stars, 8 forks, 156 commits."""
    return RepositoryMetadata(
        owner="acme",
        name="toeic-study-app",
        url="https://github.com/acme/toeic-study-app",
        description="A spaced-repetition TOEIC vocabulary trainer",
        primary_language="TypeScript",
        languages={"TypeScript": 80000, "CSS": 15000, "HTML": 5000},
        dependencies=(
            Dependency(name="react", version="^18.2.0"),
            Dependency(name="next", version="14.0.0"),
            Dependency(name="vite", version="^5.0.0", kind="dev"),
            Dependency(name="jest", version="^29.0.0", kind="dev"),
        ),
        commits=make_commits(156),
        files=(
            RepoFile(path="package.json", size=900, type="json", importance=10),
            RepoFile(path="README.md", size=2400, type="markdown", importance=9),
            RepoFile(path="src/components/Card.tsx", size=1800, type="typescript", importance=6),
            RepoFile(path="src/components/Deck.tsx", size=2200, type="typescript", importance=6),
            RepoFile(path="src/pages/index.tsx", size=1500, type="typescript", importance=6),
            RepoFile(path="src/services/api.ts", size=1300, type="typescript", importance=6),
            RepoFile(path="tests/Card.test.tsx", size=700, type="typescript", importance=5),
            RepoFile(path="tsconfig.json", size=300, type="json", importance=8),
            RepoFile(path=".gitignore", size=50, type="unknown"),
        ),
        readme="# TOEIC Study App\n\nHelps learners build vocabulary every day.\n" + "x" * 1200,
        stars=42,
        forks=8,
        topics=("toeic", "education"),
        created_at=datetime(2023, 1, 10, tzinfo=UTC),
        updated_at=datetime(2024, 1, 5, tzinfo=UTC),
    )


@pytest.fixture
def empty_metadata():
    """No dependencies, no README, no files: everything falls back."""
    return RepositoryMetadata(owner="someone", name="mystery", url="https://github.com/someone/mystery")


@pytest.fixture
def sample_insights(sample_metadata):
    return compute_insights(sample_metadata)


@pytest.fixture
def sample_story(sample_metadata, sample_insights):
    return generate_story(sample_metadata, sample_insights, "ja")


@pytest.fixture
def mock_source(sample_metadata):
    source = MagicMock(spec=MetadataSource)
    source.fetch = AsyncMock(return_value=sample_metadata)
    return source


@pytest.fixture
def sample_config():
    return RepoDeckConfig()


@pytest.fixture
def storage_config(tmp_path):
    return StorageConfig(base_dir=str(tmp_path / "presentations"))
