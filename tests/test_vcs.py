"""Tests for repodeck.vcs: URL parsing, manifest parsing, and the GitHub source."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from github import GithubException, UnknownObjectException

from repodeck.cancellation import CancellationToken
from repodeck.config.models import GitHubConfig
from repodeck.errors import AcquisitionError, GenerationCancelled, InvalidInputError
from repodeck.vcs import GitHubMetadataSource, create_source, synthesize_metadata
from repodeck.vcs.manifests import (
    build_repo_file,
    file_importance,
    infer_file_type,
    parse_manifests,
    parse_package_json,
    parse_pyproject,
    parse_requirements_txt,
)
from repodeck.vcs.models import RepositoryMetadata
from repodeck.vcs.urls import RepoRef, canonical_url, parse_repo_url


# ── parse_repo_url ──────────────────────────────────────────────────


class TestParseRepoUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/acme/widget",
            "http://github.com/acme/widget",
            "github.com/acme/widget",
            "https://www.github.com/acme/widget",
            "https://github.com/acme/widget/",
            "https://github.com/acme/widget.git",
            "https://github.com/acme/widget/tree/main/src",
            "  https://github.com/acme/widget  ",
        ],
    )
    def test_accepted_spellings(self, url):
        assert parse_repo_url(url) == RepoRef(owner="acme", repo="widget")

    def test_dotted_repo_name(self):
        ref = parse_repo_url("https://github.com/acme/widget.js")
        assert ref.repo == "widget.js"

    @pytest.mark.parametrize(
        "url",
        ["not-a-url", "", "   ", "https://gitlab.com/acme/widget", "https://github.com/acme"],
    )
    def test_rejected(self, url):
        with pytest.raises(InvalidInputError):
            parse_repo_url(url)

    def test_error_carries_value(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_repo_url("not-a-url")
        assert exc_info.value.value == "not-a-url"
        assert "not-a-url" in str(exc_info.value)

    def test_ref_properties(self):
        ref = RepoRef(owner="acme", repo="widget")
        assert ref.full_name == "acme/widget"
        assert ref.url == "https://github.com/acme/widget"

    def test_canonical_url_collapses_spellings(self):
        assert canonical_url("github.com/acme/widget.git/") == canonical_url(
            "https://github.com/acme/widget"
        )


# ── File classification ─────────────────────────────────────────────


class TestFileClassification:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("README.md", 10),
            ("package.json", 9),
            ("backend/requirements.txt", 9),
            ("src/app.py", 8),
            ("tests/test_app.py", 7),
            ("webpack.config.js", 6),
            ("Dockerfile", 6),
            ("docs/guide.md", 5),
            ("LICENSE", 3),
        ],
    )
    def test_importance(self, path, expected):
        assert file_importance(path) == expected

    def test_importance_always_in_range(self, sample_metadata):
        for f in sample_metadata.files:
            assert 3 <= file_importance(f.path) <= 10

    def test_infer_file_type(self):
        assert infer_file_type("src/App.tsx") == "react"
        assert infer_file_type("main.py") == "python"
        assert infer_file_type("Makefile") == "unknown"
        assert infer_file_type("data.bin") == "unknown"

    def test_build_repo_file_none_size(self):
        f = build_repo_file("src/main.go", None)
        assert f.size == 0
        assert f.type == "go"
        assert f.importance == 8


# ── Manifest parsing ────────────────────────────────────────────────


class TestManifestParsing:
    def test_package_json_runtime_and_dev(self):
        content = '{"dependencies": {"react": "^18"}, "devDependencies": {"jest": "^29"}}'
        deps = parse_package_json(content)
        assert [(d.name, d.kind) for d in deps] == [("react", "runtime"), ("jest", "dev")]

    def test_package_json_invalid(self):
        assert parse_package_json("{not json") == []
        assert parse_package_json("[1, 2]") == []

    def test_requirements_txt(self):
        content = "# deps\nrequests==2.31.0\nflask>=2.0\n-r base.txt\n\nnumpy\n"
        deps = parse_requirements_txt(content)
        assert [(d.name, d.version) for d in deps] == [
            ("requests", "2.31.0"),
            ("flask", "latest"),
            ("numpy", "latest"),
        ]

    def test_pyproject_multiline(self):
        content = '[project]\nname = "x"\ndependencies = [\n  "pydantic>=2.5",\n  "typer",\n]\n'
        deps = parse_pyproject(content)
        assert [(d.name, d.version) for d in deps] == [("pydantic", ">=2.5"), ("typer", "latest")]

    def test_pyproject_single_line(self):
        deps = parse_pyproject('dependencies = ["rich", "pyyaml>=6"]')
        assert [d.name for d in deps] == ["rich", "pyyaml"]

    def test_parse_manifests_dedupes_by_name(self):
        deps = parse_manifests(
            {
                "requirements.txt": "Requests==2.0\n",
                "pyproject.toml": 'dependencies = ["requests", "typer"]',
            }
        )
        assert [d.name for d in deps] == ["Requests", "typer"]

    def test_parse_manifests_ignores_unknown(self):
        assert parse_manifests({"Gemfile": "gem 'rails'"}) == []


# ── Models and fallback ─────────────────────────────────────────────


class TestRepositoryMetadata:
    def test_blank_owner_rejected(self):
        with pytest.raises(ValueError):
            RepositoryMetadata(owner="  ", name="x", url="https://github.com/x/x")

    def test_language_stats_sorted(self, sample_metadata):
        stats = sample_metadata.language_stats()
        assert [s.language for s in stats] == ["TypeScript", "CSS", "HTML"]
        assert [s.percentage for s in stats] == [80, 15, 5]

    def test_language_stats_empty(self, empty_metadata):
        assert empty_metadata.language_stats() == []

    def test_development_months(self, sample_metadata, empty_metadata):
        assert sample_metadata.development_months() == 12
        assert empty_metadata.development_months() == 0
        backwards = sample_metadata.model_copy(
            update={"updated_at": datetime(2022, 1, 1, tzinfo=UTC)}
        )
        assert backwards.development_months() == 0

    def test_synthesize_metadata(self):
        meta = synthesize_metadata(RepoRef(owner="acme", repo="widget"))
        assert meta.degraded is True
        assert meta.full_name == "acme/widget"
        assert meta.url == "https://github.com/acme/widget"
        assert meta.files == ()
        assert meta.dependencies == ()


# ── GitHubMetadataSource ────────────────────────────────────────────


def _mock_repo():
    repo = MagicMock()
    repo.owner.login = "acme"
    repo.name = "widget"
    repo.full_name = "acme/widget"
    repo.description = "A widget service"
    repo.language = "Python"
    repo.stargazers_count = 12
    repo.forks_count = 3
    repo.default_branch = "main"
    repo.created_at = datetime(2023, 1, 1, tzinfo=UTC)
    repo.updated_at = datetime(2024, 1, 1, tzinfo=UTC)
    repo.get_languages.return_value = {"Python": 9000, "Shell": 100}
    repo.get_topics.return_value = ["api"]

    commits = []
    for i in range(5):
        c = MagicMock()
        c.sha = f"sha{i}"
        c.commit.message = f"change {i}"
        c.commit.author.name = "dev"
        c.commit.author.date = datetime(2023, 6, i + 1, tzinfo=UTC)
        commits.append(c)
    repo.get_commits.return_value = commits

    entries = []
    for path in ["README.md", "requirements.txt", "src/app.py", "src/db.py", "tests/test_app.py"]:
        e = MagicMock()
        e.type = "blob"
        e.path = path
        e.size = 100
        entries.append(e)
    tree_dir = MagicMock()
    tree_dir.type = "tree"
    tree_dir.path = "src"
    repo.get_git_tree.return_value = MagicMock(tree=[tree_dir, *entries])

    repo.get_readme.return_value = MagicMock(decoded_content=b"# Widget\n\nServes widgets.")

    def _contents(path, ref=None):
        if path == "requirements.txt":
            return MagicMock(decoded_content=b"fastapi==0.110.0\nsqlalchemy\n")
        raise UnknownObjectException(404, "Not Found", None)

    repo.get_contents.side_effect = _contents
    return repo


@pytest.fixture
def github_source():
    source = GitHubMetadataSource(GitHubConfig(max_files=4, max_commits=3), token="t")
    client = MagicMock()
    client.get_repo.return_value = _mock_repo()
    source._client = client
    return source


class TestGitHubMetadataSource:
    async def test_fetch_builds_metadata(self, github_source):
        meta = await github_source.fetch("https://github.com/acme/widget")
        github_source._client.get_repo.assert_called_once_with("acme/widget")
        assert meta.full_name == "acme/widget"
        assert meta.url == "https://github.com/acme/widget"
        assert meta.primary_language == "Python"
        assert meta.stars == 12
        assert meta.topics == ("api",)
        assert meta.readme.startswith("# Widget")
        assert [d.name for d in meta.dependencies] == ["fastapi", "sqlalchemy"]
        assert meta.degraded is False

    async def test_caps_applied(self, github_source):
        meta = await github_source.fetch("https://github.com/acme/widget")
        assert len(meta.commits) == 3
        assert len(meta.files) == 4
        assert all(f.path != "src" for f in meta.files)

    async def test_missing_readme(self, github_source):
        repo = github_source._client.get_repo.return_value
        repo.get_readme.side_effect = UnknownObjectException(404, "Not Found", None)
        meta = await github_source.fetch("https://github.com/acme/widget")
        assert meta.readme == ""

    async def test_invalid_url_raises_before_network(self, github_source):
        with pytest.raises(InvalidInputError):
            await github_source.fetch("not-a-url")
        github_source._client.get_repo.assert_not_called()

    async def test_github_error_wrapped(self, github_source):
        github_source._client.get_repo.side_effect = GithubException(404, "Not Found", None)
        with pytest.raises(AcquisitionError) as exc_info:
            await github_source.fetch("https://github.com/acme/widget")
        assert exc_info.value.url == "https://github.com/acme/widget"
        assert isinstance(exc_info.value.__cause__, GithubException)

    async def test_os_error_wrapped(self, github_source):
        github_source._client.get_repo.side_effect = ConnectionResetError("reset")
        with pytest.raises(AcquisitionError):
            await github_source.fetch("https://github.com/acme/widget")

    async def test_cancelled_token_stops_fetch(self, github_source):
        token = CancellationToken()
        token.cancel("user abort")
        with pytest.raises(GenerationCancelled):
            await github_source.fetch("https://github.com/acme/widget", token)
        github_source._client.get_repo.assert_not_called()

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("RD_GH_TOKEN", "abc")
        source = GitHubMetadataSource(GitHubConfig(token_env="RD_GH_TOKEN"))
        assert source._token == "abc"

    def test_create_source(self):
        assert isinstance(create_source(GitHubConfig()), GitHubMetadataSource)
