"""Tests for repodeck.insights: rules and the insight engine."""

import pytest

from repodeck.insights import CUSTOM_ARCHITECTURE, compute_insights, detect_architecture
from repodeck.insights import rules
from repodeck.insights.engine import complexity_score
from repodeck.insights.models import Insights
from repodeck.vcs.models import Commit, Dependency, RepoFile, RepositoryMetadata


def _meta(**kwargs) -> RepositoryMetadata:
    base = {"owner": "acme", "name": "thing", "url": "https://github.com/acme/thing"}
    base.update(kwargs)
    return RepositoryMetadata(**base)


def _files(*paths: str) -> tuple[RepoFile, ...]:
    return tuple(RepoFile(path=p) for p in paths)


def make_commits(n: int) -> tuple[Commit, ...]:
    return tuple(Commit(sha=f"{i:07x}") for i in range(n))


# ── Sample repository ───────────────────────────────────────────────


class TestSampleInsights:
    def test_tiers(self, sample_insights):
        assert sample_insights.complexity == "medium"
        assert sample_insights.complexity_score == 3
        assert sample_insights.maturity == "mature"
        assert sample_insights.maturity_score == 7

    def test_frameworks_and_tools(self, sample_insights):
        assert sample_insights.frameworks == ("Next.js", "React")
        assert sample_insights.tools == ("Vite", "Jest", "TypeScript")

    def test_project_type(self, sample_insights):
        assert sample_insights.project_type == "learning"

    def test_secondary_classifications(self, sample_insights):
        assert sample_insights.structure == "source-and-tests"
        assert sample_insights.test_coverage == "medium"
        assert sample_insights.documentation == "good"
        assert sample_insights.design_patterns == ("Service Pattern",)

    def test_strengths_and_risks(self, sample_insights):
        assert sample_insights.strengths == ("active-development", "tested", "well-documented")
        assert sample_insights.risks == ()
        assert "rest-api" in sample_insights.unique_features

    def test_deterministic(self, sample_metadata):
        assert compute_insights(sample_metadata) == compute_insights(sample_metadata)


# ── Empty input ─────────────────────────────────────────────────────


class TestEmptyMetadata:
    def test_lowest_tiers(self, empty_metadata):
        insights = compute_insights(empty_metadata)
        assert insights.complexity == "low"
        assert insights.maturity == "early"
        assert insights.difficulty == "beginner"
        assert insights.documentation == "poor"
        assert insights.structure == "flat"

    def test_fallbacks_recorded(self, empty_metadata):
        insights = compute_insights(empty_metadata)
        assert insights.fallbacks == ("architecture", "frameworks", "project_type", "languages")
        assert insights.architecture == CUSTOM_ARCHITECTURE
        assert insights.is_custom_architecture
        assert insights.project_type == "generic"

    def test_no_gitignore_risk_without_files(self, empty_metadata):
        risks = compute_insights(empty_metadata).risks
        assert risks == ("missing-tests", "thin-documentation", "low-visibility")


# ── Architecture ────────────────────────────────────────────────────


class TestArchitecture:
    def test_mvc(self):
        paths = ["app/models/user.rb", "app/views/index.erb", "app/controllers/home.rb"]
        assert detect_architecture(paths)[0] == "MVC (Model-View-Controller)"

    def test_all_matches_kept_in_priority_order(self):
        paths = [
            "src/models/user.ts",
            "src/views/home.ts",
            "src/controllers/user.ts",
            "src/repository/user.ts",
            "src/service/user.ts",
        ]
        patterns = detect_architecture(paths)
        assert patterns[:2] == ("MVC (Model-View-Controller)", "Layered Architecture")

    def test_component_based(self):
        paths = [f"src/components/c{i}.tsx" for i in range(6)]
        assert detect_architecture(paths) == ("Component-Based Architecture",)

    def test_five_components_is_not_enough(self):
        paths = [f"src/components/c{i}.tsx" for i in range(5)]
        assert "Component-Based Architecture" not in detect_architecture(paths)

    def test_service_oriented(self):
        paths = [f"services/s{i}.py" for i in range(4)]
        assert "Service-Oriented Architecture" in detect_architecture(paths)

    def test_modular_by_depth(self):
        paths = ["a/b/c/d.py", "a/b/c/e.py", "top.py"]
        assert detect_architecture(paths) == ("Modular Design",)

    def test_custom_fallback(self):
        assert detect_architecture(["main.py", "README.md"]) == (CUSTOM_ARCHITECTURE,)
        assert detect_architecture([]) == (CUSTOM_ARCHITECTURE,)

    def test_architecture_is_first_pattern(self):
        insights = compute_insights(
            _meta(files=_files("models/a.py", "views/b.py", "controllers/c.py", "module/x.py"))
        )
        assert insights.architecture == insights.architecture_patterns[0]
        assert len(insights.architecture_patterns) >= 2

    def test_empty_patterns_rejected(self):
        with pytest.raises(ValueError):
            Insights(
                architecture_patterns=(),
                complexity="low",
                complexity_score=0,
                maturity="early",
                maturity_score=0,
            )


# ── Scores ──────────────────────────────────────────────────────────


class TestScores:
    def test_bucket_boundaries(self):
        assert rules.bucket(100, rules.FILE_COUNT_BUCKETS) == 2
        assert rules.bucket(101, rules.FILE_COUNT_BUCKETS) == 3
        assert rules.bucket(20, rules.FILE_COUNT_BUCKETS) == 0

    @pytest.mark.parametrize(
        "score, tier", [(0, "low"), (2, "low"), (3, "medium"), (5, "medium"), (6, "high"), (8, "high")]
    )
    def test_complexity_tier(self, score, tier):
        assert rules.complexity_tier(score) == tier

    def test_complexity_monotonic_in_files(self):
        scores = [complexity_score(n, 2, 10) for n in (0, 21, 51, 101, 500)]
        assert scores == sorted(scores)

    def test_complexity_monotonic_in_commits(self):
        low = compute_insights(_meta(commits=make_commits(10)))
        high = compute_insights(_meta(commits=make_commits(120)))
        assert high.complexity_score > low.complexity_score

    def test_maturity_components(self):
        insights = compute_insights(
            _meta(
                readme="r" * 600,
                stars=60,
                commits=make_commits(51),
                files=_files("src/a.py", "tests/test_a.py", "pyproject.toml"),
            )
        )
        # readme 1 + tests 2 + config 1 + stars 2 + commits 1
        assert insights.maturity_score == 7
        assert insights.maturity == "mature"


# ── Lexicon and project type ────────────────────────────────────────


class TestLexicon:
    def test_framework_from_path_only(self):
        insights = compute_insights(_meta(files=_files("manage.py", "app/views.py")))
        assert "Django" in insights.frameworks

    def test_dependency_order_wins(self):
        labels = rules.match_lexicon(
            ["react", "next"], [], rules.FRAMEWORK_DEPENDENCIES, rules.FRAMEWORK_PATHS
        )
        assert labels == ("Next.js", "React")

    def test_babel_deduplicated(self):
        labels = rules.match_lexicon(
            ["babel-loader", "@babel/core"], [], rules.TOOL_DEPENDENCIES, rules.TOOL_PATHS
        )
        assert labels == ("Babel",)

    def test_docker_tool_from_path(self):
        insights = compute_insights(_meta(files=_files("Dockerfile", ".github/workflows/ci.yml")))
        assert insights.tools == ("Docker", "GitHub Actions")


class TestProjectType:
    @pytest.mark.parametrize(
        "name, description, expected",
        [
            ("toeic-study-app", "", "learning"),
            ("sales-dashboard", "", "dashboard"),
            ("userApi", "", "api"),
            ("weather-cli", "", "cli"),
            ("thing", "A GraphQL server for orders", "api"),
            ("tetris", "A browser game", "game"),
        ],
    )
    def test_from_tokens(self, name, description, expected):
        insights = compute_insights(_meta(name=name, description=description))
        assert insights.project_type == expected

    def test_machine_learning_is_not_a_study_app(self):
        insights = compute_insights(_meta(name="machine-learning-models"))
        assert insights.project_type == "data"

    def test_deep_learning_alone_is_not_learning(self):
        assert rules.project_type_from_tokens(["deep", "learning", "notes"]) is None

    def test_learning_with_other_cue_still_learning(self):
        assert rules.project_type_from_tokens(["deep", "learning", "quiz"]) == "learning"

    def test_topics_are_considered(self):
        insights = compute_insights(_meta(topics=("education",)))
        assert insights.project_type == "learning"

    def test_paths_when_no_tokens(self):
        insights = compute_insights(_meta(name="mystery", files=_files("src/routes/users.js")))
        assert insights.project_type == "api"

    def test_tokenize_camel_case(self):
        assert rules.tokenize("myStudyApp", "web-site") == ["my", "study", "app", "web", "site"]


# ── Strengths, risks, features ──────────────────────────────────────


class TestStrengthsAndRisks:
    def test_dependency_sprawl(self):
        deps = tuple(Dependency(name=f"dep{i}") for i in range(21))
        insights = compute_insights(_meta(dependencies=deps))
        assert "dependency-sprawl" in insights.risks

    def test_large_files(self):
        files = tuple(RepoFile(path=f"data/blob{i}.bin", size=20_000) for i in range(6))
        assert "large-files" in compute_insights(_meta(files=files)).risks

    def test_missing_gitignore(self):
        assert "missing-gitignore" in compute_insights(_meta(files=_files("main.py"))).risks

    def test_unified_stack(self):
        insights = compute_insights(_meta(languages={"Go": 1000}))
        assert "unified-stack" in insights.strengths

    def test_machine_learning_feature(self):
        insights = compute_insights(_meta(dependencies=(Dependency(name="torch"),)))
        assert "machine-learning" in insights.unique_features

    def test_offline_feature_from_readme(self):
        insights = compute_insights(_meta(readme="Works fully offline on any device."))
        assert "offline" in insights.unique_features
