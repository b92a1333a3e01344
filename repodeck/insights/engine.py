"""Insight engine: RepositoryMetadata -> Insights.

Pure and total. Unknown or empty input degrades to the lowest tier or the
default category and is recorded in ``Insights.fallbacks``; nothing here
raises.
"""

from __future__ import annotations

from repodeck.insights import rules
from repodeck.insights.models import CUSTOM_ARCHITECTURE, Insights
from repodeck.vcs.models import RepositoryMetadata


def detect_architecture(paths: list[str]) -> tuple[str, ...]:
    """All matching architecture patterns in priority order, never empty."""
    matched = tuple(name for name, rule in rules.ARCHITECTURE_RULES if rule(paths))
    return matched or (CUSTOM_ARCHITECTURE,)


def complexity_score(file_count: int, language_count: int, commit_count: int) -> int:
    return (
        rules.bucket(file_count, rules.FILE_COUNT_BUCKETS)
        + rules.bucket(language_count, rules.LANGUAGE_COUNT_BUCKETS)
        + rules.bucket(commit_count, rules.COMMIT_COUNT_BUCKETS)
    )


def maturity_score(
    readme_length: int, tested: bool, configured: bool, stars: int, commit_count: int
) -> int:
    score = rules.bucket(readme_length, rules.README_LENGTH_BUCKETS)
    if tested:
        score += rules.TEST_PRESENCE_POINTS
    if configured:
        score += rules.CONFIG_PRESENCE_POINTS
    score += rules.bucket(stars, rules.STAR_BUCKETS)
    score += rules.bucket(commit_count, rules.MATURITY_COMMIT_BUCKETS)
    return score


def difficulty_score(
    language_count: int, file_count: int, dependency_count: int, complexity: str
) -> int:
    score = 2 if language_count > 3 else 0
    score += rules.bucket(file_count, [(100, 2), (50, 1)])
    score += rules.bucket(dependency_count, [(20, 2), (10, 1)])
    score += {"high": 3, "medium": 1}.get(complexity, 0)
    return score


def classify_project_type(meta: RepositoryMetadata, paths: list[str]) -> str:
    tokens = rules.tokenize(meta.name, meta.description, " ".join(meta.topics))
    return (
        rules.project_type_from_tokens(tokens)
        or rules.project_type_from_paths(paths)
        or "generic"
    )


def compute_insights(meta: RepositoryMetadata) -> Insights:
    """Derive the full Insights record for one repository."""
    raw_paths = [f.path for f in meta.files]
    paths = [p.lower() for p in raw_paths]
    dep_names = [d.name.lower() for d in meta.dependencies]

    file_count = len(meta.files)
    language_count = len(meta.languages)
    commit_count = len(meta.commits)
    readme_length = len(meta.readme)

    architecture = detect_architecture(paths)

    c_score = complexity_score(file_count, language_count, commit_count)
    complexity = rules.complexity_tier(c_score)

    tested = rules.has_tests(paths)
    m_score = maturity_score(
        readme_length, tested, rules.has_config(paths), meta.stars, commit_count
    )

    frameworks = rules.match_lexicon(
        dep_names, paths, rules.FRAMEWORK_DEPENDENCIES, rules.FRAMEWORK_PATHS
    )
    tools = rules.match_lexicon(dep_names, paths, rules.TOOL_DEPENDENCIES, rules.TOOL_PATHS)
    design_patterns = tuple(
        name for name, rule in rules.DESIGN_PATTERN_RULES if rule(paths, raw_paths)
    )
    project_type = classify_project_type(meta, paths)

    markdown_files = sum(1 for f in meta.files if f.type == "markdown")
    large_files = sum(1 for f in meta.files if f.size > rules.LARGE_FILE_BYTES)

    fallbacks: list[str] = []
    if architecture == (CUSTOM_ARCHITECTURE,):
        fallbacks.append("architecture")
    if not frameworks:
        fallbacks.append("frameworks")
    if project_type == "generic":
        fallbacks.append("project_type")
    if not meta.languages:
        fallbacks.append("languages")

    return Insights(
        architecture_patterns=architecture,
        complexity=complexity,
        complexity_score=c_score,
        maturity=rules.maturity_tier(m_score),
        maturity_score=m_score,
        frameworks=frameworks,
        tools=tools,
        design_patterns=design_patterns,
        project_type=project_type,
        structure=rules.project_structure(paths),
        test_coverage=rules.test_coverage(paths),
        documentation=rules.documentation_level(markdown_files, readme_length),
        difficulty=rules.difficulty_tier(
            difficulty_score(language_count, file_count, len(meta.dependencies), complexity)
        ),
        strengths=rules.strengths(
            meta.stars, commit_count, tested, readme_length, language_count
        ),
        risks=rules.risks(
            tested, readme_length, meta.stars, len(meta.dependencies), large_files, paths
        ),
        unique_features=rules.unique_features(dep_names, paths, meta.readme),
        fallbacks=tuple(fallbacks),
    )
