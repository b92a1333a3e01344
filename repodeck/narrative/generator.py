"""Narrative generator: (RepositoryMetadata, Insights) -> StoryStructure.

Each section has its own builder. Builders pick text from the localized
tables in ``templates`` for the repository's template family and fill the
slots with concrete numbers from the metadata and insights. Bullets are the
full relevance-ordered list; slide assembly truncates them.
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence

from repodeck.insights.models import Insights
from repodeck.narrative import templates
from repodeck.narrative.describe import describe
from repodeck.narrative.models import (
    ArchitectureSummary,
    EngagingQuestion,
    LanguageBreakdown,
    Metrics,
    ProjectPurpose,
    Roadmap,
    StorySection,
    StoryStructure,
    TargetAudience,
    TechStack,
)
from repodeck.vcs.models import RepositoryMetadata

SUPPORTED_LANGUAGES = ("ja", "en", "zh")


def template_family(insights: Insights, hints: ProjectPurpose | None = None) -> str:
    """Template family for the story; project types without one use generic."""
    if hints is not None and hints.family:
        return hints.family
    if insights.project_type in templates.FAMILIES:
        return insights.project_type
    return "generic"


def stable_choice(options: Sequence[str], key: str) -> str:
    """Pick an option by a checksum of ``key`` so reruns agree."""
    return options[zlib.crc32(key.encode("utf-8")) % len(options)]


def _dedupe(items: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _join(language: str, items: Sequence[str]) -> str:
    return templates.text(templates.LABELS, language, "separator").join(items)


def _sentence_join(language: str, parts: Sequence[str]) -> str:
    glue = "" if language in ("ja", "zh") else " "
    return glue.join(p for p in parts if p)


def _challenges(meta: RepositoryMetadata, insights: Insights) -> list[str]:
    keys: list[str] = []
    if insights.complexity == "high":
        keys.append("complex-codebase")
    if len(meta.languages) > 2:
        keys.append("full-stack")
    if len(meta.files) > 50:
        keys.append("scale")
    if insights.test_coverage == "low" and meta.files:
        keys.append("untested")
    return keys or ["standard"]


# ---------------------------------------------------------------------------
# Section builders
# ---------------------------------------------------------------------------


def build_why(
    meta: RepositoryMetadata,
    insights: Insights,
    language: str,
    family: str,
    hints: ProjectPurpose,
) -> StorySection:
    description, source = describe(meta, language)
    if hints.primary_purpose:
        description = hints.primary_purpose
    elif source == "structure":
        description = ""
    audience = hints.target_audience or templates.family_text(
        language, family, "audience", templates.AUDIENCE_TEXT
    )

    if hints.engaging_questions:
        hook = hints.engaging_questions[0]
    else:
        hook = stable_choice(templates.family_text(language, family, "hooks"), meta.full_name)

    if description:
        opening = templates.phrase(
            language, "why_with_description", name=meta.name, description=description
        )
    else:
        opening = templates.phrase(
            language, "why_without_description", name=meta.name, language=meta.primary_language
        )
    content = _sentence_join(
        language,
        [
            opening,
            templates.family_text(language, family, "why_context").format(name=meta.name),
            templates.phrase(language, "why_audience", audience=audience),
        ],
    )

    bullets = [
        templates.label(language, "primary_language", meta.primary_language),
        templates.label(
            language,
            "project_type",
            templates.text(templates.PROJECT_TYPE_NAMES, language, insights.project_type),
        ),
        templates.label(language, "target_audience", audience),
    ]
    if meta.created_at is not None:
        bullets.append(templates.label(language, "started", meta.created_at.date().isoformat()))
    if meta.updated_at is not None:
        bullets.append(
            templates.label(language, "last_updated", meta.updated_at.date().isoformat())
        )

    return StorySection(
        title=templates.text(templates.SECTION_TITLES, language, "why"),
        content=content,
        bullets=bullets,
        hook=hook,
        visual_elements=[EngagingQuestion(question=hook), TargetAudience(audience=audience)],
    )


def build_problem(
    meta: RepositoryMetadata,
    insights: Insights,
    language: str,
    family: str,
    hints: ProjectPurpose,
) -> StorySection:
    if hints.problem_solved:
        framing = hints.problem_solved
    else:
        stack = (
            templates.phrase(language, "problem_multi_stack")
            if len(meta.languages) > 1
            else templates.phrase(language, "problem_single_stack", language=meta.primary_language)
        )
        scale = templates.phrase(
            language, "problem_large" if len(meta.files) > 50 else "problem_small"
        )
        framing = stack + scale + templates.phrase(language, "problem_closing")

    tier = templates.text(templates.TIER_NAMES, language, insights.complexity)
    content = _sentence_join(
        language,
        [
            framing,
            templates.family_text(language, family, "problem_focus"),
            templates.phrase(
                language, "problem_complexity", tier=tier, score=insights.complexity_score
            ),
        ],
    )

    bullets = [templates.text(templates.CHALLENGE_TEXT, language, k) for k in _challenges(meta, insights)]
    bullets += [templates.text(templates.RISK_TEXT, language, k) for k in insights.risks]

    return StorySection(
        title=templates.text(templates.SECTION_TITLES, language, "problem"),
        content=content,
        bullets=_dedupe(bullets),
    )


def build_approach(
    meta: RepositoryMetadata,
    insights: Insights,
    language: str,
    family: str,
    hints: ProjectPurpose,
) -> StorySection:
    parts = [templates.phrase(language, "approach_base", language=meta.primary_language)]
    if insights.frameworks:
        parts.append(
            templates.phrase(
                language, "approach_frameworks", frameworks=_join(language, insights.frameworks[:3])
            )
        )
    if insights.tools:
        parts.append(
            templates.phrase(language, "approach_tools", tools=_join(language, insights.tools[:3]))
        )
    else:
        parts.append(templates.phrase(language, "approach_no_tools"))
    content = _sentence_join(
        language,
        [
            "".join(parts),
            templates.phrase(language, "approach_architecture", architecture=insights.architecture),
        ],
    )

    bullets = list(hints.technical_evidence)
    bullets.append(templates.label(language, "primary_language", meta.primary_language))
    bullets += [templates.label(language, "framework", fw) for fw in insights.frameworks]
    bullets += [
        templates.label(language, "architecture", pattern)
        for pattern in insights.architecture_patterns
    ]
    bullets += [templates.label(language, "tool", tool) for tool in insights.tools]
    bullets += [
        templates.label(language, "design_pattern", pattern) for pattern in insights.design_patterns
    ]

    return StorySection(
        title=templates.text(templates.SECTION_TITLES, language, "approach"),
        content=content,
        bullets=_dedupe(bullets),
        hook=templates.family_text(language, family, "approach_hook"),
        visual_elements=[
            TechStack(
                language=meta.primary_language,
                frameworks=list(insights.frameworks),
                tools=list(insights.tools),
            ),
            ArchitectureSummary(
                patterns=list(insights.architecture_patterns), complexity=insights.complexity
            ),
            LanguageBreakdown(stats=meta.language_stats()),
        ],
    )


def build_result(
    meta: RepositoryMetadata,
    insights: Insights,
    language: str,
    family: str,
    hints: ProjectPurpose,
) -> StorySection:
    commit_count = len(meta.commits)
    opening = templates.phrase(language, f"result_{insights.maturity}")
    if insights.documentation in ("good", "excellent"):
        opening += templates.phrase(language, "result_readme")
    if meta.stars > 0:
        opening += templates.phrase(language, "result_stars", stars=meta.stars)
    opening += templates.phrase(language, "result_closing")

    content = _sentence_join(
        language,
        [
            opening,
            templates.phrase(language, "result_activity", commits=commit_count),
            hints.business_value or templates.family_text(language, family, "result_focus"),
        ],
    )

    # Commit and star counts lead so the result slide always shows them.
    bullets = [
        templates.label(language, "commits", commit_count),
        templates.label(language, "stars", meta.stars),
        templates.label(language, "forks", meta.forks),
        templates.label(
            language, "maturity", templates.text(templates.TIER_NAMES, language, insights.maturity)
        ),
    ]
    bullets += [templates.text(templates.STRENGTH_TEXT, language, k) for k in insights.strengths]
    bullets += [templates.text(templates.FEATURE_TEXT, language, k) for k in insights.unique_features]
    if meta.files:
        bullets.append(templates.label(language, "files", len(meta.files)))
    if meta.languages:
        bullets.append(templates.label(language, "languages", len(meta.languages)))
    if meta.dependencies:
        bullets.append(templates.label(language, "dependencies", len(meta.dependencies)))
    months = meta.development_months()
    if months:
        bullets.append(templates.label(language, "development_period", months))
    if insights.documentation in ("good", "excellent"):
        bullets.append(templates.label(language, "readme_complete"))

    return StorySection(
        title=templates.text(templates.SECTION_TITLES, language, "result"),
        content=content,
        bullets=_dedupe(bullets),
        hook=templates.family_text(language, family, "result_hook"),
        visual_elements=[Metrics(stars=meta.stars, forks=meta.forks, commits=commit_count)],
    )


def build_next(
    meta: RepositoryMetadata,
    insights: Insights,
    language: str,
    family: str,
    hints: ProjectPurpose,
) -> StorySection:
    audience = hints.target_audience or templates.family_text(
        language, family, "audience", templates.AUDIENCE_TEXT
    )
    content = _sentence_join(
        language,
        [
            templates.phrase(language, "next_opening", name=meta.name),
            hints.future_vision,
            templates.phrase(language, "next_impact", audience=audience),
        ],
    )

    steps = list(hints.roadmap) or list(templates.family_text(language, family, "roadmap"))
    bullets = steps + [
        templates.text(templates.IMPROVEMENT_TEXT, language, k) for k in insights.risks
    ]

    return StorySection(
        title=templates.text(templates.SECTION_TITLES, language, "next"),
        content=content,
        bullets=_dedupe(bullets),
        visual_elements=[Roadmap(steps=steps)],
    )


def generate_story(
    meta: RepositoryMetadata,
    insights: Insights,
    language: str = templates.DEFAULT_LANGUAGE,
    purpose_hints: ProjectPurpose | None = None,
) -> StoryStructure:
    """Build the five-section story for one repository.

    Unsupported languages are treated as ja. Purpose hints, when given,
    override the inferred purpose, audience, roadmap and hook.
    """
    if language not in SUPPORTED_LANGUAGES:
        language = templates.DEFAULT_LANGUAGE
    hints = purpose_hints or ProjectPurpose()
    family = template_family(insights, purpose_hints)
    args = (meta, insights, language, family, hints)
    return StoryStructure(
        why=build_why(*args),
        problem=build_problem(*args),
        approach=build_approach(*args),
        result=build_result(*args),
        next=build_next(*args),
    )
