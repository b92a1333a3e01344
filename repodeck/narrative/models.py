"""Pydantic models for the five-part narrative."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from repodeck.vcs.models import LanguageStat

SECTION_NAMES: tuple[str, ...] = ("why", "problem", "approach", "result", "next")


# ---------------------------------------------------------------------------
# Visual element hints (consumed by renderers only)
# ---------------------------------------------------------------------------


class EngagingQuestion(BaseModel):
    type: Literal["engaging-question"] = "engaging-question"
    question: str


class Metrics(BaseModel):
    type: Literal["metrics"] = "metrics"
    stars: int
    forks: int
    commits: int


class TechStack(BaseModel):
    type: Literal["tech-stack"] = "tech-stack"
    language: str
    frameworks: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)


class LanguageBreakdown(BaseModel):
    type: Literal["language-breakdown"] = "language-breakdown"
    stats: list[LanguageStat] = Field(default_factory=list)


class ArchitectureSummary(BaseModel):
    type: Literal["architecture"] = "architecture"
    patterns: list[str]
    complexity: str


class Roadmap(BaseModel):
    type: Literal["roadmap"] = "roadmap"
    steps: list[str]


class TargetAudience(BaseModel):
    type: Literal["target-audience"] = "target-audience"
    audience: str


VisualElement = Annotated[
    Union[
        EngagingQuestion,
        Metrics,
        TechStack,
        LanguageBreakdown,
        ArchitectureSummary,
        Roadmap,
        TargetAudience,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Story
# ---------------------------------------------------------------------------


class StorySection(BaseModel):
    """One narrative section.

    ``bullets`` is the full relevance-ordered list; slide assembly decides
    how many to show. ``hook`` carries the section's rhetorical question
    separately from ``content`` so renderers can reuse it verbatim.
    """

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    bullets: list[str] = Field(default_factory=list)
    hook: str | None = None
    visual_elements: list[VisualElement] = Field(default_factory=list)


class StoryStructure(BaseModel):
    why: StorySection
    problem: StorySection
    approach: StorySection
    result: StorySection
    next: StorySection

    def sections(self) -> Iterator[tuple[str, StorySection]]:
        for name in SECTION_NAMES:
            yield name, getattr(self, name)


class ProjectPurpose(BaseModel):
    """Optional caller-supplied hints that override inferred purpose text."""

    primary_purpose: str = ""
    problem_solved: str = ""
    target_audience: str = ""
    business_value: str = ""
    technical_evidence: list[str] = Field(default_factory=list)
    future_vision: str = ""
    roadmap: list[str] = Field(default_factory=list)
    engaging_questions: list[str] = Field(default_factory=list)
    family: Literal["api", "dashboard", "learning", "library", "cli", "data", "generic"] | None = None
