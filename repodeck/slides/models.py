"""Slide deck models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from repodeck.narrative.models import StoryStructure
from repodeck.vcs.models import RepositoryMetadata

Mode = Literal["ted", "imrad"]
Language = Literal["ja", "en", "zh"]
Duration = Literal[3, 5]


class SlideKind(str, Enum):
    """How a renderer should lay out a slide."""

    title = "title"
    content = "content"
    image = "image"
    code = "code"
    chart = "chart"
    conclusion = "conclusion"


class SlidePurpose(str, Enum):
    """The skeleton slot a slide fills."""

    title = "title"
    why = "why"
    problem = "problem"
    approach = "approach"
    architecture = "architecture"
    result = "result"
    next = "next"
    introduction = "introduction"
    methods = "methods"
    implementation = "implementation"
    results = "results"
    analysis = "analysis"
    discussion = "discussion"
    conclusion = "conclusion"


class CodeSnippet(BaseModel):
    language: str
    code: str
    explanation: str = ""


class ChartSpec(BaseModel):
    """Declarative chart; rendering is left to the consumer."""

    type: Literal["bar", "pie"]
    title: str
    labels: list[str]
    data: list[int]

    @field_validator("data")
    @classmethod
    def validate_data(cls, v: list[int], info: ValidationInfo) -> list[int]:
        labels = info.data.get("labels")
        if labels is not None and len(labels) != len(v):
            raise ValueError("labels and data must have the same length")
        return v


class Slide(BaseModel):
    id: str = Field(min_length=1)
    type: SlideKind
    purpose: SlidePurpose
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    bullets: list[str] = Field(default_factory=list)
    code: CodeSnippet | None = None
    chart: ChartSpec | None = None
    speaker_notes: str = Field(min_length=1)
    duration: int = Field(ge=1, description="Time budget in seconds")


class SlidePresentation(BaseModel):
    """A finished deck plus the inputs it was built from."""

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    mode: Mode
    language: Language
    duration: Duration
    slides: list[Slide]
    story: StoryStructure
    repository: RepositoryMetadata
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def total_seconds(self) -> int:
        return sum(slide.duration for slide in self.slides)

    def slide_for(self, purpose: SlidePurpose) -> Slide | None:
        return next((s for s in self.slides if s.purpose == purpose), None)
