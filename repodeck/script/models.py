"""Pydantic models for a timed presentation script."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Audience = Literal["technical", "business", "general"]
CueType = Literal["opening", "explanation", "emphasis", "transition", "interaction", "conclusion"]
Tone = Literal["confident", "enthusiastic", "thoughtful", "friendly", "inspiring"]


class SpeakerCue(BaseModel):
    """Something to say or do ``at_seconds`` into a section."""

    model_config = ConfigDict(frozen=True)

    type: CueType
    content: str
    at_seconds: int = Field(ge=0)
    tone: Tone = "confident"
    pause_after: int = Field(default=0, ge=0)


class SectionTiming(BaseModel):
    model_config = ConfigDict(frozen=True)

    estimated: int = Field(ge=0)
    minimum: int = Field(ge=0)
    maximum: int = Field(ge=0)
    critical_points: tuple[int, ...] = ()

    @model_validator(mode="after")
    def _ordered(self) -> SectionTiming:
        if not self.minimum <= self.estimated <= self.maximum:
            raise ValueError("timing must satisfy minimum <= estimated <= maximum")
        return self


class EmphasisPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    technique: Literal["volume", "pace", "pause", "gesture", "repetition"]
    importance: Literal["low", "medium", "high", "critical"]
    suggestion: str


class TransitionCue(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_section: str
    to_section: str
    bridge_text: str


class EngagementPrompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["question", "statistic", "analogy", "demonstration"]
    content: str
    at_seconds: int = Field(ge=0)
    fallback: str | None = None


class ScriptSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    content: str
    cues: tuple[SpeakerCue, ...]
    timing: SectionTiming
    emphasis: tuple[EmphasisPoint, ...] = ()
    transition: TransitionCue | None = None
    engagement: tuple[EngagementPrompt, ...] = ()


class PresentationScript(BaseModel):
    """Speaker script for one deck.

    ``total_seconds`` always equals the sum of the sections' estimated
    durations and matches the deck's length in minutes.
    """

    model_config = ConfigDict(frozen=True)

    repository: str
    language: str
    duration: Literal[3, 5]
    audience: Audience
    difficulty: Literal["beginner", "intermediate", "advanced"]
    sections: tuple[ScriptSection, ...]

    @property
    def total_seconds(self) -> int:
        return sum(s.timing.estimated for s in self.sections)
