"""Pipeline state, progress events and per-run records."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from repodeck.insights.models import Insights
from repodeck.narrative.models import StoryStructure
from repodeck.slides.models import SlidePresentation
from repodeck.vcs.models import RepositoryMetadata


class Stage(str, Enum):
    """Pipeline states, in transition order. ``error`` is terminal."""

    repository = "repository"
    files = "files"
    story = "story"
    slides = "slides"
    complete = "complete"
    error = "error"


STAGE_ORDER: tuple[Stage, ...] = (
    Stage.repository,
    Stage.files,
    Stage.story,
    Stage.slides,
    Stage.complete,
)


class Progress(BaseModel):
    """Emitted on every state transition."""

    model_config = ConfigDict(frozen=True)

    stage: Stage
    progress: int = Field(ge=0, le=100)
    message: str
    error: str | None = None


class GenerationRun(BaseModel):
    """Everything one ``generate`` call produced.

    Mutable; owned by a single run and never shared between runs.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    url: str
    stage: Stage = Stage.repository
    progress: int = 0
    history: list[Progress] = Field(default_factory=list)
    metadata: RepositoryMetadata | None = None
    insights: Insights | None = None
    story: StoryStructure | None = None
    presentation: SlidePresentation | None = None
    from_cache: bool = False
    degraded: bool = False
    saved_to: str | None = None
    error: str | None = None
    failed_stage: Stage | None = None
    exception: Exception | None = Field(default=None, exclude=True)
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None

    @property
    def succeeded(self) -> bool:
        return self.stage == Stage.complete

    def raise_for_error(self) -> None:
        """Re-raise the exception that ended the run, if any."""
        if self.exception is not None:
            raise self.exception
