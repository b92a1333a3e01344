"""Speaker script generation: a story becomes a timed talk track.

Four sections (why, approach, result, next) carry base timings that are
scaled to the deck length. The last section absorbs rounding, so a script
always totals ``duration * 60`` seconds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from repodeck.insights import compute_insights
from repodeck.insights.models import Insights
from repodeck.narrative import templates
from repodeck.narrative.models import (
    EngagingQuestion,
    Metrics,
    Roadmap,
    StorySection,
    StoryStructure,
    TechStack,
)
from repodeck.script.models import (
    EmphasisPoint,
    EngagementPrompt,
    PresentationScript,
    ScriptSection,
    SectionTiming,
    SpeakerCue,
    TransitionCue,
)
from repodeck.script.text import SCRIPT_TEXT
from repodeck.vcs.models import RepositoryMetadata

logger = logging.getLogger(__name__)

AUDIENCES = ("technical", "business", "general")

# section -> (estimated, minimum, maximum, critical points), in seconds
BASE_TIMINGS: dict[str, tuple[int, int, int, tuple[int, ...]]] = {
    "why": (60, 45, 75, (10, 35)),
    "approach": (90, 75, 105, (15, 45)),
    "result": (75, 60, 90, (20, 50)),
    "next": (90, 75, 105, (15, 60, 80)),
}
BASE_TOTAL = sum(t[0] for t in BASE_TIMINGS.values())


def section_timings(duration: int) -> dict[str, SectionTiming]:
    """Scale the base timings so the estimates sum to ``duration * 60``."""
    target = duration * 60
    ratio = target / BASE_TOTAL
    names = list(BASE_TIMINGS)
    estimates = [round(BASE_TIMINGS[name][0] * ratio) for name in names]
    estimates[-1] += target - sum(estimates)

    timings = {}
    for name, estimated in zip(names, estimates):
        _, low, high, points = BASE_TIMINGS[name]
        timings[name] = SectionTiming(
            estimated=estimated,
            minimum=min(round(low * ratio), estimated),
            maximum=max(round(high * ratio), estimated),
            critical_points=tuple(min(round(p * ratio), estimated) for p in points),
        )
    return timings


def _strip_stop(value: str) -> str:
    return value.rstrip("。.！!")


class _ScriptBuilder:
    """Cues, emphasis and engagement prompts for one generate_script() call."""

    def __init__(
        self,
        story: StoryStructure,
        meta: RepositoryMetadata,
        insights: Insights,
        language: str,
        audience: str,
        ratio: float,
    ) -> None:
        self.story = story
        self.meta = meta
        self.insights = insights
        self.language = language
        self.audience = audience
        self.ratio = ratio
        self.builders: dict[str, Callable[[], dict]] = {
            "why": self.why,
            "approach": self.approach,
            "result": self.result,
            "next": self.next_steps,
        }

    def line(self, key: str, /, **values: object) -> str:
        return templates.text(SCRIPT_TEXT, self.language, key).format(**values)

    def at(self, seconds: int) -> int:
        return round(seconds * self.ratio)

    def content(self, name: str, section: StorySection) -> str:
        return f"{section.content}\n\n{self.line(f'memo_{name}')}"

    def _question(self) -> str:
        why = self.story.why
        if why.hook:
            return why.hook
        for element in why.visual_elements:
            if isinstance(element, EngagingQuestion):
                return element.question
        return self.line("default_question")

    def why(self) -> dict:
        question = self._question()
        problem_section = self.story.problem
        problem = _strip_stop(
            problem_section.bullets[0] if problem_section.bullets else problem_section.title
        )
        return {
            "cues": (
                SpeakerCue(
                    type="opening", content=self.line("opening_breath"), at_seconds=0, pause_after=2
                ),
                SpeakerCue(
                    type="interaction",
                    content=self.line("opening_question", question=question),
                    at_seconds=self.at(10),
                    tone="thoughtful",
                    pause_after=3,
                ),
                SpeakerCue(
                    type="explanation",
                    content=self.line("opening_problem", problem=problem),
                    at_seconds=self.at(20),
                    tone="friendly",
                ),
                SpeakerCue(
                    type="emphasis",
                    content=self.line("opening_promise", name=self.meta.name),
                    at_seconds=self.at(35),
                    tone="enthusiastic",
                ),
            ),
            "emphasis": (
                EmphasisPoint(
                    text=question,
                    technique="pause",
                    importance="critical",
                    suggestion=self.line("suggest_question"),
                ),
                EmphasisPoint(
                    text=problem,
                    technique="volume",
                    importance="high",
                    suggestion=self.line("suggest_problem"),
                ),
            ),
            "engagement": (
                EngagementPrompt(
                    type="question",
                    content=question,
                    at_seconds=self.at(10),
                    fallback=self.line("question_fallback"),
                ),
            ),
        }

    def approach(self) -> dict:
        stack = next(
            (e for e in self.story.approach.visual_elements if isinstance(e, TechStack)), None
        )
        stack_language = stack.language if stack else self.meta.primary_language
        advanced = self.insights.difficulty == "advanced"

        engagement: tuple[EngagementPrompt, ...] = ()
        if self.audience != "technical":
            engagement = (
                EngagementPrompt(
                    type="analogy",
                    content=self.line("approach_analogy"),
                    at_seconds=self.at(30),
                    fallback=self.line("analogy_fallback"),
                ),
            )

        return {
            "cues": (
                SpeakerCue(
                    type="transition", content=self.line("approach_transition"), at_seconds=0
                ),
                SpeakerCue(
                    type="explanation",
                    content=self.line("approach_stack", language=stack_language),
                    at_seconds=self.at(15),
                    tone="enthusiastic",
                ),
                SpeakerCue(
                    type="explanation",
                    content=self.line(
                        f"approach_{self.audience}", architecture=self.insights.architecture
                    ),
                    at_seconds=self.at(30),
                ),
                SpeakerCue(
                    type="explanation",
                    content=self.line(f"structure_{self.insights.structure}"),
                    at_seconds=self.at(40),
                    tone="thoughtful",
                ),
                SpeakerCue(
                    type="emphasis",
                    content=self.line(f"pace_{self.insights.difficulty}"),
                    at_seconds=self.at(45),
                    pause_after=2 if advanced else 0,
                ),
            ),
            "emphasis": (
                EmphasisPoint(
                    text=self.line("emph_stack"),
                    technique="pace",
                    importance="critical" if advanced else "high",
                    suggestion=self.line("suggest_stack"),
                ),
            ),
            "engagement": engagement,
        }

    def result(self) -> dict:
        metrics = next(
            (e for e in self.story.result.visual_elements if isinstance(e, Metrics)), None
        )
        stars = metrics.stars if metrics else self.meta.stars
        commits = metrics.commits if metrics else len(self.meta.commits)
        months = self.meta.development_months()
        statistic = (
            self.line("result_statistic", commits=commits, months=months)
            if months
            else self.line("result_statistic_short", commits=commits)
        )
        return {
            "cues": (
                SpeakerCue(
                    type="transition",
                    content=self.line("result_transition"),
                    at_seconds=0,
                    tone="enthusiastic",
                ),
                SpeakerCue(
                    type="emphasis",
                    content=self.line("result_metrics", stars=stars, commits=commits),
                    at_seconds=self.at(20),
                ),
                SpeakerCue(
                    type="explanation",
                    content=self.line("result_quality"),
                    at_seconds=self.at(50),
                    tone="thoughtful",
                ),
            ),
            "emphasis": (
                EmphasisPoint(
                    text=self.line("emph_numbers"),
                    technique="volume",
                    importance="high",
                    suggestion=self.line("suggest_numbers"),
                ),
            ),
            "engagement": (
                EngagementPrompt(type="statistic", content=statistic, at_seconds=self.at(25)),
            ),
        }

    def next_steps(self) -> dict:
        section = self.story.next
        steps: list[str] = []
        for element in section.visual_elements:
            if isinstance(element, Roadmap):
                steps = element.steps
                break
        vision = _strip_stop(steps[0] if steps else section.title)
        return {
            "cues": (
                SpeakerCue(
                    type="transition",
                    content=self.line("next_transition"),
                    at_seconds=0,
                    tone="enthusiastic",
                ),
                SpeakerCue(
                    type="emphasis",
                    content=self.line("next_vision", vision=vision),
                    at_seconds=self.at(15),
                    tone="inspiring",
                ),
                SpeakerCue(
                    type="interaction",
                    content=self.line("next_invite"),
                    at_seconds=self.at(60),
                    tone="friendly",
                ),
                SpeakerCue(
                    type="conclusion",
                    content=self.line("next_close"),
                    at_seconds=self.at(80),
                    tone="inspiring",
                    pause_after=3,
                ),
            ),
            "emphasis": (
                EmphasisPoint(
                    text=self.line("emph_vision"),
                    technique="pause",
                    importance="critical",
                    suggestion=self.line("suggest_vision"),
                ),
                EmphasisPoint(
                    text=self.line("emph_together"),
                    technique="repetition",
                    importance="high",
                    suggestion=self.line("suggest_together"),
                ),
            ),
            "engagement": (
                EngagementPrompt(
                    type="demonstration", content=self.line("next_demo"), at_seconds=self.at(30)
                ),
                EngagementPrompt(
                    type="question",
                    content=self.line("next_question"),
                    at_seconds=self.at(45),
                    fallback=self.line("next_fallback"),
                ),
            ),
        }


def generate_script(
    story: StoryStructure,
    meta: RepositoryMetadata,
    duration: int = 3,
    audience: str = "general",
    language: str = templates.DEFAULT_LANGUAGE,
    insights: Insights | None = None,
) -> PresentationScript:
    """Build a speaker script for a story.

    Like ``assemble``, unknown durations become 3 and unknown languages ja;
    unknown audiences become ``general``. Insights are recomputed from
    ``meta`` when not given. The result is deterministic.
    """
    duration = 5 if duration == 5 else 3
    audience = audience if audience in AUDIENCES else "general"
    language = language if language in SCRIPT_TEXT else templates.DEFAULT_LANGUAGE
    insights = insights or compute_insights(meta)

    timings = section_timings(duration)
    builder = _ScriptBuilder(
        story, meta, insights, language, audience, ratio=duration * 60 / BASE_TOTAL
    )

    sections = []
    previous: str | None = None
    for name, build in builder.builders.items():
        story_section: StorySection = getattr(story, name)
        transition = None
        if previous is not None:
            transition = TransitionCue(
                from_section=previous, to_section=name, bridge_text=builder.line(f"bridge_{name}")
            )
        sections.append(
            ScriptSection(
                name=name,
                title=story_section.title,
                content=builder.content(name, story_section),
                timing=timings[name],
                transition=transition,
                **build(),
            )
        )
        previous = name

    logger.debug(
        "script for %s: %s audience, %s difficulty", meta.full_name, audience, insights.difficulty
    )
    return PresentationScript(
        repository=meta.full_name,
        language=language,
        duration=duration,
        audience=audience,
        difficulty=insights.difficulty,
        sections=tuple(sections),
    )
