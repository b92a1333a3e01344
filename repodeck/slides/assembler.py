"""Slide assembler: (metadata, story) -> timed SlidePresentation.

The skeleton for ``(mode, duration)`` fixes which slides exist; each slot
has a builder that pulls content from the matching story section. Bullet
truncation happens here and nowhere else.
"""

from __future__ import annotations

import hashlib
import re
from collections.abc import Callable, Sequence
from datetime import datetime

from repodeck.narrative import templates
from repodeck.narrative.describe import describe
from repodeck.narrative.models import StorySection, StoryStructure, TechStack
from repodeck.slides import text
from repodeck.slides.models import ChartSpec, Slide, SlidePresentation, SlidePurpose
from repodeck.slides.skeleton import allocate_durations, skeleton_for
from repodeck.slides.snippets import code_snippet
from repodeck.vcs.models import RepositoryMetadata

MAX_BULLETS = 3

_SLUG = re.compile(r"[^a-z0-9]+")


def truncate(bullets: Sequence[str]) -> list[str]:
    return list(bullets[:MAX_BULLETS])


def default_presentation_id(
    meta: RepositoryMetadata, mode: str, duration: int, language: str
) -> str:
    """Stable id for a deck; regenerating the same configuration reuses it.

    The slug is only for reading. The digest of the full name keeps
    repositories whose slugs coincide (``a-b/c`` and ``a/b-c``) apart.
    """
    full_name = meta.full_name.lower()
    slug = _SLUG.sub("-", full_name).strip("-")
    digest = hashlib.sha256(full_name.encode()).hexdigest()[:8]
    return f"{slug}-{digest}-{mode}-{duration}m-{language}"


def _copy(language: str, key: str, **values: object) -> str:
    return templates.text(text.SLIDE_COPY, language, key).format(**values)


def _title(language: str, key: str) -> str:
    return templates.text(text.SLIDE_TITLES, language, key)


def _mentions(line: str, number: int) -> bool:
    return re.search(rf"(?<!\d){number}(?!\d)", line) is not None


def result_bullets(bullets: Sequence[str], meta: RepositoryMetadata, language: str) -> list[str]:
    """Truncated result bullets that always state the commit and star counts."""
    commits = len(meta.commits)
    commit_line = next((b for b in bullets if _mentions(b, commits)), None) or _copy(
        language, "result_iterations", value=commits
    )
    star_line = next(
        (b for b in bullets if b != commit_line and _mentions(b, meta.stars)), None
    ) or _copy(language, "result_stars", value=meta.stars)
    rest = [b for b in bullets if b not in (commit_line, star_line)]
    return truncate([commit_line, star_line, *rest])


def _frameworks(story: StoryStructure) -> list[str]:
    for element in story.approach.visual_elements:
        if isinstance(element, TechStack):
            return element.frameworks
    return []


def architecture_chart(meta: RepositoryMetadata, language: str) -> ChartSpec:
    stats = meta.language_stats()
    if not stats:
        return ChartSpec(
            type="bar",
            title=_copy(language, "architecture_chart"),
            labels=[_copy(language, "no_languages")],
            data=[0],
        )
    return ChartSpec(
        type="bar",
        title=_copy(language, "architecture_chart"),
        labels=[s.language for s in stats],
        data=[s.bytes for s in stats],
    )


def analysis_chart(meta: RepositoryMetadata, language: str) -> ChartSpec:
    return ChartSpec(
        type="pie",
        title=_copy(language, "analysis_chart"),
        labels=["Stars", "Forks", "Commits"],
        data=[meta.stars, meta.forks, len(meta.commits)],
    )


def speaker_notes(
    purpose: SlidePurpose,
    meta: RepositoryMetadata,
    language: str,
    description: str,
    section: StorySection | None = None,
) -> str:
    template = templates.text(text.NOTES, language, purpose.value)
    return template.format(
        name=meta.name,
        language=meta.primary_language,
        description=description,
        content=section.content if section is not None else "",
        languages=len(meta.languages),
        files=len(meta.files),
        stars=meta.stars,
        forks=meta.forks,
        commits=len(meta.commits),
    ).strip()


class _DeckBuilder:
    """Builds one slide per skeleton slot for a single assemble() call."""

    def __init__(
        self, meta: RepositoryMetadata, story: StoryStructure, mode: str, language: str
    ) -> None:
        self.meta = meta
        self.story = story
        self.mode = mode
        self.language = language
        described, _ = describe(meta, language)
        self.description = described or _copy(language, "default_description")
        self.builders: dict[SlidePurpose, Callable[[], dict]] = {
            SlidePurpose.title: self.title,
            SlidePurpose.why: lambda: self.section(SlidePurpose.why, story.why, hook=True),
            SlidePurpose.problem: lambda: self.section(SlidePurpose.problem, story.problem),
            SlidePurpose.approach: self.approach,
            SlidePurpose.architecture: self.architecture,
            SlidePurpose.result: lambda: self.results(SlidePurpose.result),
            SlidePurpose.next: lambda: self.section(SlidePurpose.next, story.next),
            SlidePurpose.introduction: self.introduction,
            SlidePurpose.methods: self.methods,
            SlidePurpose.implementation: self.implementation,
            SlidePurpose.results: lambda: self.results(SlidePurpose.results),
            SlidePurpose.analysis: self.analysis,
            SlidePurpose.discussion: self.discussion,
            SlidePurpose.conclusion: self.conclusion,
        }

    def notes(self, purpose: SlidePurpose, section: StorySection | None = None) -> str:
        return speaker_notes(purpose, self.meta, self.language, self.description, section)

    def title(self) -> dict:
        content = self.description
        if self.mode == "imrad":
            content += f"\n\n{self.meta.primary_language} | {self.meta.stars}⭐"
        return {
            "title": self.meta.name,
            "content": content,
            "speaker_notes": self.notes(SlidePurpose.title),
        }

    def section(
        self, purpose: SlidePurpose, section: StorySection, hook: bool = False
    ) -> dict:
        content = section.content
        if hook and section.hook:
            content = f"{section.hook}\n\n{content}"
        return {
            "title": _title(self.language, purpose.value),
            "content": content,
            "bullets": truncate(section.bullets),
            "speaker_notes": self.notes(purpose, section),
        }

    def approach(self) -> dict:
        slide = self.section(SlidePurpose.approach, self.story.approach)
        slide["code"] = code_snippet(self.meta, _frameworks(self.story), self.language)
        return slide

    def architecture(self) -> dict:
        stats = self.meta.language_stats()
        return {
            "title": _title(self.language, "architecture"),
            "content": _copy(self.language, "architecture_content"),
            "bullets": truncate([f"{s.language} {s.percentage}%" for s in stats]),
            "chart": architecture_chart(self.meta, self.language),
            "speaker_notes": self.notes(SlidePurpose.architecture),
        }

    def results(self, purpose: SlidePurpose) -> dict:
        return {
            "title": _title(self.language, purpose.value),
            "content": self.story.result.content,
            "bullets": result_bullets(self.story.result.bullets, self.meta, self.language),
            "speaker_notes": self.notes(purpose, self.story.result),
        }

    def introduction(self) -> dict:
        bullets = [
            _copy(self.language, "purpose", value=self.description),
            _copy(self.language, "technology", value=self.meta.primary_language),
        ]
        if self.meta.created_at is not None:
            bullets.append(_copy(self.language, "started_year", value=self.meta.created_at.year))
        bullets += self.story.why.bullets
        return {
            "title": _title(self.language, "introduction"),
            "content": self.story.why.content,
            "bullets": truncate(bullets),
            "speaker_notes": self.notes(SlidePurpose.introduction, self.story.why),
        }

    def methods(self) -> dict:
        lang = self.language
        bullets = [
            templates.label(lang, "primary_language", self.meta.primary_language),
            templates.label(lang, "dependencies", len(self.meta.dependencies)),
            templates.label(lang, "files", len(self.meta.files)),
        ]
        months = self.meta.development_months()
        if months:
            bullets.append(templates.label(lang, "development_period", months))
        return {
            "title": _title(lang, "methods"),
            "content": self.story.approach.content,
            "bullets": truncate(bullets),
            "speaker_notes": self.notes(SlidePurpose.methods, self.story.approach),
        }

    def implementation(self) -> dict:
        return {
            "title": _title(self.language, "implementation"),
            "content": _copy(self.language, "implementation_content"),
            "code": code_snippet(self.meta, _frameworks(self.story), self.language),
            "speaker_notes": self.notes(SlidePurpose.implementation),
        }

    def analysis(self) -> dict:
        return {
            "title": _title(self.language, "analysis"),
            "content": _copy(self.language, "analysis_content"),
            "chart": analysis_chart(self.meta, self.language),
            "speaker_notes": self.notes(SlidePurpose.analysis),
        }

    def _limitation(self) -> str:
        paths = [f.path.lower() for f in self.meta.files]
        if not any("test" in p for p in paths):
            return _copy(self.language, "limit_tests")
        if len(self.meta.dependencies) > 20:
            return _copy(self.language, "limit_dependencies")
        return _copy(self.language, "limit_default")

    def _applications(self) -> str:
        if self.meta.primary_language in ("JavaScript", "TypeScript"):
            return _copy(self.language, "apps_web")
        if self.meta.primary_language == "Python":
            return _copy(self.language, "apps_data")
        return _copy(self.language, "apps_default")

    def discussion(self) -> dict:
        bullets = [_copy(self.language, "limitations", value=self._limitation())]
        if self.story.next.bullets:
            bullets.append(
                _copy(self.language, "future_work", value=self.story.next.bullets[0])
            )
        bullets.append(_copy(self.language, "applications", value=self._applications()))
        return {
            "title": _title(self.language, "discussion"),
            "content": self.story.next.content,
            "bullets": truncate(bullets),
            "speaker_notes": self.notes(SlidePurpose.discussion, self.story.next),
        }

    def conclusion(self) -> dict:
        meta = self.meta
        if self.mode == "imrad":
            content = "\n".join(
                [
                    _copy(self.language, "conclusion_done", name=meta.name),
                    _copy(self.language, "conclusion_languages", value=len(meta.languages)),
                    _copy(self.language, "conclusion_commits", value=len(meta.commits)),
                    "",
                    _copy(self.language, "conclusion_outlook"),
                ]
            )
            title = _title(self.language, "conclusion_imrad")
        else:
            content = f"{meta.name}\n\n{_copy(self.language, 'github_url')}\n{meta.url}"
            title = _title(self.language, "conclusion_ted")
        return {
            "title": title,
            "content": content,
            "speaker_notes": self.notes(SlidePurpose.conclusion),
        }


def assemble(
    meta: RepositoryMetadata,
    story: StoryStructure,
    mode: str = "ted",
    duration: int = 3,
    language: str = templates.DEFAULT_LANGUAGE,
    *,
    presentation_id: str | None = None,
    created_at: datetime | None = None,
) -> SlidePresentation:
    """Lay the story out into the fixed skeleton for ``(mode, duration)``.

    Unknown modes fall back to TED, unknown languages to ja, and any
    duration other than 5 is treated as the 3-minute deck.
    """
    mode = mode if mode in ("ted", "imrad") else "ted"
    language = language if language in text.SLIDE_TITLES else templates.DEFAULT_LANGUAGE
    duration = 5 if duration == 5 else 3

    slots = skeleton_for(mode, duration)
    budget = allocate_durations(duration * 60, len(slots))
    builder = _DeckBuilder(meta, story, mode, language)

    slides = [
        Slide(
            id=str(index),
            type=kind,
            purpose=purpose,
            duration=seconds,
            **builder.builders[purpose](),
        )
        for index, ((purpose, kind), seconds) in enumerate(zip(slots, budget), start=1)
    ]

    extra = {"created_at": created_at, "updated_at": created_at} if created_at else {}
    return SlidePresentation(
        id=presentation_id or default_presentation_id(meta, mode, duration, language),
        title=meta.name,
        mode=mode,
        language=language,
        duration=duration,
        slides=slides,
        story=story,
        repository=meta,
        **extra,
    )

