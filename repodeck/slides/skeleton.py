"""Fixed slide skeletons and the per-slide time budget."""

from __future__ import annotations

from repodeck.slides.models import SlideKind, SlidePurpose

# (purpose, kind, only_in_long_form)
_TED: tuple[tuple[SlidePurpose, SlideKind, bool], ...] = (
    (SlidePurpose.title, SlideKind.title, False),
    (SlidePurpose.why, SlideKind.content, False),
    (SlidePurpose.problem, SlideKind.content, False),
    (SlidePurpose.approach, SlideKind.code, True),
    (SlidePurpose.architecture, SlideKind.chart, False),
    (SlidePurpose.result, SlideKind.content, False),
    (SlidePurpose.next, SlideKind.content, True),
    (SlidePurpose.conclusion, SlideKind.conclusion, False),
)

_IMRAD: tuple[tuple[SlidePurpose, SlideKind, bool], ...] = (
    (SlidePurpose.title, SlideKind.title, False),
    (SlidePurpose.introduction, SlideKind.content, False),
    (SlidePurpose.methods, SlideKind.content, False),
    (SlidePurpose.implementation, SlideKind.code, True),
    (SlidePurpose.results, SlideKind.content, False),
    (SlidePurpose.analysis, SlideKind.chart, False),
    (SlidePurpose.discussion, SlideKind.content, True),
    (SlidePurpose.conclusion, SlideKind.conclusion, False),
)

SKELETONS = {"ted": _TED, "imrad": _IMRAD}

LONG_FORM_MINUTES = 5


def skeleton_for(mode: str, duration: int) -> list[tuple[SlidePurpose, SlideKind]]:
    """Ordered (purpose, kind) slots for a mode and duration.

    Long-form-only slots appear when ``duration`` is 5 minutes; unknown modes
    use the TED skeleton.
    """
    long_form = duration >= LONG_FORM_MINUTES
    return [
        (purpose, kind)
        for purpose, kind, long_only in SKELETONS.get(mode, _TED)
        if long_form or not long_only
    ]


def slide_count(mode: str, duration: int) -> int:
    return len(skeleton_for(mode, duration))


def allocate_durations(total_seconds: int, count: int) -> list[int]:
    """Split ``total_seconds`` evenly; the last slide absorbs the remainder."""
    if count <= 0:
        return []
    base, remainder = divmod(total_seconds, count)
    budget = [base] * count
    budget[-1] += remainder
    return budget
