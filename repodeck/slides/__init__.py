"""Slide assembler: timed decks from a story."""

from repodeck.slides.assembler import (
    MAX_BULLETS,
    assemble,
    default_presentation_id,
    result_bullets,
)
from repodeck.slides.models import (
    ChartSpec,
    CodeSnippet,
    Slide,
    SlideKind,
    SlidePresentation,
    SlidePurpose,
)
from repodeck.slides.skeleton import allocate_durations, skeleton_for, slide_count

__all__ = [
    "MAX_BULLETS",
    "ChartSpec",
    "CodeSnippet",
    "Slide",
    "SlideKind",
    "SlidePresentation",
    "SlidePurpose",
    "allocate_durations",
    "assemble",
    "default_presentation_id",
    "result_bullets",
    "skeleton_for",
    "slide_count",
]
