"""Narrative generator: five-section story from metadata and insights."""

from repodeck.narrative.describe import describe
from repodeck.narrative.generator import SUPPORTED_LANGUAGES, generate_story, template_family
from repodeck.narrative.models import (
    SECTION_NAMES,
    ProjectPurpose,
    StorySection,
    StoryStructure,
    VisualElement,
)

__all__ = [
    "SECTION_NAMES",
    "SUPPORTED_LANGUAGES",
    "ProjectPurpose",
    "StorySection",
    "StoryStructure",
    "VisualElement",
    "describe",
    "generate_story",
    "template_family",
]
