"""Speaker scripts: timed talk tracks with cues, emphasis and transitions."""

from repodeck.script.generator import AUDIENCES, generate_script, section_timings
from repodeck.script.models import (
    EmphasisPoint,
    EngagementPrompt,
    PresentationScript,
    ScriptSection,
    SectionTiming,
    SpeakerCue,
    TransitionCue,
)

__all__ = [
    "AUDIENCES",
    "EmphasisPoint",
    "EngagementPrompt",
    "PresentationScript",
    "ScriptSection",
    "SectionTiming",
    "SpeakerCue",
    "TransitionCue",
    "generate_script",
    "section_timings",
]
