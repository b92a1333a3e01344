"""repodeck - turn a GitHub repository into a timed, five-part slide presentation."""

from repodeck.config import RepoDeckConfig, load_config
from repodeck.insights import Insights, compute_insights
from repodeck.narrative import ProjectPurpose, StoryStructure, generate_story
from repodeck.pipeline import GenerationRun, PipelineOrchestrator, Progress, Stage
from repodeck.script import PresentationScript, generate_script
from repodeck.slides import SlidePresentation, assemble
from repodeck.vcs import MetadataSource, RepositoryMetadata, create_source

__version__ = "0.1.0"

__all__ = [
    "GenerationRun",
    "Insights",
    "MetadataSource",
    "PipelineOrchestrator",
    "PresentationScript",
    "ProjectPurpose",
    "Progress",
    "RepoDeckConfig",
    "RepositoryMetadata",
    "SlidePresentation",
    "Stage",
    "StoryStructure",
    "assemble",
    "compute_insights",
    "create_source",
    "generate_script",
    "generate_story",
    "load_config",
]
