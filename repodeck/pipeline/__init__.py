"""Async generation pipeline."""

from repodeck.pipeline.models import STAGE_ORDER, GenerationRun, Progress, Stage
from repodeck.pipeline.orchestrator import PipelineOrchestrator, ProgressCallback

__all__ = [
    "STAGE_ORDER",
    "GenerationRun",
    "PipelineOrchestrator",
    "Progress",
    "ProgressCallback",
    "Stage",
]
