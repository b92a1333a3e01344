"""Insight engine: heuristic classification of repository metadata."""

from repodeck.insights.engine import compute_insights, detect_architecture
from repodeck.insights.models import CUSTOM_ARCHITECTURE, Insights

__all__ = [
    "CUSTOM_ARCHITECTURE",
    "Insights",
    "compute_insights",
    "detect_architecture",
]
