"""Pydantic models for derived repository insights."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CUSTOM_ARCHITECTURE = "Custom Architecture"

Complexity = Literal["low", "medium", "high"]
Maturity = Literal["early", "developing", "mature"]
ProjectType = Literal[
    "api", "dashboard", "learning", "library", "cli", "data", "web", "mobile", "game", "generic"
]
Structure = Literal["well-structured", "source-and-tests", "source-only", "flat"]
Coverage = Literal["low", "medium", "high"]
Documentation = Literal["poor", "fair", "good", "excellent"]
Difficulty = Literal["beginner", "intermediate", "advanced"]


class Insights(BaseModel):
    """Classification record computed from RepositoryMetadata.

    ``architecture_patterns`` holds every matched architecture rule in
    priority order; ``architecture`` is always its first entry. Strengths,
    risks and unique features are stable keys, localized by the narrative
    layer. ``fallbacks`` names each classification that found no match and
    used its default.
    """

    model_config = ConfigDict(frozen=True)

    architecture_patterns: tuple[str, ...] = Field(min_length=1)
    complexity: Complexity
    complexity_score: int
    maturity: Maturity
    maturity_score: int
    frameworks: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    design_patterns: tuple[str, ...] = ()
    project_type: ProjectType = "generic"
    structure: Structure = "flat"
    test_coverage: Coverage = "low"
    documentation: Documentation = "poor"
    difficulty: Difficulty = "beginner"
    strengths: tuple[str, ...] = ()
    risks: tuple[str, ...] = ()
    unique_features: tuple[str, ...] = ()
    fallbacks: tuple[str, ...] = ()

    @property
    def architecture(self) -> str:
        return self.architecture_patterns[0]

    @property
    def is_custom_architecture(self) -> bool:
        return self.architecture_patterns == (CUSTOM_ARCHITECTURE,)
