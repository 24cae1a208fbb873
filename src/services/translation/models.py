"""Translator models."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from src.config.constants import (
    MAX_AXIS_LENGTH,
    MAX_TITLE_LENGTH,
    Confidence,
    Geom,
)


@dataclass(frozen=True)
class NormalizedQuery:
    """Lower-cased query text and its whitespace tokens."""

    text: str
    tokens: tuple[str, ...]


@dataclass(frozen=True)
class Classification:
    """Winning geometry plus the score table it was picked from."""

    geom: Geom
    score: float
    scores: dict[Geom, float]

    @property
    def confidence(self) -> Confidence:
        return Confidence.HIGH if self.score > 0 else Confidence.MEDIUM


@dataclass(frozen=True)
class AxisVariables:
    """Variable names for the x and y axes."""

    x: str
    y: str


class VisualizationSpec(BaseModel):
    """Validated chart specification returned to clients."""

    geom: Geom = Field(..., description="Chart geometry")
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Chart title")
    x: str = Field(..., min_length=1, max_length=MAX_AXIS_LENGTH, description="X-axis variable name")
    y: str = Field(..., min_length=1, max_length=MAX_AXIS_LENGTH, description="Y-axis variable name")
    confidence: Confidence | None = Field(
        None, description="Informational: high when the geometry matched a keyword"
    )
