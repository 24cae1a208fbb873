"""Translation state model."""

from dataclasses import dataclass
from typing import Any, Optional

from src.services.translation.models import (
    AxisVariables,
    Classification,
    NormalizedQuery,
)


@dataclass
class TranslationState:
    """Per-request state passed through the translator stages."""

    # Input
    query: str

    # Step 1: Normalize
    normalized: Optional[NormalizedQuery] = None

    # Step 2: Classify
    classification: Optional[Classification] = None

    # Step 3: Extract
    axes: Optional[AxisVariables] = None

    # Step 4: Title
    title: Optional[str] = None

    def to_candidate(self, include_confidence: bool = True) -> dict[str, Any]:
        """Assemble the tentative spec fields gathered so far."""
        candidate: dict[str, Any] = {
            "geom": self.classification.geom if self.classification else None,
            "title": self.title,
            "x": self.axes.x if self.axes else None,
            "y": self.axes.y if self.axes else None,
        }
        if include_confidence and self.classification:
            candidate["confidence"] = self.classification.confidence
        return candidate
