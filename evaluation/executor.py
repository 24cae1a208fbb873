"""Translator executor for evaluation."""

import logging
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.orchestrator.pipeline import TranslationError, TranslationPipeline

logger = logging.getLogger(__name__)


class Executor:
    """Runs the translator and reports predictions."""

    def __init__(self, pipeline: TranslationPipeline | None = None) -> None:
        self._pipeline = pipeline or TranslationPipeline()

    def run_pipeline(self, query: str) -> dict[str, Any]:
        """Run the translator and return predictions."""
        try:
            spec = self._pipeline.translate(query)
        except TranslationError as e:
            logger.error("Translation failed for %r: %s", query, e)
            return {"error": str(e)}

        return {
            "predicted_geom": spec.geom.value,
            "predicted_x": spec.x,
            "predicted_y": spec.y,
            "predicted_title": spec.title,
            "confidence": spec.confidence.value if spec.confidence else None,
        }
