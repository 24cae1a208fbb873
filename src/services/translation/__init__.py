"""Rule-based text-to-visualization-spec translation."""

from src.services.translation.classifier import GeomClassifier
from src.services.translation.extractor import VariableExtractor
from src.services.translation.models import (
    AxisVariables,
    Classification,
    NormalizedQuery,
    VisualizationSpec,
)
from src.services.translation.normalizer import normalize_query
from src.services.translation.title import TitleSynthesizer
from src.services.translation.validator import build_fallback_spec, normalize_spec

__all__ = [
    "AxisVariables",
    "Classification",
    "GeomClassifier",
    "NormalizedQuery",
    "TitleSynthesizer",
    "VariableExtractor",
    "VisualizationSpec",
    "build_fallback_spec",
    "normalize_query",
    "normalize_spec",
]
