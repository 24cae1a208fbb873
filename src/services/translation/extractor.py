"""Axis variable extraction from query keywords."""

from collections.abc import Mapping

from src.config.constants import DEFAULT_X, DEFAULT_Y
from src.config.keywords import (
    CATEGORICAL_KEYWORDS,
    CATEGORICAL_LABELS,
    QUANTITATIVE_KEYWORDS,
    TEMPORAL_DEFAULT_LABEL,
    TEMPORAL_KEYWORDS,
    TEMPORAL_LABELS,
)
from src.services.translation.models import AxisVariables, NormalizedQuery


def _first_hit(text: str, keywords: tuple[str, ...]) -> str | None:
    """Return the first keyword that occurs in *text*, in dictionary order."""
    for kw in keywords:
        if kw in text:
            return kw
    return None


class VariableExtractor:
    """Assigns x/y variable names from ordered keyword dictionaries."""

    def __init__(
        self,
        temporal: tuple[str, ...] = TEMPORAL_KEYWORDS,
        temporal_labels: Mapping[str, str] = TEMPORAL_LABELS,
        categorical: tuple[str, ...] = CATEGORICAL_KEYWORDS,
        categorical_labels: Mapping[str, str] = CATEGORICAL_LABELS,
        quantitative: tuple[str, ...] = QUANTITATIVE_KEYWORDS,
    ) -> None:
        self.temporal = temporal
        self.temporal_labels = temporal_labels
        self.categorical = categorical
        self.categorical_labels = categorical_labels
        self.quantitative = quantitative

    def extract(self, query: NormalizedQuery) -> AxisVariables:
        """Return the (x, y) variable names for *query*."""
        return AxisVariables(x=self.extract_x(query.text), y=self.extract_y(query.text))

    def extract_x(self, text: str) -> str:
        """Temporal keywords take priority over categorical ones."""
        temporal = _first_hit(text, self.temporal)
        if temporal is not None:
            return self.temporal_labels.get(temporal, TEMPORAL_DEFAULT_LABEL)

        categorical = _first_hit(text, self.categorical)
        if categorical is not None:
            return self.categorical_labels.get(categorical, f"{categorical}s")

        return DEFAULT_X

    def extract_y(self, text: str) -> str:
        return _first_hit(text, self.quantitative) or DEFAULT_Y
