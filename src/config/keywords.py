"""
Keyword dictionaries for the text-to-spec translator.

Every table here is read-only and ordered: lookups walk them front to back and
the first hit wins, so entry order is part of the behavior.
"""

from types import MappingProxyType

from src.config.constants import Geom

# =============================================================================
# Geometry triggers (declaration order drives the tie-break)
# =============================================================================

GEOM_KEYWORDS: tuple[tuple[Geom, tuple[str, ...]], ...] = (
    (
        Geom.BAR,
        ("bar", "column", "compare", "comparison", "between", "categorical"),
    ),
    (
        Geom.LINE,
        (
            "line",
            "trend",
            "time",
            "over time",
            "timeline",
            "progression",
            "change",
            "series",
        ),
    ),
    (
        Geom.POINT,
        ("scatter", "correlation", "relationship", "vs", "against", "compared to", "plot"),
    ),
    (
        Geom.AREA,
        ("area", "filled", "cumulative", "stacked", "under curve"),
    ),
)

SUBSTRING_WEIGHT: float = 1.0
TOKEN_BONUS: float = 0.5

# =============================================================================
# Axis variable dictionaries
# =============================================================================

TEMPORAL_KEYWORDS: tuple[str, ...] = (
    "month",
    "year",
    "quarter",
    "week",
    "day",
    "time",
    "date",
    "period",
)

TEMPORAL_LABELS: MappingProxyType[str, str] = MappingProxyType(
    {
        "month": "months",
        "year": "years",
        "quarter": "quarters",
        "week": "weeks",
    }
)
TEMPORAL_DEFAULT_LABEL: str = "time_periods"

CATEGORICAL_KEYWORDS: tuple[str, ...] = (
    "category",
    "type",
    "region",
    "location",
    "department",
    "product",
    "brand",
)

CATEGORICAL_LABELS: MappingProxyType[str, str] = MappingProxyType(
    {
        "region": "regions",
        "location": "regions",
        "product": "products",
        "department": "departments",
    }
)

QUANTITATIVE_KEYWORDS: tuple[str, ...] = (
    "sales",
    "revenue",
    "price",
    "cost",
    "count",
    "amount",
    "total",
    "rating",
    "score",
)

# =============================================================================
# Title synthesis
# =============================================================================

COMMAND_VERBS: tuple[str, ...] = (
    "show",
    "create",
    "display",
    "generate",
    "make",
    "build",
    "plot",
    "chart",
    "graph",
)

ARTICLES: tuple[str, ...] = ("a", "an", "the")

CHART_WORDS: tuple[str, ...] = ("chart", "graph", "plot")
