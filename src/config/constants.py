"""
Constants, enums, and static values.
"""

from enum import Enum
from types import MappingProxyType


class Geom(str, Enum):
    """Chart geometries, in classifier declaration order."""

    BAR = "bar"
    LINE = "line"
    POINT = "point"
    AREA = "area"


class Confidence(str, Enum):
    """Informational confidence attached to a generated spec."""

    HIGH = "high"  # winning geometry matched at least one keyword
    MEDIUM = "medium"  # no keyword hit, defaulted to bar


class TranslationStep(str, Enum):
    """Translator pipeline stages."""

    NORMALIZE = "normalize"
    CLASSIFY = "classify"
    EXTRACT = "extract"
    TITLE = "title"
    VALIDATE = "validate"


# Display names used as title suffixes
CHART_TYPE_LABELS: MappingProxyType[Geom, str] = MappingProxyType(
    {
        Geom.BAR: "Bar Chart",
        Geom.LINE: "Line Chart",
        Geom.POINT: "Scatter Plot",
        Geom.AREA: "Area Chart",
    }
)

# Spec field defaults
DEFAULT_GEOM = Geom.BAR
DEFAULT_TITLE = "Generated Visualization"
DEFAULT_X = "categories"
DEFAULT_Y = "values"

# Schema bounds enforced by the validator
MAX_TITLE_LENGTH = 100
MAX_AXIS_LENGTH = 50

# Title synthesis bounds
SYNTH_TITLE_MAX_LENGTH = 60
SYNTH_TITLE_KEEP = 57
SUFFIX_MAX_TITLE_LENGTH = 30
ELLIPSIS = "..."

# Fallback title bounds (exception-recovery path)
FALLBACK_TITLE_MAX_LENGTH = 50
FALLBACK_TITLE_KEEP = 47

QUERY_REQUIRED_ERROR = "Query is required."
