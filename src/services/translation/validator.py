"""Schema enforcement for generated visualization specs.

Nothing here raises on bad input: every field is repaired independently so
the returned ``VisualizationSpec`` always satisfies the output schema.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from src.config.constants import (
    DEFAULT_GEOM,
    DEFAULT_TITLE,
    DEFAULT_X,
    DEFAULT_Y,
    ELLIPSIS,
    FALLBACK_TITLE_KEEP,
    FALLBACK_TITLE_MAX_LENGTH,
    MAX_AXIS_LENGTH,
    MAX_TITLE_LENGTH,
    Confidence,
    Geom,
)
from src.services.translation.models import VisualizationSpec

logger = logging.getLogger(__name__)


def _as_mapping(candidate: Any) -> Mapping[str, Any]:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump()
    if isinstance(candidate, Mapping):
        return candidate
    logger.debug("Spec candidate of type %s is not a mapping, using defaults", type(candidate).__name__)
    return {}


def _coerce_geom(value: Any) -> Geom:
    try:
        return Geom(value)
    except (ValueError, TypeError):
        logger.debug("Invalid geom %r replaced with %s", value, DEFAULT_GEOM.value)
        return DEFAULT_GEOM


def _coerce_text(field: str, value: Any, default: str, max_length: int) -> str:
    if not isinstance(value, str) or not value.strip():
        logger.debug("Invalid %s %r replaced with %r", field, value, default)
        value = default
    return value[:max_length]


def _coerce_confidence(value: Any) -> Confidence | None:
    if value is None:
        return None
    try:
        return Confidence(value)
    except (ValueError, TypeError):
        return None


def normalize_spec(candidate: Any) -> VisualizationSpec:
    """Repair *candidate* into a schema-conformant ``VisualizationSpec``.

    Args:
        candidate: Mapping or model with ``geom``, ``title``, ``x``, ``y``
            and optionally ``confidence``. Anything else is treated as empty.

    Returns:
        A spec whose geom is a known geometry and whose title/x/y are
        non-empty strings within their length bounds.
    """
    fields = _as_mapping(candidate)
    return VisualizationSpec(
        geom=_coerce_geom(fields.get("geom")),
        title=_coerce_text("title", fields.get("title"), DEFAULT_TITLE, MAX_TITLE_LENGTH),
        x=_coerce_text("x", fields.get("x"), DEFAULT_X, MAX_AXIS_LENGTH),
        y=_coerce_text("y", fields.get("y"), DEFAULT_Y, MAX_AXIS_LENGTH),
        confidence=_coerce_confidence(fields.get("confidence")),
    )


def build_fallback_spec(query: Any) -> VisualizationSpec:
    """Minimal spec used when translation fails: bar chart titled by the query."""
    raw = query if isinstance(query, str) else ""
    title = raw[:1].upper() + raw[1:]
    if len(title) > FALLBACK_TITLE_MAX_LENGTH:
        title = title[:FALLBACK_TITLE_KEEP] + ELLIPSIS
    return normalize_spec(
        {"geom": DEFAULT_GEOM, "title": title, "x": DEFAULT_X, "y": DEFAULT_Y}
    )
