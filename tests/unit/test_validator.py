"""Tests for spec normalization and the fallback spec."""

import pytest

from src.config.constants import Confidence, Geom
from src.services.translation.models import VisualizationSpec
from src.services.translation.validator import build_fallback_spec, normalize_spec

VALID = {"geom": "line", "title": "Traffic over time", "x": "months", "y": "sales"}


class TestNormalizeSpec:
    def test_valid_candidate_passes_through(self):
        spec = normalize_spec(VALID)
        assert spec.geom == Geom.LINE
        assert spec.title == "Traffic over time"
        assert spec.x == "months"
        assert spec.y == "sales"
        assert spec.confidence is None

    @pytest.mark.parametrize("geom", ["pie", "", None, 3, ["bar"], "BAR"])
    def test_unknown_geom_becomes_bar(self, geom):
        assert normalize_spec({**VALID, "geom": geom}).geom == Geom.BAR

    def test_enum_geom_accepted(self):
        assert normalize_spec({**VALID, "geom": Geom.AREA}).geom == Geom.AREA

    @pytest.mark.parametrize("title", ["", "   ", None, 42])
    def test_missing_title_gets_default(self, title):
        assert normalize_spec({**VALID, "title": title}).title == "Generated Visualization"

    def test_title_clamped_to_100(self):
        spec = normalize_spec({**VALID, "title": "t" * 150})
        assert spec.title == "t" * 100

    @pytest.mark.parametrize("value", ["", None, 0, {"name": "x"}])
    def test_missing_axes_get_defaults(self, value):
        spec = normalize_spec({**VALID, "x": value, "y": value})
        assert spec.x == "categories"
        assert spec.y == "values"

    def test_axes_clamped_to_50(self):
        spec = normalize_spec({**VALID, "x": "a" * 80, "y": "b" * 51})
        assert spec.x == "a" * 50
        assert spec.y == "b" * 50

    def test_missing_keys(self):
        spec = normalize_spec({})
        assert spec.model_dump() == {
            "geom": Geom.BAR,
            "title": "Generated Visualization",
            "x": "categories",
            "y": "values",
            "confidence": None,
        }

    @pytest.mark.parametrize("candidate", [None, "garbage", 17, ["bar", "t", "x", "y"]])
    def test_non_mapping_candidate_uses_defaults(self, candidate):
        spec = normalize_spec(candidate)
        assert spec.geom == Geom.BAR
        assert spec.title == "Generated Visualization"

    def test_accepts_model_instance(self):
        model = VisualizationSpec(geom=Geom.POINT, title="Price vs rating", x="items", y="price")
        assert normalize_spec(model) == model

    def test_valid_confidence_kept(self):
        assert normalize_spec({**VALID, "confidence": "high"}).confidence == Confidence.HIGH

    def test_invalid_confidence_dropped(self):
        assert normalize_spec({**VALID, "confidence": "low"}).confidence is None

    def test_does_not_mutate_candidate(self):
        candidate = {"geom": "pie", "title": "", "x": None, "y": "y" * 60}
        normalize_spec(candidate)
        assert candidate == {"geom": "pie", "title": "", "x": None, "y": "y" * 60}


class TestFallbackSpec:
    def test_minimal_spec_from_query(self):
        spec = build_fallback_spec("monthly sales by region")
        assert spec.geom == Geom.BAR
        assert spec.title == "Monthly sales by region"
        assert spec.x == "categories"
        assert spec.y == "values"
        assert spec.confidence is None

    def test_long_query_truncated_to_50(self):
        spec = build_fallback_spec("q" * 80)
        assert spec.title == "Q" + "q" * 46 + "..."
        assert len(spec.title) == 50

    def test_fifty_characters_kept(self):
        assert build_fallback_spec("q" * 50).title == "Q" + "q" * 49

    @pytest.mark.parametrize("query", ["", None, 12])
    def test_unusable_query_gets_default_title(self, query):
        assert build_fallback_spec(query).title == "Generated Visualization"
