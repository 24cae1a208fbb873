"""Tests for the visualization, health and root endpoints."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_pipeline, get_settings_dependency
from src.app import app, create_app
from src.config.constants import TranslationStep
from src.config.settings import Settings
from src.orchestrator.pipeline import TranslationError


@pytest.fixture
def failing_pipeline():
    pipeline = MagicMock()
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    return pipeline


# ==========================================
#  GENERATE VISUALIZATION
# ==========================================


def test_generate_bar_chart(client):
    response = client.post(
        "/generate-visualization", json={"query": "Show a bar chart of monthly sales"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "geom": "bar",
        "title": "Bar chart of monthly sales",
        "x": "months",
        "y": "sales",
        "confidence": "high",
    }


def test_generate_line_chart(client):
    response = client.post(
        "/generate-visualization",
        json={"query": "Create a line chart showing website traffic over time"},
    )
    data = response.json()
    assert response.status_code == 200
    assert data["geom"] == "line"
    assert data["x"] == "time_periods"
    assert data["y"] == "values"


def test_generate_scatter_plot(client):
    response = client.post(
        "/generate-visualization",
        json={"query": "Display a scatter plot of price vs quality ratings"},
    )
    data = response.json()
    assert data["geom"] == "point"
    assert data["x"] == "categories"
    assert data["y"] == "price"


def test_confidence_omitted_when_disabled(client):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(include_confidence=False)
    response = client.post("/generate-visualization", json={"query": "monthly sales"})
    assert response.status_code == 200
    assert "confidence" not in response.json()


# ==========================================
#  CLIENT ERRORS
# ==========================================


@pytest.mark.parametrize(
    "body", [{"query": ""}, {"query": None}, {}, {"query": 0}, {"query": False}, {"query": []}]
)
def test_missing_query_rejected(client, failing_pipeline, body):
    response = client.post("/generate-visualization", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Query is required."}
    failing_pipeline.translate.assert_not_called()


def test_non_string_query_is_validation_error(client, failing_pipeline):
    response = client.post("/generate-visualization", json={"query": 123})
    assert response.status_code == 422
    failing_pipeline.translate.assert_not_called()


def test_no_body_rejected(client, failing_pipeline):
    response = client.post("/generate-visualization")
    assert response.status_code == 400
    assert response.json() == {"error": "Query is required."}
    failing_pipeline.translate.assert_not_called()


# ==========================================
#  FALLBACK
# ==========================================


def test_translation_error_returns_fallback(client, failing_pipeline):
    failing_pipeline.translate.side_effect = TranslationError(
        TranslationStep.CLASSIFY, "monthly sales", RuntimeError("boom")
    )
    response = client.post("/generate-visualization", json={"query": "monthly sales"})
    assert response.status_code == 200
    assert response.json() == {
        "geom": "bar",
        "title": "Monthly sales",
        "x": "categories",
        "y": "values",
    }


def test_unexpected_error_returns_fallback(client, failing_pipeline):
    failing_pipeline.translate.side_effect = KeyError("missing")
    long_query = "compare " + "very " * 20 + "many things"
    response = client.post("/generate-visualization", json={"query": long_query})
    data = response.json()
    assert response.status_code == 200
    assert data["geom"] == "bar"
    assert len(data["title"]) == 50
    assert data["title"].startswith("Compare very")
    assert data["title"].endswith("...")


# ==========================================
#  HEALTH & ROOT
# ==========================================


def test_health(client):
    response = client.get("/health")
    data = response.json()
    assert response.status_code == 200
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert "timestamp" in data


def test_root_without_static_dir(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_root_serves_demo_page_and_assets(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Chartspec demo</h1>", encoding="utf-8")
    (tmp_path / "app.js").write_text("console.log('ready');", encoding="utf-8")
    demo_app = create_app(Settings(static_dir=str(tmp_path)))

    with TestClient(demo_app) as demo_client:
        page = demo_client.get("/")
        asset = demo_client.get("/app.js")
        health = demo_client.get("/health")

    assert page.status_code == 200
    assert page.headers["content-type"].startswith("text/html")
    assert "Chartspec demo" in page.text
    assert asset.status_code == 200
    assert asset.text == "console.log('ready');"
    assert health.json()["status"] == "healthy"


def test_root_without_index_page(tmp_path):
    demo_app = create_app(Settings(static_dir=str(tmp_path)))
    with TestClient(demo_app) as demo_client:
        response = demo_client.get("/")
    assert response.json() == {"message": "Welcome to the Chartspec API"}
