"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.app import app
from src.config.settings import Settings
from src.orchestrator.pipeline import TranslationPipeline


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings()


@pytest.fixture
def pipeline():
    """Provide a translator with default keyword tables."""
    return TranslationPipeline()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
