"""FastAPI dependencies."""

from functools import lru_cache

from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.orchestrator.pipeline import TranslationPipeline


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


@lru_cache
def _build_pipeline(include_confidence: bool) -> TranslationPipeline:
    return TranslationPipeline(include_confidence=include_confidence)


def get_pipeline(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> TranslationPipeline:
    """Shared translator; its keyword tables are read-only."""
    return _build_pipeline(settings.include_confidence)
