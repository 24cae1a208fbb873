"""Visualization and health endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_pipeline, get_settings_dependency
from src.api.models import ErrorResponse, GenerateVisualizationRequest, HealthResponse
from src.config.constants import QUERY_REQUIRED_ERROR
from src.config.settings import Settings
from src.orchestrator.pipeline import TranslationError, TranslationPipeline
from src.services.translation.models import VisualizationSpec
from src.services.translation.validator import build_fallback_spec

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-visualization",
    response_model=VisualizationSpec,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse, "description": "Missing or empty query"}},
)
async def generate_visualization(
    request: GenerateVisualizationRequest | None = None,
    pipeline: TranslationPipeline = Depends(get_pipeline),  # noqa: B008
) -> VisualizationSpec | JSONResponse:
    """Translate a free-text chart request into a visualization spec.

    Translation failures never reach the client: a generic bar-chart spec
    built from the raw query is returned instead.
    """
    query = request.query if request else None
    if not query:
        logger.warning("Rejected visualization request without a query")
        return JSONResponse(status_code=400, content={"error": QUERY_REQUIRED_ERROR})

    logger.info("Processing query: %s", query)
    try:
        return pipeline.translate(query)
    except TranslationError as e:
        logger.warning("Translation failed at %s, returning fallback spec", e.step.value)
    except Exception as e:
        logger.error("Unexpected error translating query: %s", e, exc_info=True)
    return build_fallback_spec(query)


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
