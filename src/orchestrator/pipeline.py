"""Translation pipeline orchestrator."""

import logging

from src.config.constants import TranslationStep
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.state import TranslationState
from src.orchestrator.step_timer import timed_step
from src.services.translation.classifier import GeomClassifier
from src.services.translation.extractor import VariableExtractor
from src.services.translation.models import VisualizationSpec
from src.services.translation.normalizer import normalize_query
from src.services.translation.title import TitleSynthesizer
from src.services.translation.validator import normalize_spec

logger = logging.getLogger(__name__)


class TranslationError(Exception):
    """Raised when a translator stage fails unexpectedly."""

    def __init__(self, step: TranslationStep, query: str, cause: Exception):
        super().__init__(f"{step.value} failed: {cause}")
        self.step = step
        self.query = query
        self.cause = cause


class TranslationPipeline:
    """Runs normalize -> classify -> extract -> title -> validate for one query.

    Holds only read-only collaborators, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        classifier: GeomClassifier | None = None,
        extractor: VariableExtractor | None = None,
        titles: TitleSynthesizer | None = None,
        include_confidence: bool = True,
    ) -> None:
        self.classifier = classifier or GeomClassifier()
        self.extractor = extractor or VariableExtractor()
        self.titles = titles or TitleSynthesizer()
        self.include_confidence = include_confidence
        self.step_logger = StructuredLogger(__name__)

    def translate(self, query: str) -> VisualizationSpec:
        """Translate a free-text chart request into a validated spec.

        Raises:
            TranslationError: If any stage raises; the caller decides on a
                fallback.
        """
        state = TranslationState(query=query)
        step = TranslationStep.NORMALIZE
        try:
            with timed_step(step, self.step_logger) as ctx:
                state.normalized = normalize_query(query)
                ctx.set_result(state.normalized.tokens)

            step = TranslationStep.CLASSIFY
            with timed_step(step, self.step_logger) as ctx:
                state.classification = self.classifier.classify(state.normalized)
                ctx.set_result(state.classification.scores)

            step = TranslationStep.EXTRACT
            with timed_step(step, self.step_logger) as ctx:
                state.axes = self.extractor.extract(state.normalized)
                ctx.set_result(state.axes)

            step = TranslationStep.TITLE
            with timed_step(step, self.step_logger) as ctx:
                state.title = self.titles.synthesize(query, state.classification.geom)
                ctx.set_result(state.title)

            step = TranslationStep.VALIDATE
            with timed_step(step, self.step_logger) as ctx:
                spec = normalize_spec(state.to_candidate(self.include_confidence))
                ctx.set_result(spec.model_dump(mode="json"))
        except Exception as e:
            self.step_logger.log_error(step.value, e, {"query": query})
            raise TranslationError(step, query, e) from e

        logger.info("Translated query into %s chart (x=%s, y=%s)", spec.geom.value, spec.x, spec.y)
        return spec
