"""Context manager for timing and logging translator steps."""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from src.config.constants import TranslationStep
from src.infrastructure.logging.logger import StructuredLogger


class StepContext:
    """Mutable context for a timed translator step."""

    def __init__(self) -> None:
        self.result: Any = None

    def set_result(self, result: Any) -> None:
        self.result = result


@contextmanager
def timed_step(step: TranslationStep, logger: StructuredLogger) -> Iterator[StepContext]:
    """Time a translator step and log its result."""
    ctx = StepContext()
    start = time.perf_counter()
    yield ctx
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.log_step(step.value, {"result": ctx.result}, duration_ms=elapsed_ms)
