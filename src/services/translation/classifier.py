"""Keyword-scoring geometry classifier."""

import logging

from src.config.constants import Geom
from src.config.keywords import GEOM_KEYWORDS, SUBSTRING_WEIGHT, TOKEN_BONUS
from src.services.translation.models import Classification, NormalizedQuery

logger = logging.getLogger(__name__)


class GeomClassifier:
    """Picks a chart geometry by scoring keyword hits in the query.

    Each keyword found anywhere in the lower-cased query adds
    ``SUBSTRING_WEIGHT``; if it is also a standalone token it adds
    ``TOKEN_BONUS`` on top. Candidates are visited in declaration order and
    only a strictly greater score displaces the current winner, so ties
    (including the all-zero case) resolve to ``bar``.
    """

    def __init__(
        self,
        keywords: tuple[tuple[Geom, tuple[str, ...]], ...] = GEOM_KEYWORDS,
    ) -> None:
        self.keywords = keywords

    def score(self, query: NormalizedQuery) -> dict[Geom, float]:
        """Build the score table for *query*, keyed in declaration order."""
        tokens = set(query.tokens)
        scores: dict[Geom, float] = {}
        for geom, keywords in self.keywords:
            total = 0.0
            for kw in keywords:
                if kw in query.text:
                    total += SUBSTRING_WEIGHT
                    if kw in tokens:
                        total += TOKEN_BONUS
            scores[geom] = total
        return scores

    def classify(self, query: NormalizedQuery) -> Classification:
        """Return the winning geometry for *query*."""
        scores = self.score(query)

        winner = Geom.BAR
        best = scores.get(Geom.BAR, 0.0)
        for geom, _ in self.keywords:
            if scores[geom] > best:
                winner = geom
                best = scores[geom]

        logger.debug("Geometry scores for %r: %s -> %s", query.text, scores, winner.value)
        return Classification(geom=winner, score=best, scores=scores)
