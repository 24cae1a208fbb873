"""Rule-based chart title synthesis."""

import re

from src.config.constants import (
    CHART_TYPE_LABELS,
    ELLIPSIS,
    SUFFIX_MAX_TITLE_LENGTH,
    SYNTH_TITLE_KEEP,
    SYNTH_TITLE_MAX_LENGTH,
    Geom,
)
from src.config.keywords import ARTICLES, CHART_WORDS, COMMAND_VERBS


def _leading_word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(w) for w in words)
    return re.compile(rf"^(?:{alternatives})\s+", re.IGNORECASE)


class TitleSynthesizer:
    """Turns the raw query into a display title.

    Strips one leading command verb and then one leading article, upper-cases
    the first character, appends a chart-type label to short titles that do
    not already name a chart, and truncates long titles with an ellipsis.
    """

    def __init__(
        self,
        command_verbs: tuple[str, ...] = COMMAND_VERBS,
        articles: tuple[str, ...] = ARTICLES,
        chart_words: tuple[str, ...] = CHART_WORDS,
    ) -> None:
        self._verb_re = _leading_word_pattern(command_verbs)
        self._article_re = _leading_word_pattern(articles)
        self._chart_words = chart_words

    def synthesize(self, query: str, geom: Geom) -> str:
        title = self._verb_re.sub("", query, count=1)
        title = self._article_re.sub("", title, count=1)
        title = title[:1].upper() + title[1:]
        if not title.strip():
            # left empty for the validator's default
            return ""

        lowered = title.lower()
        names_chart = any(word in lowered for word in self._chart_words)
        if not names_chart and len(title) < SUFFIX_MAX_TITLE_LENGTH:
            title = f"{title} - {CHART_TYPE_LABELS[geom]}"

        if len(title) > SYNTH_TITLE_MAX_LENGTH:
            title = title[:SYNTH_TITLE_KEEP] + ELLIPSIS

        return title
