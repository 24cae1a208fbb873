"""Query normalization."""

from src.services.translation.models import NormalizedQuery


def normalize_query(text: str) -> NormalizedQuery:
    """Lower-case *text* and split it on whitespace.

    Any string is accepted; whitespace-only input yields no tokens.
    """
    lowered = text.lower()
    return NormalizedQuery(text=lowered, tokens=tuple(lowered.split()))
