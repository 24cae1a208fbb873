"""Dataset loader for evaluation queries."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Query:
    """A single labeled evaluation query."""

    id: int
    query: str
    geom: str
    x: str
    y: str


def load_queries(path: Path) -> list[Query]:
    """Load labeled queries from CSV file."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    queries = []

    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)

        for idx, row in enumerate(reader):
            query = Query(
                id=idx,
                query=row.get("query", "").strip(),
                geom=row.get("geom", "").strip().lower(),
                x=row.get("x", "").strip(),
                y=row.get("y", "").strip(),
            )

            if query.query:
                queries.append(query)

    logger.info("Loaded %d queries from %s", len(queries), path)
    return queries
