"""Main evaluation script - generates JSON results."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from evaluation.config import EvalConfig
from evaluation.executor import Executor
from evaluation.loader import Query, load_queries

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_FIELDS = ("geom", "x", "y")


def evaluate_query(executor: Executor, query: Query) -> dict[str, Any]:
    """Evaluate a single query."""
    prediction = executor.run_pipeline(query.query)

    result: dict[str, Any] = {
        "id": query.id,
        "query": query.query,
        "gold_geom": query.geom,
        "gold_x": query.x,
        "gold_y": query.y,
        **prediction,
    }
    for name in _FIELDS:
        result[f"{name}_match"] = prediction.get(f"predicted_{name}") == getattr(query, name)
    return result


def summarize(results: list[dict[str, Any]]) -> dict[str, float]:
    """Per-field accuracy plus exact-match rate over all labeled fields."""
    total = len(results)
    if not total:
        return {f"{name}_accuracy": 0.0 for name in _FIELDS} | {"exact_match": 0.0}

    summary = {
        f"{name}_accuracy": sum(r[f"{name}_match"] for r in results) / total
        for name in _FIELDS
    }
    summary["exact_match"] = sum(all(r[f"{n}_match"] for n in _FIELDS) for r in results) / total
    return summary


def run_evaluation(config: EvalConfig) -> dict[str, Any]:
    """Run evaluation and return results."""
    queries = load_queries(config.data_path)
    executor = Executor()

    results = []
    for i, query in enumerate(queries):
        results.append(evaluate_query(executor, query))
        logger.info("[%d/%d] %s", i + 1, len(queries), query.query[:60])

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "total_queries": len(results),
            "dataset": config.data_path.name,
        },
        "summary": summarize(results),
        "results": results,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run translator evaluation")
    parser.add_argument("--data", type=str, help="Labeled queries CSV path")
    parser.add_argument("--output", type=str, help="Output JSON path")
    args = parser.parse_args()

    config = EvalConfig()
    if args.data:
        config.data_path = Path(args.data)
    output = run_evaluation(config)

    output_path = Path(args.output) if args.output else config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)

    logger.info("Summary: %s", output["summary"])
    logger.info("Results saved to %s", output_path)


if __name__ == "__main__":
    main()
