"""Command-line entry point: translate a query or run the HTTP server."""

import argparse
import json
import logging
import sys

from src.config.constants import QUERY_REQUIRED_ERROR
from src.config.settings import get_settings
from src.infrastructure.logging.logger import setup_logging
from src.orchestrator.pipeline import TranslationError, TranslationPipeline
from src.services.translation.validator import build_fallback_spec

logger = logging.getLogger(__name__)


def _translate(args: argparse.Namespace) -> int:
    settings = get_settings()
    pipeline = TranslationPipeline(include_confidence=settings.include_confidence)
    query = " ".join(args.query)
    if not query:
        print(json.dumps({"error": QUERY_REQUIRED_ERROR}), file=sys.stderr)
        return 2

    try:
        spec = pipeline.translate(query)
    except TranslationError as e:
        logger.warning("Translation failed at %s, using fallback", e.step.value)
        spec = build_fallback_spec(query)

    print(json.dumps(spec.model_dump(mode="json", exclude_none=True), indent=2 if args.pretty else None))
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Server is running at http://%s:%s", host, port)
    uvicorn.run("src.app:app", host=host, port=port, reload=args.reload, log_config=None)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn chart descriptions into visualization specs")
    sub = parser.add_subparsers(dest="command", required=True)

    translate = sub.add_parser("translate", help="Print the spec for a query as JSON")
    translate.add_argument("query", nargs="*", help="Free-text chart description")
    translate.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    translate.set_defaults(func=_translate)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, help="Bind host (default: settings.host)")
    serve.add_argument("--port", type=int, help="Bind port (default: settings.port / PORT)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        json_output=not settings.debug,
        silence_noisy_loggers=True,
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
