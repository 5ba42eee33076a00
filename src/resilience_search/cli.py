"""Command-line project search.

Usage:
    resilience-search "miami beach"
    resilience-search flooding --data projects.geojson --limit 5 --json
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError

from resilience_search.adapters.geojson_repository import FeatureCollectionError, GeoJsonProjectRepository
from resilience_search.config import get_settings
from resilience_search.domain.model import ProjectSearchResponse
from resilience_search.observability.logging import configure_logging
from resilience_search.observability.metrics import get_metrics, init_metrics
from resilience_search.observability.tracing import init_tracing
from resilience_search.search.engine import MAX_RESULT_LIMIT
from resilience_search.service_layer.search_service import ProjectSearchService


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 2
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resilience-search",
        description="Search resilience projects by name, city, type, category or hazard.",
    )
    parser.add_argument("query", help="Text to search for (matched as a single phrase)")
    parser.add_argument("--data", type=Path, help="GeoJSON FeatureCollection (default: settings data_path)")
    parser.add_argument(
        "--limit",
        type=int,
        help=f"Maximum number of results, 1 to {MAX_RESULT_LIMIT} (default: settings result_limit)",
    )
    parser.add_argument("--json", action="store_true", help="Print the response as JSON")
    parser.add_argument(
        "--metrics", action="store_true", help="Print Prometheus metrics for the search to stderr afterwards"
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Override the configured log level",
    )
    return parser


def render_text(response: ProjectSearchResponse) -> str:
    if not response.results:
        return f'No projects found matching "{response.query}"'

    lines = []
    for summary in response.results:
        line = f"{summary.score:>3}  {summary.name}"
        if summary.city:
            line += f"  ({summary.city})"
        if summary.infrastructure_type:
            line += f" [{summary.infrastructure_type}]"
        lines.append(line)
    if response.truncated:
        lines.append(f"... showing {len(response.results)} of {response.total_matches} matches")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit is not None and not 1 <= args.limit <= MAX_RESULT_LIMIT:
        parser.error(f"--limit must be between 1 and {MAX_RESULT_LIMIT}")

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid resilience-search configuration:\n{exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(level=args.log_level or settings.log_level, json_output=settings.log_json)
    init_metrics(service_name=settings.service_name)
    init_tracing(service_name=settings.service_name)

    limit = args.limit if args.limit is not None else settings.result_limit

    repository = GeoJsonProjectRepository(args.data or settings.data_path)
    service = ProjectSearchService(repository, result_limit=limit)

    try:
        response = service.search(args.query)
    except FeatureCollectionError as exc:
        logger.error("Cannot search projects: %s", exc)
        return EXIT_DATA_ERROR

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print(render_text(response))
    if args.metrics:
        sys.stderr.write(get_metrics().decode("utf-8"))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
