"""Search service orchestration layer.

Holds the project collection for a session and turns ranked features into
display summaries for the presentation layer.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol

from resilience_search.domain.model import ProjectSearchResponse, ProjectSummary
from resilience_search.search.engine import (
    DEFAULT_RESULT_LIMIT,
    MAX_RESULT_LIMIT,
    ScoredMatch,
    get_properties,
    rank_projects,
)
from resilience_search.search.fields import STATUS_ALIASES, FieldRole, resolve_alias, resolve_field
from resilience_search.utils.formatting import format_city_name


logger = logging.getLogger(__name__)


class ProjectRepository(Protocol):
    """Anything that can hand out the session's feature collection."""

    def get(self) -> Any: ...


class ProjectSearchService:
    """High-level project search used by the CLI and other front ends."""

    def __init__(self, repository: ProjectRepository, result_limit: int = DEFAULT_RESULT_LIMIT):
        """Initialize search service with dependencies.

        Args:
            repository: Source of the feature collection (loaded once)
            result_limit: Maximum number of results per query (1 to MAX_RESULT_LIMIT)
        """
        if not 1 <= result_limit <= MAX_RESULT_LIMIT:
            raise ValueError(f"result_limit must be between 1 and {MAX_RESULT_LIMIT}")
        self.repository = repository
        self.result_limit = result_limit

    def _rank(self, query: str | None) -> list[ScoredMatch]:
        return rank_projects(query, self.repository.get())

    def search_features(self, query: str | None) -> list[Any]:
        """Return the raw features for a query, best first."""
        return [match.feature for match in self._rank(query)[: self.result_limit]]

    def search(self, query: str | None) -> ProjectSearchResponse:
        """Search projects and build display summaries.

        Args:
            query: Free text typed by the user

        Returns:
            ProjectSearchResponse with at most ``result_limit`` summaries
        """
        display_query = query.strip() if isinstance(query, str) else ""
        ranked = self._rank(query)
        top = ranked[: self.result_limit]

        logger.debug(
            "Query %r matched %d projects, returning %d",
            display_query,
            len(ranked),
            len(top),
            extra={"query": display_query, "matches": len(ranked), "returned": len(top)},
        )

        return ProjectSearchResponse(
            query=display_query,
            results=[summarize(match.feature, match.score) for match in top],
            total_matches=len(ranked),
            truncated=len(ranked) > len(top),
        )


def summarize(feature: Any, score: int) -> ProjectSummary:
    """Build a display summary from a feature's property bag."""
    properties = get_properties(feature)
    if not isinstance(properties, Mapping):
        properties = {}
    status = resolve_alias(properties, STATUS_ALIASES).strip()
    return ProjectSummary(
        name=resolve_field(properties, FieldRole.PROJECT_NAME).strip(),
        city=format_city_name(resolve_field(properties, FieldRole.CITY)),
        infrastructure_type=resolve_field(properties, FieldRole.INFRASTRUCTURE_TYPE).strip(),
        category=resolve_field(properties, FieldRole.CATEGORY).strip(),
        disaster_focus=resolve_field(properties, FieldRole.DISASTER_FOCUS).strip(),
        status=status or None,
        score=score,
    )
