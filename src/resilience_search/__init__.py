"""Relevance-ranked search over resilience project feature collections."""

from resilience_search.search.engine import DEFAULT_RESULT_LIMIT, search_projects


__all__ = ["DEFAULT_RESULT_LIMIT", "search_projects"]

__version__ = "0.1.0"
