"""
Relevance search over project feature collections.

A feature matches when the trimmed, case-folded query is a substring of
any of its searchable fields (see ``fields``). Matches are scored with the
weight table in ``scoring``, ordered by descending score with input order
breaking ties, and capped at ``limit`` entries.

The search is a pure function of its inputs: features are returned by
reference, nothing is mutated, nothing is cached, and degenerate input
(blank query, missing collection, missing feature list) yields ``[]``
instead of an exception.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import logging
from typing import Any

from resilience_search.observability.metrics import SEARCH_LATENCY, SEARCH_REQUESTS, track_latency
from resilience_search.observability.tracing import create_span
from resilience_search.search.fields import extract_fields, normalize_text
from resilience_search.search.scoring import is_match, score_fields


logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 10
MAX_RESULT_LIMIT = 10


@dataclass(frozen=True)
class ScoredMatch:
    """A matching feature, its relevance score and its input position."""

    feature: Any
    score: int
    position: int


def normalize_query(query: Any) -> str | None:
    """Return the comparison form of a query, or None when there is no search."""
    if not isinstance(query, str):
        return None
    term = normalize_text(query)
    return term or None


def clamp_limit(limit: Any) -> int:
    """Coerce a requested result count into the range the engine serves."""
    if not isinstance(limit, int) or isinstance(limit, bool):
        return DEFAULT_RESULT_LIMIT
    return min(limit, MAX_RESULT_LIMIT)


def get_features(collection: Any) -> Sequence[Any]:
    """Return the feature sequence of a collection, or an empty tuple.

    Accepts mappings with a ``features`` key (parsed GeoJSON) and objects
    exposing a ``features`` attribute.
    """
    if collection is None:
        return ()
    if isinstance(collection, Mapping):
        features = collection.get("features")
    else:
        features = getattr(collection, "features", None)
    if not isinstance(features, Sequence) or isinstance(features, (str, bytes)):
        return ()
    return features


def get_properties(feature: Any) -> Any:
    """Return the property bag of a feature (mapping or attribute style)."""
    if isinstance(feature, Mapping):
        return feature.get("properties")
    return getattr(feature, "properties", None)


def rank_matches(term: str, features: Sequence[Any]) -> list[ScoredMatch]:
    """Score every feature matching a normalized term, best first.

    The full ranked list is returned; callers truncate. Equal scores keep
    their input order.
    """
    matches = []
    for position, feature in enumerate(features):
        fields = extract_fields(get_properties(feature))
        if not is_match(fields, term):
            continue
        matches.append(ScoredMatch(feature=feature, score=score_fields(fields, term), position=position))
    return sorted(matches, key=lambda match: (-match.score, match.position))


def rank_projects(query: Any, collection: Any) -> list[ScoredMatch]:
    """Rank every feature of a collection matching a raw query.

    Degenerate input yields an empty list. The result is not truncated.
    """
    term = normalize_query(query)
    if term is None:
        return []
    features = get_features(collection)
    if not features:
        return []

    with create_span("search.projects", attributes={"search.query_length": len(term)}) as span:
        with track_latency(SEARCH_LATENCY, source="engine"):
            ranked = rank_matches(term, features)
        span.set_attribute("search.matches", len(ranked))
        logger.debug(
            "Project search for %r scanned %d features: %d matches",
            term,
            len(features),
            len(ranked),
            extra={"query": term, "scanned": len(features), "matches": len(ranked)},
        )

    SEARCH_REQUESTS.inc(outcome="hit" if ranked else "miss")
    return ranked


def search_projects(query: Any, collection: Any, limit: int = DEFAULT_RESULT_LIMIT) -> list[Any]:
    """Search a feature collection and return the best matching features.

    Args:
        query: Free text typed by the user. Blank or non-string queries
            mean "no active search".
        collection: FeatureCollection-like mapping or object.
        limit: Maximum number of features returned, capped at
            ``MAX_RESULT_LIMIT``. Non-integer limits fall back to the default.

    Returns:
        Up to ``limit`` features from ``collection``, highest relevance first.
    """
    limit = clamp_limit(limit)
    if limit < 1:
        return []
    return [match.feature for match in rank_projects(query, collection)[:limit]]
