"""Declarative relevance weights for project search.

Each field role carries a weight awarded when the field contains the
query. The project name additionally carries a prefix weight that replaces
the contains weight when the name starts with the query.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from resilience_search.search.fields import FieldRole


@dataclass(frozen=True)
class FieldWeight:
    """Points awarded by one field."""

    contains_weight: int
    prefix_weight: int | None = None

    @property
    def max_points(self) -> int:
        return max(self.contains_weight, self.prefix_weight or 0)


SCORING_TABLE: Mapping[FieldRole, FieldWeight] = MappingProxyType(
    {
        FieldRole.PROJECT_NAME: FieldWeight(contains_weight=5, prefix_weight=10),
        FieldRole.CITY: FieldWeight(contains_weight=3),
        FieldRole.DESCRIPTION: FieldWeight(contains_weight=2),
        FieldRole.INFRASTRUCTURE_TYPE: FieldWeight(contains_weight=2),
        FieldRole.CATEGORY: FieldWeight(contains_weight=1),
        FieldRole.DISASTER_FOCUS: FieldWeight(contains_weight=1),
    }
)

MAX_SCORE = sum(weight.max_points for weight in SCORING_TABLE.values())


def field_score(value: str, term: str, weight: FieldWeight) -> int:
    """Score one normalized field value against a normalized term."""
    if term not in value:
        return 0
    if weight.prefix_weight is not None and value.startswith(term):
        return max(weight.prefix_weight, weight.contains_weight)
    return weight.contains_weight


def is_match(fields: Mapping[FieldRole, str], term: str) -> bool:
    """True when the term is a substring of at least one field."""
    return any(term in value for value in fields.values())


def score_fields(
    fields: Mapping[FieldRole, str],
    term: str,
    table: Mapping[FieldRole, FieldWeight] = SCORING_TABLE,
) -> int:
    """Sum the points every field earns for the term."""
    return sum(field_score(fields.get(role, ""), term, weight) for role, weight in table.items())
