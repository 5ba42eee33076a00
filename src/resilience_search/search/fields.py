"""
Field roles and alias resolution for project property bags.

Project records carry the same semantic field under several historical
key names (shapefile-truncated keys such as ``Project_Na`` next to the
descriptive ``Project Name``). Each searchable field role maps to an
ordered tuple of candidate keys; the first key holding a value wins.

Adding a new schema alias only requires extending ``FIELD_ALIASES``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any


class FieldRole(str, Enum):
    """Searchable fields of a project record."""

    PROJECT_NAME = "project_name"
    DESCRIPTION = "description"
    CITY = "city"
    INFRASTRUCTURE_TYPE = "infrastructure_type"
    CATEGORY = "category"
    DISASTER_FOCUS = "disaster_focus"


FIELD_ALIASES: Mapping[FieldRole, tuple[str, ...]] = MappingProxyType(
    {
        FieldRole.PROJECT_NAME: ("Project_Na", "Project Name"),
        FieldRole.DESCRIPTION: ("New_15_25_", "New 15-25 Words Project Description"),
        FieldRole.CITY: ("NAME", "City"),
        FieldRole.INFRASTRUCTURE_TYPE: ("Infrastruc", "Infrastructure Type", "Type"),
        FieldRole.CATEGORY: ("Categories",),
        FieldRole.DISASTER_FOCUS: ("Disaster_F", "Disaster Focus"),
    }
)

# Not searchable, only shown alongside results.
STATUS_ALIASES: tuple[str, ...] = ("Project__1", "Project Status", "Status")


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def resolve_alias(properties: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    """Return the raw value of the first present key, or ``""``.

    A key is present when it exists and holds neither ``None`` nor the
    empty string. Whitespace-only values count as present.
    """
    for key in keys:
        value = properties.get(key)
        if _is_present(value):
            return value if isinstance(value, str) else str(value)
    return ""


def resolve_field(properties: Mapping[str, Any], role: FieldRole) -> str:
    """Resolve a field role through its alias chain without normalizing."""
    return resolve_alias(properties, FIELD_ALIASES[role])


def normalize_text(value: str) -> str:
    """Trim surrounding whitespace and fold case for comparison."""
    return value.strip().casefold()


def extract_fields(properties: Any) -> dict[FieldRole, str]:
    """Extract and normalize every searchable field of a property bag.

    Anything that is not a mapping is treated as an empty property bag, so
    every role is always present in the returned dict.
    """
    if not isinstance(properties, Mapping):
        properties = {}
    return {role: normalize_text(resolve_field(properties, role)) for role in FieldRole}
