"""Formatting helpers for project values shown to users."""

from __future__ import annotations

import re
from typing import Any


WHITESPACE_PATTERN = re.compile(r"\s+")


def format_city_name(city_name: Any) -> Any:
    """Title-case a city name for display.

    Non-string and empty values are returned unchanged.

    Examples:
        >>> format_city_name("  north miami beach ")
        'North Miami Beach'
        >>> format_city_name("MIAMI")
        'Miami'
    """
    if not city_name or not isinstance(city_name, str):
        return city_name
    words = WHITESPACE_PATTERN.split(city_name.strip().lower())
    return " ".join(word[:1].upper() + word[1:] for word in words)
