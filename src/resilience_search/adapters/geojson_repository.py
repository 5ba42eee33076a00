"""GeoJSON feature collection loading.

Parses the project FeatureCollection once and hands the parsed mapping to
callers, so search results are references into the loaded document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import orjson
from pydantic import BaseModel, ConfigDict, ValidationError

from resilience_search.observability.metrics import COLLECTION_SIZE


logger = logging.getLogger(__name__)


class FeatureCollectionError(ValueError):
    """Raised when a feature collection file cannot be read or is malformed."""


class _FeatureEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "Feature"
    properties: dict[str, Any] | None = None


class _FeatureCollectionEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["FeatureCollection"]
    features: list[_FeatureEnvelope]


def parse_feature_collection(payload: bytes | str, source: str = "<memory>") -> dict[str, Any]:
    """Parse and validate a GeoJSON FeatureCollection document.

    Only the envelope is validated (``type``, ``features`` and each
    feature's ``properties``); geometry is passed through untouched.

    Raises:
        FeatureCollectionError: If the payload is not valid JSON or not a
            FeatureCollection.
    """
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise FeatureCollectionError(f"{source}: invalid JSON ({exc})") from exc

    try:
        _FeatureCollectionEnvelope.model_validate(data)
    except ValidationError as exc:
        raise FeatureCollectionError(
            f"{source}: not a GeoJSON FeatureCollection ({exc.error_count()} validation errors)"
        ) from exc
    return data


def load_feature_collection(path: Path | str) -> dict[str, Any]:
    """Read a GeoJSON FeatureCollection from disk."""
    path = Path(path)
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise FeatureCollectionError(f"{path}: cannot read feature collection ({exc.strerror or exc})") from exc

    collection = parse_feature_collection(payload, source=str(path))
    feature_count = len(collection["features"])
    COLLECTION_SIZE.set(feature_count, source=path.name)
    logger.info("Loaded %d project features from %s", feature_count, path, extra={"source": str(path)})
    return collection


class GeoJsonProjectRepository:
    """Loads a project collection on first use and keeps it for the session."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._collection: dict[str, Any] | None = None

    def get(self) -> dict[str, Any]:
        if self._collection is None:
            self._collection = load_feature_collection(self.path)
        return self._collection

    def reload(self) -> dict[str, Any]:
        """Drop the loaded collection and read the file again."""
        self._collection = None
        return self.get()
