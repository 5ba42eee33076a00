"""Shared test fixtures and configuration."""

import copy
import os

import orjson
import pytest

from resilience_search.config import get_settings


# Configuration values that would leak into tests from the developer's shell
SETTINGS_ENV_PREFIX = "RESILIENCE_SEARCH_"


def _feature(feature_id, coordinates, properties):
    return {
        "id": feature_id,
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": coordinates},
        "properties": properties,
    }


PROJECTS_COLLECTION = {
    "type": "FeatureCollection",
    "features": [
        _feature(
            1,
            [-80.1918, 25.7617],
            {
                "Project_Na": "Miami Beach Flood Protection",
                "Project Name": "Miami Beach Flood Protection",
                "New_15_25_": "Comprehensive flood protection system for Miami Beach",
                "NAME": "Miami Beach",
                "City": "Miami Beach",
                "Infrastruc": "Blue Infrastructure",
                "Infrastructure Type": "Blue Infrastructure",
                "Categories": "Flood Control",
                "Disaster_F": "Flooding",
                "Disaster Focus": "Flooding",
                "Project__1": "Ongoing",
            },
        ),
        _feature(
            2,
            [-80.1318, 25.7917],
            {
                "Project_Na": "Coral Gables Green Infrastructure",
                "Project Name": "Coral Gables Green Infrastructure",
                "New_15_25_": "Green infrastructure project in Coral Gables",
                "NAME": "Coral Gables",
                "City": "Coral Gables",
                "Infrastruc": "Green Infrastructure",
                "Infrastructure Type": "Green Infrastructure",
                "Categories": "Environmental",
                "Disaster_F": "Hurricane",
                "Disaster Focus": "Hurricane",
                "Project__1": "Completed",
            },
        ),
        _feature(
            3,
            [-80.2118, 25.7717],
            {
                "Project_Na": "Doral Stormwater Management",
                "Project Name": "Doral Stormwater Management",
                "New_15_25_": "Stormwater management system for Doral",
                "City": "Doral",
                "Infrastructure Type": "Grey Infrastructure",
                "Type": "Grey Infrastructure",
                "Categories": "Water Management",
                "Disaster Focus": "Flooding",
            },
        ),
        _feature(
            4,
            [-80.1918, 25.7517],
            {
                "Project_Na": "Hybrid Resilience Project",
                "New_15_25_": "Combined green and blue infrastructure",
                "NAME": "Miami",
                "City": "Miami",
                "Infrastruc": "Hybrid",
                "Categories": "Multi-purpose",
                "Disaster_F": "Multi-hazard",
            },
        ),
    ],
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Drop configuration from the surrounding shell and reset cached settings."""
    for key in list(os.environ):
        if key.upper().startswith(SETTINGS_ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def projects_collection():
    """The four-project Miami-Dade sample collection (fresh copy per test)."""
    return copy.deepcopy(PROJECTS_COLLECTION)


@pytest.fixture
def make_collection():
    """Build a FeatureCollection from a list of property bags."""

    def _make(*property_bags):
        return {
            "type": "FeatureCollection",
            "features": [
                _feature(index, [-80.19, 25.76], properties) for index, properties in enumerate(property_bags)
            ],
        }

    return _make


@pytest.fixture
def projects_file(tmp_path, projects_collection):
    """Write the sample collection to a GeoJSON file."""
    path = tmp_path / "projects.geojson"
    path.write_bytes(orjson.dumps(projects_collection))
    return path
