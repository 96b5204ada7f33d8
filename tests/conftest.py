"""Shared pytest fixtures for utfgrid tests."""

import json
import tempfile
from pathlib import Path

import pytest
from shapely.geometry import box, mapping

from utfgrid import Extent, MemoryFeatureSource, TileRequest


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def unit_request():
    """A 256x256 tile over the 2x2 extent at the origin."""
    return TileRequest(256, 256, Extent(0, 0, 2, 2))


@pytest.fixture
def halves_source():
    """Western and eastern halves of the (0, 0, 2, 2) extent."""
    return MemoryFeatureSource([
        (box(0, 0, 0.9, 2), {"name": "west", "pop": 10}),
        (box(1.5, 0, 2, 2), {"name": "east", "pop": 20}),
    ])


@pytest.fixture
def geojson_file(temp_dir):
    """Write a small GeoJSON FeatureCollection and return its path."""
    collection = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": "west", "pop": 10},
                "geometry": mapping(box(0, 0, 0.9, 2)),
            },
            {
                "type": "Feature",
                "properties": {"name": "east", "pop": None},
                "geometry": mapping(box(1.5, 0, 2, 2)),
            },
        ],
    }
    path = temp_dir / "halves.geojson"
    with open(path, "w") as fp:
        json.dump(collection, fp)
    return path
