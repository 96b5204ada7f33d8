"""Tests for the utfgrid.extent module."""

import math

import pytest

from utfgrid import Extent, InvalidExtent, TileRequest
from utfgrid.extent import parse_tile


class TestExtent:
    """Tests for the Extent class."""

    def test_width_and_height(self):
        """width and height should be derived from the bounds."""
        extent = Extent(-140, 0, -50, 90)
        assert extent.width == 90.0
        assert extent.height == 90.0

    def test_bounds_are_floats(self):
        """Integer bounds should be coerced to float."""
        extent = Extent(0, 1, 2, 3)
        assert all(isinstance(v, float) for v in extent.bounds)

    def test_is_immutable(self):
        """Extent attributes should not be assignable."""
        extent = Extent(0, 0, 1, 1)
        with pytest.raises(AttributeError):
            extent.minx = 5

    def test_str(self):
        assert str(Extent(0, 0, 2, 2)) == "Extent(0.0,0.0,2.0,2.0)"

    @pytest.mark.parametrize("bounds", [
        (0, 0, 0, 1),
        (0, 0, 1, 0),
        (1, 0, 0, 1),
        (0, 0, math.inf, 1),
        (0, math.nan, 1, 1),
    ])
    def test_validate_rejects_degenerate_boxes(self, bounds):
        """validate should raise InvalidExtent for empty or non-finite boxes."""
        with pytest.raises(InvalidExtent):
            Extent(*bounds).validate()

    def test_validate_returns_self(self):
        extent = Extent(0, 0, 1, 1)
        assert extent.validate() is extent

    def test_from_tile_world(self):
        """Tile 0/0/0 should span the whole Web Mercator world."""
        extent = Extent.from_tile(0, 0, 0)
        assert extent.minx == pytest.approx(-180.0)
        assert extent.maxx == pytest.approx(180.0)
        assert extent.maxy == pytest.approx(85.0511287798066)
        assert extent.miny == pytest.approx(-85.0511287798066)

    def test_from_tile_quadrant(self):
        """Tile 1/0/0 should be the north-western quadrant."""
        extent = Extent.from_tile(1, 0, 0)
        assert extent.minx == pytest.approx(-180.0)
        assert extent.maxx == pytest.approx(0.0)
        assert extent.miny == pytest.approx(0.0)


class TestTileRequest:
    """Tests for the TileRequest class."""

    def test_grid_shape_rounds_up(self):
        """grid_shape should use ceil(dimension / resolution)."""
        request = TileRequest(10, 7, Extent(0, 0, 1, 1))
        assert request.grid_shape(4) == (2, 3)

    def test_grid_shape_exact(self):
        request = TileRequest(256, 256, Extent(0, 0, 1, 1))
        assert request.grid_shape(4) == (64, 64)

    def test_from_tile(self):
        """from_tile should build a square request over the tile bounds."""
        request = TileRequest.from_tile(2, 1, 1, size=512)
        assert request.width == 512
        assert request.height == 512
        assert request.extent == Extent.from_tile(2, 1, 1)


class TestParseTile:
    """Tests for the parse_tile helper."""

    def test_parses_zxy(self):
        assert parse_tile("3/4/5") == (3, 4, 5)

    @pytest.mark.parametrize("text", ["3/4", "a/b/c", "1/2/3/4", ""])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            parse_tile(text)
