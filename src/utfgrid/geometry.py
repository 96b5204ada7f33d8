"""Geometric predicates used while rasterizing features."""
from abc import ABC, abstractmethod

from shapely.geometry import box


class GeometryProvider(ABC):
    """Decides whether a feature geometry touches a query box."""

    @abstractmethod
    def intersects(self, corner_a, corner_b, geometry) -> bool:
        """Test the box spanned by two opposite corners against a geometry.

        Parameters
        ----------
        corner_a, corner_b : tuple of float
            Opposite (x, y) corners of an axis-aligned box, in any order.
        geometry : object
            Feature geometry as handed out by the feature source.
        """


class ShapelyGeometryProvider(GeometryProvider):
    """Intersection tests on shapely geometries.

    The renderer tests one box against many features in a row, so the last
    box built is kept and reused while the corners stay the same.
    """

    def __init__(self):
        self._corners = None
        self._box = None

    def query_box(self, corner_a, corner_b):
        corners = (tuple(corner_a), tuple(corner_b))
        if corners != self._corners:
            (ax, ay), (bx, by) = corners
            self._box = box(min(ax, bx), min(ay, by), max(ax, bx), max(ay, by))
            self._corners = corners
        return self._box

    def intersects(self, corner_a, corner_b, geometry) -> bool:
        if geometry is None or geometry.is_empty:
            return False
        return bool(geometry.intersects(self.query_box(corner_a, corner_b)))
