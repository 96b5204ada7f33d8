"""Geographic extents and tile requests.

An ``Extent`` is an axis-aligned bounding box in geographic units and a
``TileRequest`` pairs it with the pixel size of the raster that covers it.
Slippy map tiles can be turned into either with mercantile.
"""
import math
from dataclasses import dataclass

import mercantile

from .errors import InvalidExtent

TILE_SIZE = 256


@dataclass(frozen=True)
class Extent:
    """Axis-aligned geographic bounding box.

    Parameters
    ----------
    minx, miny, maxx, maxy : float
        Western, southern, eastern and northern bounds.
    """

    minx: float
    miny: float
    maxx: float
    maxy: float

    def __post_init__(self):
        for name in ("minx", "miny", "maxx", "maxy"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def width(self) -> float:
        return self.maxx - self.minx

    @property
    def height(self) -> float:
        return self.maxy - self.miny

    @property
    def bounds(self):
        return (self.minx, self.miny, self.maxx, self.maxy)

    def validate(self):
        """Raise InvalidExtent unless the box has a finite, positive size."""
        if not all(math.isfinite(v) for v in self.bounds):
            raise InvalidExtent(f"{self} has non-finite bounds")
        if not self.width > 0 or not self.height > 0:
            raise InvalidExtent(
                f"{self} must have positive width and height "
                f"(got {self.width} x {self.height})")
        return self

    @classmethod
    def from_tile(cls, z: int, x: int, y: int) -> "Extent":
        """Lon/lat extent of the slippy map tile z/x/y."""
        west, south, east, north = mercantile.bounds(x, y, z)
        return cls(west, south, east, north)

    def __str__(self):
        return "Extent(%s,%s,%s,%s)" % self.bounds


@dataclass(frozen=True)
class TileRequest:
    """Pixel dimensions of an output raster and the extent it covers."""

    width: int
    height: int
    extent: Extent

    @classmethod
    def from_tile(cls, z: int, x: int, y: int, size: int = TILE_SIZE) -> "TileRequest":
        return cls(size, size, Extent.from_tile(z, x, y))

    def grid_shape(self, resolution: int):
        """Return the (rows, cols) of a grid sampling this request."""
        return (math.ceil(self.height / resolution),
                math.ceil(self.width / resolution))


def parse_tile(text: str):
    """Parse a ``z/x/y`` tile string into a tuple of ints.

    Raises
    ------
    ValueError
        If the string is not three slash separated integers.
    """
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise ValueError(f"Tile must look like z/x/y, got {text!r}")
    z, x, y = (int(p) for p in parts)
    return z, x, y
