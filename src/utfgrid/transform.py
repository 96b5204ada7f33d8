"""Affine mapping between pixel space and geographic space."""
import math
import numbers

from .errors import InvalidExtent


class CoordTransform:
    """Bidirectional pixel <-> geographic transform for a tile request.

    Pixel Y grows southwards, so the top row of the raster lies on
    ``extent.maxy``. Works on scalars as well as numpy arrays.

    Parameters
    ----------
    request : TileRequest
        Raster size and extent to map between.
    offset_x, offset_y : float, optional
        Pixel offset subtracted in ``forward`` and added in ``backward``.

    Raises
    ------
    InvalidExtent
        If the extent or pixel size is not strictly positive.
    """

    def __init__(self, request, offset_x=0.0, offset_y=0.0):
        request.extent.validate()
        if not (isinstance(request.width, numbers.Integral)
                and isinstance(request.height, numbers.Integral)) \
                or request.width <= 0 or request.height <= 0:
            raise InvalidExtent(
                f"Pixel size must be positive integers, got "
                f"{request.width!r} x {request.height!r}")
        if not (math.isfinite(offset_x) and math.isfinite(offset_y)):
            raise InvalidExtent("Pixel offset must be finite")
        self.request = request
        self.extent = request.extent
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)
        self.sx = request.width / self.extent.width
        self.sy = request.height / self.extent.height

    def forward(self, x, y):
        """Lon/lat to pixel."""
        px = (x - self.extent.minx) * self.sx - self.offset_x
        py = (self.extent.maxy - y) * self.sy - self.offset_y
        return px, py

    def backward(self, px, py):
        """Pixel to lon/lat."""
        x = self.extent.minx + (px + self.offset_x) / self.sx
        y = self.extent.maxy - (py + self.offset_y) / self.sy
        return x, y

    def __repr__(self):
        return (f"CoordTransform({self.request.width}x{self.request.height}, "
                f"{self.extent}, offset=({self.offset_x}, {self.offset_y}))")
