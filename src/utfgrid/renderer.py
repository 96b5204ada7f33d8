"""Rasterize features from a feature source into a UTFGrid.

Each grid cell is sampled at a single pixel: the pixel at the cell's
top-left corner. Its geographic footprint is tested against the features
of the source in their native order and the first feature that intersects
it claims the cell.
"""
import logging

from .errors import FeatureSourceError, InvalidFieldSelection, UTFGridError
from .geometry import ShapelyGeometryProvider
from .grid import Grid
from .transform import CoordTransform

logger = logging.getLogger(__name__)


class Renderer:
    """Fill a grid with the features of a source.

    Parameters
    ----------
    grid : Grid
        Grid to populate; its resolution sets the sampling stride.
    ctrans : CoordTransform
        Transform for the tile being rendered.
    geometry : GeometryProvider, optional
        Intersection test, by default ``ShapelyGeometryProvider()``.
    """

    def __init__(self, grid, ctrans, geometry=None):
        self.grid = grid
        self.ctrans = ctrans
        self.req = ctrans.request
        self.geometry = geometry if geometry is not None else ShapelyGeometryProvider()

    @staticmethod
    def select_fields(source, field_names):
        """Return the requested field names that exist on the source.

        Names keep their requested order; duplicates are dropped.

        Raises
        ------
        InvalidFieldSelection
            If none of the requested names are in the source schema.
        """
        try:
            schema = set(source.schema_attribute_names())
        except UTFGridError:
            raise
        except Exception as err:
            raise FeatureSourceError(f"Could not read source schema: {err}") from err

        fields = []
        for name in field_names or ():
            if name in schema and name not in fields:
                fields.append(name)
            elif name not in schema:
                logger.warning("Field %r not found in source schema", name)
        if not fields:
            raise InvalidFieldSelection(
                f"No valid fields, field_names was {list(field_names or ())}")
        return fields

    def apply(self, source, field_names):
        """Rasterize ``source`` into the grid.

        Parameters
        ----------
        source : FeatureSource
            Features to rasterize. It is rewound before and after each cell.
        field_names : iterable of str
            Attributes to keep for matched features.

        Returns
        -------
        Grid
            The populated grid.
        """
        fields = self.select_fields(source, field_names)
        res = self.grid.resolution
        self.grid.allocate(self.req.width, self.req.height)
        logger.info("Rendering %dx%d tile %s at resolution %d, fields %s",
                    self.req.width, self.req.height, self.ctrans.extent, res, fields)

        self._reset(source)
        matched = 0
        for row, y in enumerate(range(0, self.req.height, res)):
            for col, x in enumerate(range(0, self.req.width, res)):
                minx, maxy = self.ctrans.backward(x, y)
                maxx, miny = self.ctrans.backward(x + 1, y + 1)
                feature = self._first_match(source, (minx, maxy), (maxx, miny))
                if feature is None:
                    continue
                feature_id = feature.identifier
                self.grid.rows[row, col] = feature_id
                self.grid.feature_cache[feature_id] = {
                    k: feature.attributes[k] for k in fields if k in feature.attributes}
                matched += 1
            logger.debug("Rendered row %d/%d", row + 1, self.grid.height)

        logger.info("Matched %d of %d cells to %d features", matched,
                    self.grid.rows.size, len(self.grid.feature_cache))
        return self.grid

    def _first_match(self, source, corner_a, corner_b):
        """Return the first feature intersecting the box, rewinding after."""
        try:
            while True:
                try:
                    feature = next(source)
                except StopIteration:
                    return None
                except UTFGridError:
                    raise
                except Exception as err:
                    raise FeatureSourceError(f"Feature source failed: {err}") from err
                if self.geometry.intersects(corner_a, corner_b, feature.geometry):
                    return feature
        finally:
            self._reset(source)

    @staticmethod
    def _reset(source):
        try:
            source.reset()
        except UTFGridError:
            raise
        except Exception as err:
            raise FeatureSourceError(f"Could not rewind feature source: {err}") from err


def render_tile(source, request, field_names, resolution=4, geometry=None):
    """Render one tile request and return its encoded UTFGrid.

    Parameters
    ----------
    source : FeatureSource
        Features to rasterize.
    request : TileRequest
        Pixel size and extent of the tile.
    field_names : iterable of str
        Attributes to include in the ``data`` section.
    resolution : int, optional
        Pixel stride of one grid cell, by default 4.
    geometry : GeometryProvider, optional
        Intersection test, by default shapely.

    Returns
    -------
    dict
        The encoded grid with ``grid``, ``keys`` and ``data``.
    """
    grid = Grid(resolution)
    renderer = Renderer(grid, CoordTransform(request), geometry=geometry)
    renderer.apply(source, field_names)
    return grid.encode()
