"""Render vector features into UTFGrid interaction tiles.

A tile request (pixel size plus geographic extent) is sampled on a coarse
grid; every cell is assigned the first feature that covers it, and the
result is encoded as a UTFGrid: rows of characters, the feature keys the
characters stand for, and the selected attributes of those features.
"""

from . import config
from .errors import (UTFGridError, InvalidExtent, InvalidFieldSelection,
                     FeatureSourceError)
from .extent import Extent, TileRequest
from .transform import CoordTransform
from .grid import Grid, CodepointCounter, escape_codepoint
from .geometry import GeometryProvider, ShapelyGeometryProvider
from .sources import (Feature, FeatureSource, MemoryFeatureSource,
                      VectorFileFeatureSource, open_source)
from .renderer import Renderer, render_tile

__all__ = [
    "config",
    "UTFGridError", "InvalidExtent", "InvalidFieldSelection", "FeatureSourceError",
    "Extent", "TileRequest", "CoordTransform",
    "Grid", "CodepointCounter", "escape_codepoint",
    "GeometryProvider", "ShapelyGeometryProvider",
    "Feature", "FeatureSource", "MemoryFeatureSource",
    "VectorFileFeatureSource", "open_source",
    "Renderer", "render_tile",
]
