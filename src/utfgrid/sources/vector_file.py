"""Feature source for vector files readable by geopandas.

Shapefiles, GeoJSON and GeoPackage layers are loaded once into a
GeoDataFrame; each row becomes a ``Feature`` indexed by its position in
the file.
"""
import logging
import math
import pathlib

import geopandas as gpd
import numpy as np
import pandas as pd

from ..errors import FeatureSourceError
from .base import Feature, ListFeatureSource

logger = logging.getLogger(__name__)


def _to_python(value):
    """Convert numpy/pandas scalars into JSON friendly Python values."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if value is pd.NaT or value is pd.NA:
        return None
    if isinstance(value, np.generic):
        return _to_python(value.item())
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    return value


class VectorFileFeatureSource(ListFeatureSource):
    """Serve the features of a vector file in file order.

    Parameters
    ----------
    path : str or pathlib.Path
        Vector file to read.
    layer : str, optional
        Layer name for multi-layer formats such as GeoPackage.

    Raises
    ------
    FeatureSourceError
        If the file cannot be read.
    """

    def __init__(self, path, layer=None):
        self.path = pathlib.Path(path)
        kwargs = {} if layer is None else {"layer": layer}
        try:
            gdf = gpd.read_file(self.path, **kwargs)
        except Exception as err:
            raise FeatureSourceError(f"Could not read {self.path}: {err}") from err
        self._load(gdf)
        logger.info("Loaded %d features from %s", len(self.features), self.path)

    @classmethod
    def from_geodataframe(cls, gdf):
        """Build a source from an already loaded GeoDataFrame."""
        source = cls.__new__(cls)
        source.path = None
        source._load(gdf)
        return source

    def _load(self, gdf):
        geometry_name = gdf.geometry.name
        self.schema = [str(col) for col in gdf.columns if col != geometry_name]
        attribute_frame = pd.DataFrame(gdf.drop(columns=geometry_name))
        records = attribute_frame.to_dict(orient="records")
        self.features = [
            Feature(pos,
                    geometry,
                    {str(k): _to_python(v) for k, v in record.items()})
            for pos, (geometry, record) in enumerate(zip(gdf.geometry, records))
        ]
        self._pos = 0


def open_source(path, layer=None):
    """Open a vector file as a feature source."""
    return VectorFileFeatureSource(path, layer=layer)
