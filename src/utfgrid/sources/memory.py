"""Feature source backed by an in-memory list."""
from .base import Feature, ListFeatureSource


class MemoryFeatureSource(ListFeatureSource):
    """Serve features from a list, in list order.

    Parameters
    ----------
    features : iterable
        ``Feature`` objects, or ``(geometry, attributes)`` pairs which are
        indexed by their position.
    schema : list of str, optional
        Attribute names of the source. Defaults to the ordered union of the
        features' attribute names.
    """

    def __init__(self, features=(), schema=None):
        self.features = []
        for pos, item in enumerate(features):
            if not isinstance(item, Feature):
                geometry, attributes = item
                item = Feature(pos, geometry, dict(attributes or {}))
            self.features.append(item)
        if schema is None:
            schema = []
            for feature in self.features:
                schema.extend(k for k in feature.attributes if k not in schema)
        self.schema = list(schema)
        self._pos = 0
