"""Feature sources the renderer can rasterize.

A feature source is a rewindable iterator over ``Feature`` objects that
also reports the attribute names available on its features.
"""
from .base import Feature, FeatureSource, ListFeatureSource
from .memory import MemoryFeatureSource
from .vector_file import VectorFileFeatureSource, open_source

__all__ = ["Feature", "FeatureSource", "ListFeatureSource", "MemoryFeatureSource",
           "VectorFileFeatureSource", "open_source"]
