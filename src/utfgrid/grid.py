"""Sparse interaction grid and its UTFGrid encoder.

The grid stores one feature identifier per cell, where a cell covers
``resolution`` x ``resolution`` pixels of the tile. ``Grid.encode`` turns
the identifiers into UTFGrid rows: each distinct identifier gets its own
character, assigned in row-major order of first appearance starting at
codepoint 32. Codepoints 34 (``"``) and 92 (``\\``) would need escaping in
JSON and are never assigned, nor are the UTF-16 surrogates.
"""
import json
import logging
import math

import numpy as np

from .errors import UTFGridError

logger = logging.getLogger(__name__)

FIRST_CODEPOINT = 32
ESCAPED_CODEPOINTS = (34, 92)
MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def escape_codepoint(codepoint: int) -> int:
    """Skip the codepoints that cannot be encoded directly in JSON.

    Parameters
    ----------
    codepoint : int
        Candidate codepoint.

    Returns
    -------
    int
        ``codepoint + 1`` for ``"`` and ``\\``, otherwise ``codepoint``.
    """
    if codepoint in ESCAPED_CODEPOINTS:
        return codepoint + 1
    return codepoint


class CodepointCounter:
    """Hands out increasing codepoints, skipping the escaped ones.

    The UTF-16 surrogate block is jumped over as well, since lone
    surrogates cannot be written as UTF-8.
    """

    def __init__(self, start: int = FIRST_CODEPOINT):
        self.current = start

    def take(self) -> int:
        codepoint = escape_codepoint(self.current)
        if codepoint in SURROGATES:
            codepoint = SURROGATES.stop
        if codepoint > MAX_CODEPOINT:
            raise UTFGridError("Too many distinct features to encode in one grid")
        self.current = codepoint + 1
        return codepoint


class Grid:
    """Feature identifiers sampled at a fixed pixel stride.

    Parameters
    ----------
    resolution : int, optional
        Pixel stride of one cell, by default 4.

    Attributes
    ----------
    rows : numpy.ndarray
        Object array of identifier strings, shape (rows, cols). The empty
        string marks a cell without a feature.
    feature_cache : dict
        Attribute records keyed by identifier, filled during rendering.
    """

    def __init__(self, resolution: int = 4):
        if isinstance(resolution, bool) or not isinstance(resolution, int) \
                or resolution <= 0:
            raise ValueError(f"resolution must be a positive integer, got {resolution!r}")
        self.resolution = resolution
        self.rows = np.full((0, 0), "", dtype=object)
        self.feature_cache = {}

    def allocate(self, pixel_width: int, pixel_height: int):
        """Size the grid for a raster and reset its contents."""
        shape = (math.ceil(pixel_height / self.resolution),
                 math.ceil(pixel_width / self.resolution))
        self.rows = np.full(shape, "", dtype=object)
        self.feature_cache = {}
        logger.debug("Allocated %d x %d grid at resolution %d",
                     shape[1], shape[0], self.resolution)
        return self

    @property
    def shape(self):
        return self.rows.shape

    @property
    def width(self) -> int:
        return self.rows.shape[1]

    @property
    def height(self) -> int:
        return self.rows.shape[0]

    def encode(self) -> dict:
        """Encode the grid as a UTFGrid structure.

        Returns
        -------
        dict
            ``grid``: one string per row with one character per cell,
            ``keys``: identifiers in the order their codepoints were
            assigned, ``data``: cached attributes of the identifiers that
            appear in the grid.
        """
        counter = CodepointCounter()
        codes = {}
        key_order = []
        data = {}
        utf_rows = []
        for row in self.rows:
            chars = []
            for feature_id in row:
                code = codes.get(feature_id)
                if code is None:
                    code = counter.take()
                    codes[feature_id] = code
                    key_order.append(feature_id)
                    if feature_id in self.feature_cache:
                        data[feature_id] = self.feature_cache[feature_id]
                chars.append(chr(code))
            utf_rows.append("".join(chars))

        logger.debug("Encoded %d rows with %d keys", len(utf_rows), len(key_order))
        return {
            "grid": utf_rows,
            "keys": [str(key) for key in key_order],
            "data": data,
        }

    def to_json(self, **kwargs) -> str:
        """Serialize ``encode()`` to JSON, keeping grid characters literal."""
        kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.encode(), **kwargs)

    def __repr__(self):
        return f"Grid(resolution={self.resolution}, shape={self.shape})"
