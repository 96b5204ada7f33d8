"""Exceptions raised while rendering UTFGrid tiles."""


class UTFGridError(Exception):
    pass


class InvalidExtent(UTFGridError, ValueError):
    """Extent or tile request with a non-positive or non-finite size."""


class InvalidFieldSelection(UTFGridError, ValueError):
    """None of the requested attribute names exist in the source schema."""


class FeatureSourceError(UTFGridError):
    """A feature source failed while opening, resetting or iterating."""
