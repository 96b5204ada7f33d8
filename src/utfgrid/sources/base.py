"""Base types shared by all feature sources."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Feature:
    """One geographic entity.

    Attributes
    ----------
    index : int or str
        Identifier unique within the source and stable across resets.
    geometry : object
        Geometry passed untouched to the geometry provider.
    attributes : dict
        Attribute name to value.
    """

    index: Any
    geometry: Any
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def identifier(self) -> str:
        return str(self.index)


class FeatureSource(ABC):
    """Rewindable iterator over features in their native order."""

    @abstractmethod
    def reset(self):
        """Rewind iteration to the first feature."""

    @abstractmethod
    def __next__(self) -> Feature:
        """Return the next feature or raise StopIteration."""

    @abstractmethod
    def schema_attribute_names(self) -> List[str]:
        """All attribute names available on the source's features."""

    def __iter__(self):
        return self


class ListFeatureSource(FeatureSource):
    """Feature source over a list built by the subclass.

    Subclasses fill ``features`` and ``schema``; iteration follows list
    order.
    """

    features: List[Feature]
    schema: List[str]
    _pos = 0

    def reset(self):
        self._pos = 0

    def __next__(self):
        if self._pos >= len(self.features):
            raise StopIteration
        feature = self.features[self._pos]
        self._pos += 1
        return feature

    def schema_attribute_names(self):
        return list(self.schema)

    def __len__(self):
        return len(self.features)
