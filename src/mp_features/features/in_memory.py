"""Features – InMemoryFeatureProvider."""

from __future__ import annotations

from typing import Iterable

from mp_features.features.errors import DuplicateFeatureError, UnknownFeatureError
from mp_features.features.feature import Feature, NamedFeature, feature_name
from mp_features.features.metadata import FeatureMetaData
from mp_features.features.provider import FeatureProvider


class InMemoryFeatureProvider(FeatureProvider):
    """Provider backed by explicit :class:`FeatureMetaData` records.

    Features are exposed as :class:`NamedFeature` values in the given order.
    Handy in tests and for features declared outside an enum.
    """

    def __init__(self, metadata: Iterable[FeatureMetaData] = ()) -> None:
        self._metadata: dict[str, FeatureMetaData] = {}
        for item in metadata:
            if item.name in self._metadata:
                raise DuplicateFeatureError(item.name)
            self._metadata[item.name] = item
        self._features = tuple(NamedFeature(name) for name in self._metadata)

    @classmethod
    def from_names(cls, *names: str) -> "InMemoryFeatureProvider":
        """Build a provider whose features carry default metadata only."""
        return cls(FeatureMetaData(name=name, label=name) for name in names)

    def get_features(self) -> tuple[Feature, ...]:
        return self._features

    def get_metadata(self, feature: Feature | str) -> FeatureMetaData:
        name = feature_name(feature)
        if name not in self._metadata:
            raise UnknownFeatureError(name)
        return self._metadata[name]


__all__ = ["InMemoryFeatureProvider"]
