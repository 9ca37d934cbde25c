"""Features – FeatureProvider port."""
from __future__ import annotations

import abc
from typing import Sequence

from mp_features.features.errors import UnknownFeatureError
from mp_features.features.feature import Feature, feature_name
from mp_features.features.metadata import FeatureMetaData


class FeatureProvider(abc.ABC):
    """Port: the closed set of features known to the application.

    Implementations are immutable once constructed and safe to share
    between threads without locking.
    """

    @abc.abstractmethod
    def get_features(self) -> Sequence[Feature]:
        """All features, in declaration order."""

    @abc.abstractmethod
    def get_metadata(self, feature: Feature | str) -> FeatureMetaData:
        """Metadata for the feature named like *feature*.

        Raises :class:`~mp_features.features.errors.UnknownFeatureError`
        when the name is not provided here.
        """

    def __contains__(self, feature: object) -> bool:
        try:
            name = feature_name(feature)
        except UnknownFeatureError:
            return False
        return any(f.name == name for f in self.get_features())

    def __len__(self) -> int:
        return len(self.get_features())


__all__ = ["FeatureProvider"]
