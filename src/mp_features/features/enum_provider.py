"""Features – EnumBasedFeatureProvider."""
from __future__ import annotations

import enum
from typing import Any

from mp_features.features.annotations import FeatureAnnotations, annotations_of
from mp_features.features.errors import InvalidFeatureTypeError, UnknownFeatureError
from mp_features.features.feature import Feature, feature_name
from mp_features.features.metadata import FeatureMetaData
from mp_features.features.provider import FeatureProvider
from mp_features.observability.logging import get_logger

_log = get_logger(__name__)


class EnumBasedFeatureProvider(FeatureProvider):
    """Provide the members of one ``enum.Enum`` as features.

    Members are indexed by name once, at construction; metadata is
    materialised from each member's annotations at the same time.  Lookups
    accept any :class:`Feature` (or a bare name), not only members of
    *source_type*.

    Usage::

        provider = EnumBasedFeatureProvider(MyFeatures)
        provider.get_metadata(NamedFeature("FEATURE1")).label
    """

    def __init__(self, source_type: Any) -> None:
        if source_type is None:
            raise InvalidFeatureTypeError(source_type, "a feature enum type is required")
        if not (isinstance(source_type, type) and issubclass(source_type, enum.Enum)):
            raise InvalidFeatureTypeError(source_type, "not an Enum subclass")

        shared = sorted(
            alias
            for alias, member in source_type.__members__.items()
            if alias != member.name and isinstance(member.value, FeatureAnnotations)
        )
        if shared:
            raise InvalidFeatureTypeError(
                source_type,
                f"members {shared} reuse another member's annotations and collapsed into aliases",
            )

        self._source_type: type[enum.Enum] = source_type
        # Iterating an Enum class yields canonical members only, aliases excluded.
        self._features: tuple[enum.Enum, ...] = tuple(source_type)
        self._metadata: dict[str, FeatureMetaData] = {
            member.name: FeatureMetaData.from_annotations(member.name, annotations_of(member))
            for member in self._features
        }
        _log.debug(
            "feature_provider.indexed",
            source=f"{source_type.__module__}.{source_type.__qualname__}",
            features=len(self._features),
        )

    @property
    def source_type(self) -> type[enum.Enum]:
        return self._source_type

    def get_features(self) -> tuple[Feature, ...]:
        return self._features

    def get_metadata(self, feature: Feature | str) -> FeatureMetaData:
        name = feature_name(feature)
        try:
            return self._metadata[name]
        except KeyError:
            raise UnknownFeatureError(name) from None

    def __repr__(self) -> str:
        return f"EnumBasedFeatureProvider({self._source_type.__qualname__})"


__all__ = ["EnumBasedFeatureProvider"]
