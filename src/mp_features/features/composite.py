"""Features – CompositeFeatureProvider."""
from __future__ import annotations

from mp_features.features.errors import (
    DuplicateFeatureError,
    InvalidFeatureConfigurationError,
    UnknownFeatureError,
)
from mp_features.features.feature import Feature, feature_name
from mp_features.features.metadata import FeatureMetaData
from mp_features.features.provider import FeatureProvider
from mp_features.observability.logging import get_logger

_log = get_logger(__name__)


class CompositeFeatureProvider(FeatureProvider):
    """Expose several providers as one.

    Features keep their order within each delegate, delegates keep the order
    they were given in.  A name may belong to a single delegate only.
    """

    def __init__(self, *providers: FeatureProvider) -> None:
        if not providers:
            raise InvalidFeatureConfigurationError("CompositeFeatureProvider needs at least one provider")

        features: list[Feature] = []
        owners: dict[str, FeatureProvider] = {}
        for provider in providers:
            for feature in provider.get_features():
                name = feature_name(feature)
                if name in owners:
                    raise DuplicateFeatureError(name)
                owners[name] = provider
                features.append(feature)

        self._providers = providers
        self._features = tuple(features)
        self._owners = owners
        _log.debug(
            "feature_provider.merged",
            providers=len(providers),
            features=len(self._features),
        )

    @property
    def providers(self) -> tuple[FeatureProvider, ...]:
        return self._providers

    def get_features(self) -> tuple[Feature, ...]:
        return self._features

    def get_metadata(self, feature: Feature | str) -> FeatureMetaData:
        name = feature_name(feature)
        provider = self._owners.get(name)
        if provider is None:
            raise UnknownFeatureError(name)
        return provider.get_metadata(name)


__all__ = ["CompositeFeatureProvider"]
