"""Features – provider construction and lookup errors."""
from __future__ import annotations

from typing import Any

from mp_features.kernel.errors import ConfigError, NotFoundError


class InvalidFeatureConfigurationError(ConfigError, ValueError):
    """A provider cannot be built from what it was given.

    Fatal to construction: no partially populated provider is ever returned.
    """

    default_code = "invalid_feature_configuration"


class InvalidFeatureTypeError(InvalidFeatureConfigurationError):
    """The supplied type is missing or is not an ``enum.Enum`` subclass."""

    default_code = "invalid_feature_type"

    def __init__(self, source_type: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot provide features from {source_type!r}: {reason}",
            detail={"source_type": repr(source_type)},
            **kwargs,
        )
        self.source_type = source_type
        self.reason = reason


class DuplicateFeatureError(InvalidFeatureConfigurationError):
    """Two sources declare a feature with the same name."""

    default_code = "duplicate_feature"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Duplicate feature name '{name}'",
            detail={"feature": name},
        )
        self.name = name


class UnknownFeatureError(NotFoundError, LookupError):
    """Metadata was requested for a name outside the configured set."""

    default_code = "unknown_feature"

    def __init__(self, name: Any) -> None:
        super().__init__("Feature", name, detail={"feature": repr(name)})
        self.name = name


__all__ = [
    "DuplicateFeatureError",
    "InvalidFeatureConfigurationError",
    "InvalidFeatureTypeError",
    "UnknownFeatureError",
]
