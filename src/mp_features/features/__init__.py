"""Features – feature identity, annotations, metadata and providers."""
from mp_features.features.annotations import (
    FeatureAnnotations,
    FeatureEnum,
    annotate,
    annotated,
    annotations_of,
    attribute,
    enabled_by_default,
    info_link,
    label,
    owner,
)
from mp_features.features.composite import CompositeFeatureProvider
from mp_features.features.enum_provider import EnumBasedFeatureProvider
from mp_features.features.errors import (
    DuplicateFeatureError,
    InvalidFeatureConfigurationError,
    InvalidFeatureTypeError,
    UnknownFeatureError,
)
from mp_features.features.feature import Feature, NamedFeature, feature_name
from mp_features.features.in_memory import InMemoryFeatureProvider
from mp_features.features.metadata import FeatureMetaData
from mp_features.features.provider import FeatureProvider

__all__ = [
    "CompositeFeatureProvider",
    "DuplicateFeatureError",
    "EnumBasedFeatureProvider",
    "Feature",
    "FeatureAnnotations",
    "FeatureEnum",
    "FeatureMetaData",
    "FeatureProvider",
    "InMemoryFeatureProvider",
    "InvalidFeatureConfigurationError",
    "InvalidFeatureTypeError",
    "NamedFeature",
    "UnknownFeatureError",
    "annotate",
    "annotated",
    "annotations_of",
    "attribute",
    "enabled_by_default",
    "feature_name",
    "info_link",
    "label",
    "owner",
]
