"""
mp_features – enum-based feature metadata.

Import path convention::

    from mp_features.features import EnumBasedFeatureProvider, NamedFeature
    from mp_features.features import label, owner, info_link
    from mp_features.config import FeatureSettings, create_feature_provider
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
