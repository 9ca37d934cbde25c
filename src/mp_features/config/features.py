"""Config – wiring feature providers from settings.

Feature enums are referenced as ``"package.module:EnumName"``, e.g.::

    FEATURES_ENUMS=billing.features:BillingFeatures,ui.features:UiFeatures
"""
from __future__ import annotations

import dataclasses
import importlib
from typing import Any

from mp_features.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mp_features.features import (
    CompositeFeatureProvider,
    EnumBasedFeatureProvider,
    FeatureProvider,
    InvalidFeatureConfigurationError,
    InvalidFeatureTypeError,
)
from mp_features.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class FeatureSettings(Settings):
    """Which feature enums the process exposes."""

    _prefix: dataclasses.ClassVar[str] = "FEATURES"

    enums: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        for ref in self.enums:
            if not _is_enum_reference(ref):
                raise InvalidFeatureConfigurationError(
                    f"Feature enum reference {ref!r} must look like 'package.module:EnumName'",
                    detail={"reference": ref},
                )


def _is_enum_reference(reference: str) -> bool:
    module_name, sep, attr_path = reference.partition(":")
    # Relative module names have no anchor package to resolve against.
    return bool(
        sep
        and module_name
        and not module_name.startswith(".")
        and attr_path
        and all(attr_path.split("."))
    )


def load_feature_enum(reference: str) -> Any:
    """Import the object named by *reference* (``"module:Attr"``)."""
    if not _is_enum_reference(reference):
        raise InvalidFeatureTypeError(reference, "must look like 'package.module:EnumName'")
    module_name, _, attr_path = reference.partition(":")
    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError, ValueError) as exc:
        raise InvalidFeatureTypeError(reference, f"cannot be imported ({exc})", cause=exc) from exc
    return target


def create_feature_provider(
    settings: FeatureSettings | None = None,
    loader: SettingsLoader | None = None,
) -> FeatureProvider:
    """Build the provider described by *settings*.

    When *settings* is omitted they are loaded with *loader* (environment
    variables by default).  One enum yields an
    :class:`EnumBasedFeatureProvider`, several a
    :class:`CompositeFeatureProvider` in the configured order.
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(FeatureSettings)
    if not settings.enums:
        raise InvalidFeatureConfigurationError("No feature enums configured")

    providers = [EnumBasedFeatureProvider(load_feature_enum(ref)) for ref in settings.enums]
    _log.debug("feature_provider.configured", enums=list(settings.enums))
    if len(providers) == 1:
        return providers[0]
    return CompositeFeatureProvider(*providers)


__all__ = ["FeatureSettings", "create_feature_provider", "load_feature_enum"]
