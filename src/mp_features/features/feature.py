"""Features – the Feature identity protocol and NamedFeature."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Protocol, runtime_checkable

from mp_features.features.errors import UnknownFeatureError


@runtime_checkable
class Feature(Protocol):
    """Anything that reports a stable, unique ``name``.

    Members of an ``enum.Enum`` satisfy this protocol as-is.  Identity is by
    name only: two different implementations sharing a name are the same
    feature as far as any provider is concerned.
    """

    @property
    def name(self) -> str: ...


@dataclasses.dataclass(frozen=True)
class NamedFeature:
    """Lightweight feature reference for code that cannot import the enum.

    Usage::

        provider.get_metadata(NamedFeature("NEW_CHECKOUT"))
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("NamedFeature requires a non-empty name")

    def __str__(self) -> str:
        return self.name


def feature_name(feature: Feature | str | Any) -> str:
    """Return the lookup key for *feature* (a :class:`Feature` or a plain name).

    Enum members always resolve by member name, also when they are ``str``
    instances themselves (``StrEnum``, ``class Flags(str, Enum)``).
    """
    if isinstance(feature, str) and not isinstance(feature, enum.Enum):
        name: Any = feature
    else:
        name = getattr(feature, "name", None)
    if not isinstance(name, str) or not name:
        raise UnknownFeatureError(feature)
    return name


__all__ = ["Feature", "NamedFeature", "feature_name"]
