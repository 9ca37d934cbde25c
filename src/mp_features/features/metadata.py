"""Features – FeatureMetaData value object."""
from __future__ import annotations

import dataclasses
import types
from typing import Mapping

from mp_features.features.annotations import FeatureAnnotations


@dataclasses.dataclass(frozen=True)
class FeatureMetaData:
    """Read-only description of one feature.

    ``label`` is never ``None``: it falls back to ``name``.  ``owner`` and
    ``info_link`` stay ``None`` unless declared.
    """

    name: str
    label: str
    owner: str | None = None
    info_link: str | None = None
    enabled_by_default: bool = False
    attributes: Mapping[str, str] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", types.MappingProxyType(dict(self.attributes)))

    @classmethod
    def from_annotations(cls, name: str, annotations: FeatureAnnotations) -> "FeatureMetaData":
        return cls(
            name=name,
            label=annotations.label if annotations.label is not None else name,
            owner=annotations.owner,
            info_link=annotations.info_link,
            enabled_by_default=bool(annotations.enabled_by_default),
            attributes=annotations.attributes,
        )

    def to_dict(self) -> dict[str, object]:
        """Plain-dict view for reporting layers and log fields."""
        return {
            "name": self.name,
            "label": self.label,
            "owner": self.owner,
            "info_link": self.info_link,
            "enabled_by_default": self.enabled_by_default,
            "attributes": dict(self.attributes),
        }


__all__ = ["FeatureMetaData"]
