"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Each field is read from ``<_prefix>_<FIELD>`` (upper-cased), e.g.
    ``FeatureSettings.enums`` from ``FEATURES_ENUMS``.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject values no provider could be built from."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        """Names of fields that have neither a default nor a default factory."""
        return tuple(
            field.name
            for field in dataclasses.fields(cls)
            if field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        )


__all__ = ["Settings"]
