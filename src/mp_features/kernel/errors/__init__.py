"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── NotFoundError
    └── ApplicationError             (application.py)
        └── ConfigError
            └── MissingRequiredSettingError

Feature-specific errors extend this tree in :mod:`mp_features.features.errors`.
"""

from mp_features.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    MissingRequiredSettingError,
)
from mp_features.kernel.errors.base import BaseError
from mp_features.kernel.errors.domain import DomainError, NotFoundError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "DomainError",
    "MissingRequiredSettingError",
    "NotFoundError",
]
