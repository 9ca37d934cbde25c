"""Domain errors — lookups against a closed set of known items."""

from __future__ import annotations

from typing import Any

from mp_features.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a caller breaks a rule of the feature model."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested item is not part of the known set."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = ["DomainError", "NotFoundError"]
