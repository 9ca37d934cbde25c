"""Features – declarative annotations for enum members.

Annotations are attached by using a :class:`FeatureAnnotations` instance as
the member value.  The single-purpose helpers combine with ``|``::

    class Features(FeatureEnum):
        FEATURE1 = label("First feature")
        FEATURE2 = auto()
        WITH_OWNER = owner("Christian") | info_link("https://example.org/33")

Enums whose values carry their own meaning (``class Flags(str, Enum)``) can
attach annotations by member name with the :func:`annotated` class decorator
instead.
"""
from __future__ import annotations

import dataclasses
import enum
import types
from typing import Any, Callable, Mapping, TypeVar

from mp_features.features.errors import InvalidFeatureTypeError

E = TypeVar("E", bound=type[enum.Enum])

ANNOTATIONS_ATTR = "__feature_annotations__"


@dataclasses.dataclass(frozen=True, eq=False)
class FeatureAnnotations:
    """Metadata declared on a single feature.

    ``None`` means "not declared"; defaults are applied by the provider, not
    here.  Instances compare by identity so that two members declaring equal
    annotations never become enum aliases of each other.
    """

    label: str | None = None
    owner: str | None = None
    info_link: str | None = None
    enabled_by_default: bool | None = None
    attributes: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", types.MappingProxyType(dict(self.attributes)))

    def __or__(self, other: FeatureAnnotations) -> FeatureAnnotations:
        if not isinstance(other, FeatureAnnotations):
            return NotImplemented
        return FeatureAnnotations(
            label=other.label if other.label is not None else self.label,
            owner=other.owner if other.owner is not None else self.owner,
            info_link=other.info_link if other.info_link is not None else self.info_link,
            enabled_by_default=(
                other.enabled_by_default
                if other.enabled_by_default is not None
                else self.enabled_by_default
            ),
            attributes={**self.attributes, **other.attributes},
        )

    def __repr__(self) -> str:
        declared = {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) not in (None, {})
        }
        if "attributes" in declared:
            declared["attributes"] = dict(declared["attributes"])
        args = ", ".join(f"{k}={v!r}" for k, v in declared.items())
        return f"FeatureAnnotations({args})"


def label(text: str) -> FeatureAnnotations:
    """Human-readable name shown instead of the member name."""
    return FeatureAnnotations(label=text)


def owner(name: str) -> FeatureAnnotations:
    """Person or team responsible for the feature."""
    return FeatureAnnotations(owner=name)


def info_link(url: str) -> FeatureAnnotations:
    """Reference link (ticket, pull request, wiki page).  Passed through as-is."""
    return FeatureAnnotations(info_link=url)


def enabled_by_default(enabled: bool = True) -> FeatureAnnotations:
    return FeatureAnnotations(enabled_by_default=enabled)


def attribute(key: str, value: str) -> FeatureAnnotations:
    """Free-form string attribute, e.g. ``attribute("jira", "OPS-12")``."""
    return FeatureAnnotations(attributes={key: value})


def annotate(
    *,
    label: str | None = None,
    owner: str | None = None,
    info_link: str | None = None,
    enabled_by_default: bool | None = None,
    attributes: Mapping[str, str] | None = None,
) -> FeatureAnnotations:
    """Keyword form of the helpers above; ``annotate()`` declares nothing."""
    return FeatureAnnotations(
        label=label,
        owner=owner,
        info_link=info_link,
        enabled_by_default=enabled_by_default,
        attributes=attributes or {},
    )


EMPTY_ANNOTATIONS = FeatureAnnotations()


class FeatureEnum(enum.Enum):
    """Enum base whose ``auto()`` members carry empty annotations.

    A plain ``enum.Enum`` cannot mix ``auto()`` with annotation values, since
    ``auto()`` increments the previous value.
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> Any:
        return FeatureAnnotations()


def annotated(**by_name: FeatureAnnotations) -> Callable[[E], E]:
    """Class decorator attaching annotations to members by name.

    Usage::

        @annotated(DARK_MODE=label("Dark mode") | owner("ui-team"))
        class Flags(str, enum.Enum):
            DARK_MODE = "dark_mode"
    """

    def decorator(enum_cls: E) -> E:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
            raise InvalidFeatureTypeError(enum_cls, "@annotated only applies to Enum classes")
        # Aliases are excluded: annotations are resolved by canonical member name.
        unknown = sorted(set(by_name) - {member.name for member in enum_cls})
        if unknown:
            raise InvalidFeatureTypeError(
                enum_cls, f"annotations given for undeclared members {unknown}"
            )
        merged = dict(getattr(enum_cls, ANNOTATIONS_ATTR, {}))
        for name, extra in by_name.items():
            merged[name] = merged[name] | extra if name in merged else extra
        setattr(enum_cls, ANNOTATIONS_ATTR, types.MappingProxyType(merged))
        return enum_cls

    return decorator


def annotations_of(member: enum.Enum) -> FeatureAnnotations:
    """Resolve everything declared for *member*.

    The member value and the class-level ``@annotated`` mapping are merged;
    the decorator wins where both declare the same field.
    """
    result = member.value if isinstance(member.value, FeatureAnnotations) else EMPTY_ANNOTATIONS
    by_name: Mapping[str, FeatureAnnotations] = getattr(type(member), ANNOTATIONS_ATTR, {})
    extra = by_name.get(member.name)
    if extra is not None:
        result = result | extra
    return result


__all__ = [
    "EMPTY_ANNOTATIONS",
    "FeatureAnnotations",
    "FeatureEnum",
    "annotate",
    "annotated",
    "annotations_of",
    "attribute",
    "enabled_by_default",
    "info_link",
    "label",
    "owner",
]
