"""Unit tests for the Feature protocol, NamedFeature and FeatureMetaData."""

from __future__ import annotations

import enum

import pytest

from mp_features.features import (
    Feature,
    FeatureMetaData,
    NamedFeature,
    UnknownFeatureError,
    feature_name,
    label,
    owner,
)


class Colors(enum.Enum):
    RED = 1


# ---------------------------------------------------------------------------
# Feature protocol / NamedFeature
# ---------------------------------------------------------------------------


class TestFeatureProtocol:
    def test_enum_member_is_feature(self) -> None:
        assert isinstance(Colors.RED, Feature)

    def test_named_feature_is_feature(self) -> None:
        assert isinstance(NamedFeature("X"), Feature)

    def test_object_without_name_is_not_feature(self) -> None:
        assert not isinstance(object(), Feature)


class TestNamedFeature:
    def test_equality_by_name(self) -> None:
        assert NamedFeature("A") == NamedFeature("A")
        assert hash(NamedFeature("A")) == hash(NamedFeature("A"))
        assert NamedFeature("A") != NamedFeature("B")

    def test_str_is_name(self) -> None:
        assert str(NamedFeature("A")) == "A"

    def test_frozen(self) -> None:
        feature = NamedFeature("A")
        with pytest.raises((AttributeError, TypeError)):
            feature.name = "B"  # type: ignore[misc]

    @pytest.mark.parametrize("bad", ["", None, 3])
    def test_rejects_empty_or_non_string_name(self, bad: object) -> None:
        with pytest.raises(ValueError):
            NamedFeature(bad)  # type: ignore[arg-type]


class TestFeatureName:
    def test_enum_member(self) -> None:
        assert feature_name(Colors.RED) == "RED"

    def test_named_feature(self) -> None:
        assert feature_name(NamedFeature("X")) == "X"

    def test_plain_string(self) -> None:
        assert feature_name("X") == "X"

    def test_str_enum_member_uses_member_name(self) -> None:
        class Modes(enum.StrEnum):
            DARK = "light"

        assert feature_name(Modes.DARK) == "DARK"

    @pytest.mark.parametrize("bad", [None, object(), "", 42])
    def test_rejects_values_without_name(self, bad: object) -> None:
        with pytest.raises(UnknownFeatureError):
            feature_name(bad)


# ---------------------------------------------------------------------------
# FeatureMetaData
# ---------------------------------------------------------------------------


class TestFeatureMetaData:
    def test_defaults(self) -> None:
        metadata = FeatureMetaData(name="A", label="A")
        assert metadata.owner is None
        assert metadata.info_link is None
        assert metadata.enabled_by_default is False
        assert dict(metadata.attributes) == {}

    def test_label_falls_back_to_name(self) -> None:
        metadata = FeatureMetaData.from_annotations("A", owner("O"))
        assert metadata.label == "A"
        assert metadata.owner == "O"

    def test_declared_label_wins(self) -> None:
        assert FeatureMetaData.from_annotations("A", label("Nice")).label == "Nice"

    def test_empty_label_is_kept(self) -> None:
        assert FeatureMetaData.from_annotations("A", label("")).label == ""

    def test_hashable(self) -> None:
        metadata = FeatureMetaData(name="A", label="A", attributes={"k": "v"})
        assert metadata in {metadata}

    def test_attributes_copied_and_read_only(self) -> None:
        source = {"k": "v"}
        metadata = FeatureMetaData(name="A", label="A", attributes=source)
        source["k"] = "changed"
        assert metadata.attributes["k"] == "v"
        with pytest.raises(TypeError):
            metadata.attributes["k"] = "x"  # type: ignore[index]

    def test_to_dict(self) -> None:
        metadata = FeatureMetaData(name="A", label="L", owner="O", attributes={"k": "v"})
        assert metadata.to_dict() == {
            "name": "A",
            "label": "L",
            "owner": "O",
            "info_link": None,
            "enabled_by_default": False,
            "attributes": {"k": "v"},
        }
