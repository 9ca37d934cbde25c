"""Unit tests for FeatureSettings and create_feature_provider."""

from __future__ import annotations

import enum
import http
from enum import auto

import pytest

from mp_features.config import (
    EnvSettingsLoader,
    FeatureSettings,
    create_feature_provider,
    load_feature_enum,
)
from mp_features.features import (
    CompositeFeatureProvider,
    EnumBasedFeatureProvider,
    FeatureEnum,
    InvalidFeatureConfigurationError,
    InvalidFeatureTypeError,
    label,
)


class ReportFeatures(FeatureEnum):
    PDF_EXPORT = label("PDF export")
    CSV_EXPORT = auto()


class SearchFeatures(enum.Enum):
    FUZZY = 1


class Namespace:
    class Nested(enum.Enum):
        INNER = 1


NOT_AN_ENUM = object()


def _ref(name: str) -> str:
    return f"{__name__}:{name}"


# ---------------------------------------------------------------------------
# FeatureSettings
# ---------------------------------------------------------------------------


class TestFeatureSettings:
    def test_empty_by_default(self) -> None:
        assert FeatureSettings().enums == []

    def test_rejects_malformed_reference(self) -> None:
        with pytest.raises(InvalidFeatureConfigurationError):
            FeatureSettings(enums=["no_colon_here"])

    @pytest.mark.parametrize("ref", [":Flags", ".features:Flags", "pkg.mod:", "pkg.mod:Outer..Inner"])
    def test_rejects_empty_or_relative_parts(self, ref: str) -> None:
        with pytest.raises(InvalidFeatureConfigurationError):
            FeatureSettings(enums=[ref])

    def test_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEATURES_ENUMS", f"{_ref('ReportFeatures')}, {_ref('SearchFeatures')}")
        settings = EnvSettingsLoader().load(FeatureSettings)
        assert settings.enums == [_ref("ReportFeatures"), _ref("SearchFeatures")]

    def test_malformed_environment_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEATURES_ENUMS", "broken")
        with pytest.raises(InvalidFeatureConfigurationError):
            EnvSettingsLoader().load(FeatureSettings)


# ---------------------------------------------------------------------------
# load_feature_enum
# ---------------------------------------------------------------------------


class TestLoadFeatureEnum:
    def test_loads_stdlib_enum(self) -> None:
        assert load_feature_enum("http:HTTPStatus") is http.HTTPStatus

    def test_loads_nested_attribute(self) -> None:
        assert load_feature_enum(_ref("Namespace.Nested")) is Namespace.Nested

    def test_unknown_module(self) -> None:
        with pytest.raises(InvalidFeatureTypeError) as exc_info:
            load_feature_enum("no_such_module_xyz:Features")
        assert isinstance(exc_info.value.__cause__, ImportError)

    @pytest.mark.parametrize("ref", [":Flags", ".features:Flags", "no_colon"])
    def test_malformed_reference(self, ref: str) -> None:
        with pytest.raises(InvalidFeatureTypeError):
            load_feature_enum(ref)

    def test_unknown_attribute(self) -> None:
        with pytest.raises(InvalidFeatureTypeError):
            load_feature_enum(_ref("DoesNotExist"))


# ---------------------------------------------------------------------------
# create_feature_provider
# ---------------------------------------------------------------------------


class TestCreateFeatureProvider:
    def test_single_enum_gives_enum_provider(self) -> None:
        provider = create_feature_provider(FeatureSettings(enums=[_ref("ReportFeatures")]))
        assert isinstance(provider, EnumBasedFeatureProvider)
        assert provider.get_metadata("PDF_EXPORT").label == "PDF export"

    def test_several_enums_give_composite(self) -> None:
        provider = create_feature_provider(
            FeatureSettings(enums=[_ref("ReportFeatures"), _ref("SearchFeatures")])
        )
        assert isinstance(provider, CompositeFeatureProvider)
        assert [f.name for f in provider.get_features()] == ["PDF_EXPORT", "CSV_EXPORT", "FUZZY"]

    def test_no_enums_configured(self) -> None:
        with pytest.raises(InvalidFeatureConfigurationError):
            create_feature_provider(FeatureSettings())

    def test_reference_to_non_enum(self) -> None:
        with pytest.raises(InvalidFeatureTypeError):
            create_feature_provider(FeatureSettings(enums=[_ref("NOT_AN_ENUM")]))

    def test_loads_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEATURES_ENUMS", _ref("SearchFeatures"))
        provider = create_feature_provider()
        assert [f.name for f in provider.get_features()] == ["FUZZY"]

    def test_uses_given_loader(self) -> None:
        class StaticLoader(EnvSettingsLoader):
            def load(self, settings_class):  # type: ignore[no-untyped-def]
                return settings_class(enums=[_ref("ReportFeatures")])

        provider = create_feature_provider(loader=StaticLoader())
        assert len(provider) == 2
