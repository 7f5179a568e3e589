"""Tests for the per-build transform/format registry."""

from __future__ import annotations

import pytest

from subatomic_tokens.core.errors import RegistryError
from subatomic_tokens.core.ir import PlatformConfig
from subatomic_tokens.core.registry import (
    Transform,
    TransformType,
    create_registry,
    cti_attributes,
)

CSS = PlatformConfig(name="css", transform_group="custom/css", prefix="ds")
JS = PlatformConfig(name="ts", transform_group="custom/js", prefix="Ds")
USAGE = "vanilla/tier-2-usage/tokens.json"


class TestBuiltins:
    def test_registered_names(self):
        registry = create_registry()
        assert registry.list_transforms() == [
            "attribute/cti",
            "name/kebab",
            "name/theme-prefix",
            "size/px-to-rem",
        ]
        assert registry.list_transform_groups() == ["custom/css", "custom/js"]
        assert "json/flat/custom" in registry.list_formats()

    def test_group_order(self):
        group = create_registry().get_transform_group("custom/js")
        assert [t.name for t in group] == ["attribute/cti", "name/theme-prefix", "size/px-to-rem"]

    @pytest.mark.parametrize(
        "lookup",
        [
            lambda r: r.get_transform("size/unknown"),
            lambda r: r.get_transform_group("custom/android"),
            lambda r: r.get_format("scss/map"),
        ],
    )
    def test_unknown_names_raise(self, lookup):
        with pytest.raises(RegistryError, match="Unknown"):
            lookup(create_registry())

    def test_group_with_unregistered_transform(self):
        registry = create_registry()
        with pytest.raises(RegistryError, match="color/hex"):
            registry.register_transform_group("custom/broken", ["attribute/cti", "color/hex"])

    def test_registries_are_independent(self):
        first = create_registry()
        second = create_registry()
        first.register_format("text/plain", lambda dictionary, context: "")
        assert "text/plain" in first.list_formats()
        assert "text/plain" not in second.list_formats()


class TestCtiAttributes:
    def test_derived_from_path(self, make_token):
        token = make_token("color.background.button.primary.hover.extra", "#000")
        assert cti_attributes(token, CSS) == {
            "category": "color",
            "type": "background",
            "item": "button",
            "subitem": "primary",
            "state": "hover",
        }

    def test_declared_attributes_win(self, make_token):
        token = make_token("color.primary", "#000", attributes={"category": "theme", "deprecated": True})
        assert cti_attributes(token, CSS) == {
            "category": "theme",
            "type": "primary",
            "deprecated": True,
        }


class TestTransformDictionary:
    def test_css_group(self, make_token, make_dictionary):
        dictionary = make_dictionary(make_token("space.@sm", "8px"))
        token = create_registry().transform_dictionary(dictionary, CSS).find(("space", "@sm"))
        assert token.name == "ds-space-sm"
        assert token.value == "0.5rem"
        assert token.attributes["category"] == "space"

    def test_js_group_uses_tier(self, make_token, make_dictionary):
        dictionary = make_dictionary(
            make_token("color.primary", "#000", USAGE),
            make_token("space.sm", "8px"),
        )
        transformed = create_registry().transform_dictionary(dictionary, JS)
        assert [t.name for t in transformed.all_tokens] == ["DsThemeColorPrimary", "DsSpaceSm"]

    def test_value_transform_skips_references(self, make_token, make_dictionary):
        dictionary = make_dictionary(make_token("space.md", "{space.sm}px"))
        token = create_registry().transform_dictionary(dictionary, CSS).find(("space", "md"))
        assert token.value == "{space.sm}px"
        assert token.name == "ds-space-md"

    def test_non_px_values_untouched(self, make_token, make_dictionary):
        dictionary = make_dictionary(make_token("opacity.muted", "0.5"))
        token = create_registry().transform_dictionary(dictionary, CSS).find(("opacity", "muted"))
        assert token.value == "0.5"

    def test_custom_transform(self, make_token, make_dictionary):
        registry = create_registry()
        registry.register_transform(
            Transform("value/upper", TransformType.VALUE, lambda token, platform: token.value.upper())
        )
        registry.register_transform_group("custom/upper", ["value/upper"])
        platform = PlatformConfig(name="upper", transform_group="custom/upper")
        dictionary = make_dictionary(make_token("color.primary", "#abc"))
        assert registry.transform_dictionary(dictionary, platform).all_tokens[0].value == "#ABC"

    def test_source_dictionary_unchanged(self, make_token, make_dictionary):
        dictionary = make_dictionary(make_token("space.sm", "8px"))
        create_registry().transform_dictionary(dictionary, CSS)
        assert dictionary.all_tokens[0].value == "8px"
