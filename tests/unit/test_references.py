"""Tests for token reference resolution."""

from __future__ import annotations

import pytest

from subatomic_tokens.core.errors import TokenReferenceError
from subatomic_tokens.core.references import has_reference, reference_path, resolve_references


class TestReferencePath:
    def test_plain(self):
        assert reference_path("color.primary") == ("color", "primary")

    def test_value_suffix(self):
        assert reference_path("color.primary.value") == ("color", "primary")

    def test_has_reference(self):
        assert has_reference("{color.primary}")
        assert has_reference("1px solid {color.border}")
        assert not has_reference("#ffffff")


class TestResolveReferences:
    def test_whole_value(self, make_token, make_dictionary):
        dictionary = make_dictionary(
            make_token("color.primary", "#0055ff"),
            make_token("button.background", "{color.primary}"),
        )
        resolved = resolve_references(dictionary)
        assert resolved.find(("button", "background")).value == "#0055ff"

    def test_embedded_and_chained(self, make_token, make_dictionary):
        dictionary = make_dictionary(
            make_token("border.width", "0.0625rem"),
            make_token("color.base", "#333"),
            make_token("color.border", "{color.base.value}"),
            make_token("border.default", "{border.width} solid {color.border}"),
        )
        resolved = resolve_references(dictionary)
        assert resolved.find(("border", "default")).value == "0.0625rem solid #333"

    def test_keeps_source_value(self, make_token, make_dictionary):
        dictionary = make_dictionary(
            make_token("color.primary", "#000"),
            make_token("link", "{color.primary}", original_value="{color.primary}"),
        )
        link = resolve_references(dictionary).find(("link",))
        assert link.value == "#000"
        assert link.source_value == "{color.primary}"

    def test_unknown_target(self, make_token, make_dictionary):
        dictionary = make_dictionary(make_token("button.background", "{color.missing}"))
        with pytest.raises(TokenReferenceError, match="color.missing"):
            resolve_references(dictionary)

    def test_cycle(self, make_token, make_dictionary):
        dictionary = make_dictionary(
            make_token("a", "{b}"),
            make_token("b", "{a}"),
        )
        with pytest.raises(TokenReferenceError, match="Circular"):
            resolve_references(dictionary)

    def test_no_references_is_identity(self, make_token, make_dictionary):
        dictionary = make_dictionary(make_token("color.primary", "#000"))
        assert resolve_references(dictionary) is dictionary
