"""
Output identifiers derived from token paths.

CSS custom properties and JSON keys use kebab case with a ``ds-`` prefix;
JS/TS exports use Pascal case with a ``Ds`` prefix. Higher-tier tokens get
an extra ``theme`` marker in both forms.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ir import Tier

VIRTUAL_SEGMENT_MARKER = "@"

CSS_PREFIX = "ds-"
CSS_THEME_PREFIX = "ds-theme-"
JS_PREFIX = "Ds"
JS_THEME_PREFIX = "DsTheme"


def clean_path(path: Sequence[str]) -> list[str]:
    """Strip the virtual-segment marker and drop empty segments."""
    cleaned = (
        segment[1:] if segment.startswith(VIRTUAL_SEGMENT_MARKER) else segment
        for segment in path
    )
    return [segment for segment in cleaned if segment != ""]


def kebab_name(path: Sequence[str]) -> str:
    """``["@global", "color", "primary"]`` -> ``global-color-primary``."""
    return "-".join(clean_path(path))


def css_variable_name(path: Sequence[str], tier: Tier) -> str:
    """Custom property / JSON key name, without the leading ``--``."""
    prefix = CSS_THEME_PREFIX if tier is Tier.HIGHER else CSS_PREFIX
    return f"{prefix}{kebab_name(path)}"


def pascal_case(kebab: str) -> str:
    # Only the first character of each part changes case
    return "".join(part[:1].upper() + part[1:] for part in kebab.split("-"))


def pascal_name(path: Sequence[str], tier: Tier) -> str:
    """JS/TS export name: ``DsGlobalColorPrimary`` or ``DsThemeGlobalColorPrimary``."""
    prefix = JS_THEME_PREFIX if tier is Tier.HIGHER else JS_PREFIX
    return f"{prefix}{pascal_case(kebab_name(path))}"
