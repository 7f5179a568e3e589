"""
Per-theme platform definitions.

Destinations are relative to the token root and namespaced by theme and
platform, so no two builds write the same file.
"""

from __future__ import annotations

from .ir import FileConfig, PlatformConfig, TokenFilter
from .settings import BuildSettings


def platform_configs(theme: str, settings: BuildSettings) -> tuple[PlatformConfig, ...]:
    """Output platforms for one theme: JS/TS modules, CSS rulesets and flat JSON."""
    token_filter = TokenFilter(attributes={"category": settings.category})
    base = f"{theme}/build" if theme else "build"

    return (
        PlatformConfig(
            name="ts",
            transform_group="custom/js",
            prefix="Ds",
            filter=token_filter,
            files=(
                FileConfig(destination=f"{base}/js/tokens.js", format="javascript/es6"),
                FileConfig(
                    destination=f"{base}/js/tokens.d.ts",
                    format="typescript/es6-declarations",
                ),
            ),
        ),
        PlatformConfig(
            name="css",
            transform_group="custom/css",
            prefix="ds",
            filter=token_filter,
            files=(
                FileConfig(destination=f"{base}/css/tokens.css", format="css/custom-variables"),
                FileConfig(destination=f"{base}/css/{theme}.css", format="css/variables-themed"),
            ),
        ),
        PlatformConfig(
            name="json",
            transform_group="custom/css",
            prefix="ds",
            filter=token_filter,
            files=(
                FileConfig(destination=f"{base}/json/tokens.json", format="json/flat/custom"),
            ),
        ),
    )
