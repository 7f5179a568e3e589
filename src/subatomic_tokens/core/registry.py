"""
Per-build registry of transforms, transform groups and formats.

Each theme build constructs its own registry with ``create_registry()``
and hands it to the platform pipeline, so nothing is registered on shared
module state and builds can run side by side.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .errors import RegistryError
from .formatters import BUILTIN_FORMATS, Formatter
from .ir import Dictionary, PlatformConfig, Token
from .naming import kebab_name, pascal_name
from .references import has_reference
from .transforms import is_px_value, px_to_rem

CTI_KEYS: tuple[str, ...] = ("category", "type", "item", "subitem", "state")


class TransformType(StrEnum):
    """Which part of a token a transform rewrites."""

    ATTRIBUTE = "attribute"
    NAME = "name"
    VALUE = "value"


@dataclass(frozen=True)
class Transform:
    """A named token transform.

    ``transformer`` returns the new attributes mapping, name or value,
    depending on ``type``. Tokens the ``matcher`` rejects are left alone.
    """

    name: str
    type: TransformType
    transformer: Callable[[Token, PlatformConfig], Any]
    matcher: Callable[[Token], bool] | None = None

    def applies_to(self, token: Token) -> bool:
        if self.type is TransformType.VALUE and has_reference(token.source_value):
            # Resolved later from the referenced token's transformed value
            return False
        return self.matcher is None or self.matcher(token)

    def apply(self, token: Token, platform: PlatformConfig) -> Token:
        result = self.transformer(token, platform)
        if self.type is TransformType.ATTRIBUTE:
            return token.model_copy(update={"attributes": dict(result)})
        if self.type is TransformType.NAME:
            return token.model_copy(update={"name": str(result)})
        return token.model_copy(update={"value": str(result)})


class TokenRegistry:
    """
    Registry for the transforms, transform groups and formats of one build.

    Registering a name twice replaces the earlier entry.
    """

    def __init__(self) -> None:
        self._transforms: dict[str, Transform] = {}
        self._transform_groups: dict[str, tuple[str, ...]] = {}
        self._formats: dict[str, Formatter] = {}

    def register_transform(self, transform: Transform) -> None:
        """Register a transform under its name."""
        self._transforms[transform.name] = transform

    def register_transform_group(self, name: str, transforms: list[str]) -> None:
        """Register an ordered group of transform names."""
        unknown = [t for t in transforms if t not in self._transforms]
        if unknown:
            raise RegistryError(
                f"Transform group '{name}' uses unregistered transforms: {', '.join(unknown)}"
            )
        self._transform_groups[name] = tuple(transforms)

    def register_format(self, name: str, formatter: Formatter) -> None:
        """Register a format function."""
        self._formats[name] = formatter

    def get_transform(self, name: str) -> Transform:
        try:
            return self._transforms[name]
        except KeyError:
            raise RegistryError(f"Unknown transform: {name}") from None

    def get_transform_group(self, name: str) -> list[Transform]:
        """Transforms of a group, in application order."""
        try:
            names = self._transform_groups[name]
        except KeyError:
            raise RegistryError(f"Unknown transform group: {name}") from None
        return [self.get_transform(t) for t in names]

    def get_format(self, name: str) -> Formatter:
        try:
            return self._formats[name]
        except KeyError:
            raise RegistryError(f"Unknown format: {name}") from None

    def list_transforms(self) -> list[str]:
        return list(self._transforms)

    def list_transform_groups(self) -> list[str]:
        return list(self._transform_groups)

    def list_formats(self) -> list[str]:
        return list(self._formats)

    def transform_dictionary(self, dictionary: Dictionary, platform: PlatformConfig) -> Dictionary:
        """Apply the platform's transform group to every token."""
        group = self.get_transform_group(platform.transform_group)

        def transform_token(token: Token) -> Token:
            for transform in group:
                if transform.applies_to(token):
                    token = transform.apply(token, platform)
            return token

        return dictionary.replace_tokens([transform_token(t) for t in dictionary.all_tokens])


# =============================================================================
# Built-in transforms
# =============================================================================


def cti_attributes(token: Token, platform: PlatformConfig) -> dict[str, Any]:
    """Category/type/item attributes from the path; declared attributes win."""
    derived = dict(zip(CTI_KEYS, token.path, strict=False))
    return {**derived, **token.attributes}


def kebab_token_name(token: Token, platform: PlatformConfig) -> str:
    parts = [platform.prefix, kebab_name(token.path)]
    return "-".join(part for part in parts if part).lower()


def theme_prefixed_name(token: Token, platform: PlatformConfig) -> str:
    return pascal_name(token.path, token.tier)


def px_to_rem_value(token: Token, platform: PlatformConfig) -> str:
    return px_to_rem(token.value)


BUILTIN_TRANSFORMS: tuple[Transform, ...] = (
    Transform("attribute/cti", TransformType.ATTRIBUTE, cti_attributes),
    Transform("name/kebab", TransformType.NAME, kebab_token_name),
    Transform("name/theme-prefix", TransformType.NAME, theme_prefixed_name),
    Transform(
        "size/px-to-rem",
        TransformType.VALUE,
        px_to_rem_value,
        matcher=lambda token: is_px_value(token.value),
    ),
)

BUILTIN_TRANSFORM_GROUPS: dict[str, list[str]] = {
    "custom/css": ["attribute/cti", "name/kebab", "size/px-to-rem"],
    "custom/js": ["attribute/cti", "name/theme-prefix", "size/px-to-rem"],
}


def create_registry() -> TokenRegistry:
    """A fresh registry holding the built-in transforms, groups and formats."""
    registry = TokenRegistry()
    for transform in BUILTIN_TRANSFORMS:
        registry.register_transform(transform)
    for name, transforms in BUILTIN_TRANSFORM_GROUPS.items():
        registry.register_transform_group(name, transforms)
    for name, formatter in BUILTIN_FORMATS.items():
        registry.register_format(name, formatter)
    return registry
