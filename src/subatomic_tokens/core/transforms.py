"""
Value transforms.

Pure functions over token values: pixel to rem conversion, shadow
composition and unitless line-height normalization. None of them raise on
unexpected input; a value they cannot handle is passed through unchanged.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from .ir import SHADOW_COMPONENTS, Dictionary, ShadowGroup, Token

BASE_FONT_SIZE = 16  # 16px = 1rem

SHADOW_ROOT = "box-shadow"
TYPOGRAPHY_ROOT = "typography"
Z_INDEX_ROOT = "z-index"
LINE_HEIGHT = "line-height"
FONT_SIZE = "font-size"

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: str) -> float | None:
    """Parse the leading numeric part of ``value`` (``"12.5px"`` -> 12.5).

    Returns None when the value does not start with a finite number.
    """
    match = _LEADING_NUMBER.match(value.strip())
    if match is None:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def round_half_up(number: float, places: int) -> Decimal:
    """Round the exact binary value of ``number``, ties away from zero.

    Matches JavaScript's ``Number.prototype.toFixed``: ``0.03125`` -> ``0.0313``.
    """
    return Decimal(number).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_number(number: float, places: int) -> str:
    """Round to ``places`` decimals and drop trailing zeros (``2.0`` -> ``2``)."""
    text = f"{round_half_up(number, places):f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


# =============================================================================
# Pixels to rem
# =============================================================================


def is_px_value(value: object) -> bool:
    return isinstance(value, str) and value.endswith("px")


def px_to_rem(value: str, base: int = BASE_FONT_SIZE) -> str:
    """Convert ``"32px"`` to ``"2rem"``.

    Values without a ``px`` unit, and ``px`` values without a numeric
    magnitude, are returned unchanged.
    """
    if not is_px_value(value):
        return value
    pixels = parse_number(value.strip())
    if pixels is None:
        return value
    return f"{format_number(pixels / base, 4)}rem"


# =============================================================================
# Shadows
# =============================================================================


def is_shadow_component(token: Token) -> bool:
    """Whether the token is one sub-property (``x``, ``blur``...) of a sized shadow."""
    return token.root == SHADOW_ROOT and len(token.path) > 2


def shadow_group(dictionary: Dictionary, size: str) -> ShadowGroup:
    """Gather the higher-tier shadow sub-tokens for ``size``.

    Missing components keep their defaults (``0px`` / ``transparent``).
    """
    members = [
        token
        for token in dictionary.all_tokens
        if token.is_higher_tier and token.root == SHADOW_ROOT and len(token.path) > 2
        and token.path[1] == size
    ]
    values: dict[str, str] = {}
    for component in SHADOW_COMPONENTS:
        found = next((t for t in members if t.path[2] == component), None)
        if found is not None and found.value:
            values[component] = found.value
    return ShadowGroup(size=size, **values)


def compose_shadow(dictionary: Dictionary, size: str) -> str:
    """Composed ``x y blur spread color`` value for one shadow size."""
    return shadow_group(dictionary, size).value


def higher_tier_shadow_sizes(dictionary: Dictionary) -> list[str]:
    """Shadow size keys defined by higher-tier tokens, in first-seen order."""
    sizes = (
        t.path[1] for t in dictionary.all_tokens if t.is_higher_tier and is_shadow_component(t)
    )
    return list(dict.fromkeys(sizes))


# =============================================================================
# Line height
# =============================================================================


def is_line_height_token(token: Token) -> bool:
    return token.root == TYPOGRAPHY_ROOT and LINE_HEIGHT in token.path


def font_size_sibling_path(path: Sequence[str]) -> tuple[str, ...]:
    return (*path[:-1], FONT_SIZE)


def line_height_ratio(line_height: str, font_size: str, base: int = BASE_FONT_SIZE) -> str | None:
    """Unitless ratio of two rem values, to 2 decimals (``"1.5rem"``/``"1rem"`` -> ``"1.50"``).

    Returns None when either magnitude is missing or the font size is zero.
    """
    line_height_rem = parse_number(line_height.replace("rem", ""))
    font_size_rem = parse_number(font_size.replace("rem", ""))
    if line_height_rem is None or font_size_rem is None or font_size_rem == 0:
        return None
    return f"{round_half_up((line_height_rem * base) / (font_size_rem * base), 2):f}"


def normalize_line_height(dictionary: Dictionary, token: Token) -> str:
    """Normalized line-height value for ``token``, or its raw value."""
    font_size = dictionary.find(font_size_sibling_path(token.path))
    if font_size is None:
        return token.value
    ratio = line_height_ratio(token.value, font_size.value)
    return token.value if ratio is None else ratio
