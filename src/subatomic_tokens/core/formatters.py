"""
Output formats.

Every format is a pure function ``(dictionary, context) -> str``. Formats
see tokens after the platform's transforms, reference resolution and
filter have been applied. Output carries no timestamps, so formatting the
same dictionary twice yields identical text.
"""

from __future__ import annotations

import json
from collections.abc import Callable

from .ir import NEUTRAL_SHADOW, Dictionary, FormatContext, Token
from .naming import css_variable_name, kebab_name, pascal_name
from .transforms import (
    SHADOW_ROOT,
    Z_INDEX_ROOT,
    compose_shadow,
    higher_tier_shadow_sizes,
    is_line_height_token,
    is_shadow_component,
    normalize_line_height,
)

Formatter = Callable[[Dictionary, FormatContext], str]

GENERATED_HEADER = "/**\n * Do not edit directly, this file was auto-generated.\n */\n\n"


# =============================================================================
# CSS custom properties
# =============================================================================


def _declaration(name: str, value: str) -> str:
    return f"  --{name}: {value};"


def _passes_gate(token: Token, include_foundational: bool) -> bool:
    return token.root == Z_INDEX_ROOT or include_foundational or token.is_higher_tier


def format_variables(dictionary: Dictionary, include_foundational: bool = False) -> str:
    """Custom property declarations for the inside of a CSS ruleset.

    Foundational tokens are skipped unless ``include_foundational`` is set;
    ``z-index`` tokens are always included. Shadow sub-tokens collapse into
    one composed declaration per size, line heights become unitless ratios,
    and identical declarations are emitted once.

    Line heights are named by tier like every other token, so a foundational
    one is ``--ds-typography-...-line-height``. Earlier builds always used the
    ``--ds-theme-`` prefix for line heights.
    """
    emitted_shadows: set[str] = set()
    lines: list[str] = []

    shadow_sizes = {
        token.path[1]
        for token in dictionary.all_tokens
        if _passes_gate(token, include_foundational) and is_shadow_component(token)
    }

    for token in dictionary.all_tokens:
        if not _passes_gate(token, include_foundational):
            continue

        if token.root == SHADOW_ROOT and len(token.path) > 1 and token.path[1] in shadow_sizes:
            size = token.path[1]
            if size in emitted_shadows:
                continue
            emitted_shadows.add(size)
            value = compose_shadow(dictionary, size)
            lines.append(_declaration(f"ds-theme-box-shadow-{size}", value))
        elif is_line_height_token(token):
            value = normalize_line_height(dictionary, token)
            lines.append(_declaration(css_variable_name(token.path, token.tier), value))
        elif token.root == Z_INDEX_ROOT:
            lines.append(_declaration(f"ds-{kebab_name(token.path)}", token.value))
        elif SHADOW_ROOT not in token.path or len(token.path) > 3:
            lines.append(_declaration(css_variable_name(token.path, token.tier), token.value))

    return "\n".join(dict.fromkeys(lines))


def format_css_root(dictionary: Dictionary, context: FormatContext) -> str:
    """``:root { ... }`` ruleset."""
    include_foundational = bool(context.option("include_foundational", False))
    return f":root {{\n{format_variables(dictionary, include_foundational)}\n}}"


def format_css_themed(dictionary: Dictionary, context: FormatContext) -> str:
    """``.<theme> { ... }`` ruleset for switching themes with a class name."""
    return f".{context.theme} {{\n{format_variables(dictionary, include_foundational=True)}\n}}\n"


# =============================================================================
# Flat JSON
# =============================================================================


def flat_token_map(dictionary: Dictionary) -> dict[str, str]:
    """Prefixed kebab name -> value, with shadow sub-tokens composed per size.

    A size whose composed value is the neutral shadow is left out.
    """
    flat: dict[str, str] = {}
    for token in dictionary.all_tokens:
        if is_shadow_component(token):
            continue
        flat[css_variable_name(token.path, token.tier)] = token.value

    for size in higher_tier_shadow_sizes(dictionary):
        value = compose_shadow(dictionary, size)
        if value != NEUTRAL_SHADOW:
            flat[f"ds-theme-box-shadow-{size}"] = value
    return flat


def format_json_flat(dictionary: Dictionary, context: FormatContext) -> str:
    return json.dumps(flat_token_map(dictionary), indent=2, ensure_ascii=False)


# =============================================================================
# JS / TS modules
# =============================================================================


def _export_name(token: Token) -> str:
    return token.name or pascal_name(token.path, token.tier)


def format_javascript_es6(dictionary: Dictionary, context: FormatContext) -> str:
    """``export const DsName = "value";`` per token."""
    lines = []
    for token in dictionary.all_tokens:
        value = json.dumps(token.value, ensure_ascii=False)
        line = f"export const {_export_name(token)} = {value};"
        if token.comment:
            line += f" // {token.comment}"
        lines.append(line)
    return GENERATED_HEADER + "\n".join(lines) + "\n"


def format_typescript_declarations(dictionary: Dictionary, context: FormatContext) -> str:
    """``export const DsName : string;`` per token."""
    lines = []
    for token in dictionary.all_tokens:
        if token.comment:
            lines.append(f"/** {token.comment} */")
        lines.append(f"export const {_export_name(token)} : string;")
    return GENERATED_HEADER + "\n".join(lines) + "\n"


BUILTIN_FORMATS: dict[str, Formatter] = {
    "css/custom-variables": format_css_root,
    "css/variables-themed": format_css_themed,
    "json/flat/custom": format_json_flat,
    "javascript/es6": format_javascript_es6,
    "typescript/es6-declarations": format_typescript_declarations,
}
