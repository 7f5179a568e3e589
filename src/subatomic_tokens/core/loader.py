"""
Token source loading.

Reads the foundational ``core`` layer and one theme's override layer into a
single Dictionary. A token is any JSON object carrying a ``value`` (or DTCG
``$value``) key; the chain of object keys leading to it is its path.

Theme documents override foundational ones token by token: an overriding
object is merged over the original, so properties it does not restate
(``attributes``, ``comment``) survive, and the token keeps its original
position in the dictionary.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .errors import TokenLoadError, make_load_error
from .ir import Dictionary, Token
from .settings import BuildSettings
from .tiers import classify

logger = logging.getLogger(__name__)

VALUE_KEYS: tuple[str, ...] = ("value", "$value")
COMMENT_KEYS: tuple[str, ...] = ("comment", "$description")
BUILD_DIR = "build"


# =============================================================================
# Source discovery
# =============================================================================


def _layer_files(layer_dir: Path) -> list[Path]:
    """All JSON documents of one layer, sorted, skipping emitted build output."""
    if not layer_dir.is_dir():
        return []
    files = [
        path
        for path in layer_dir.rglob("*.json")
        if BUILD_DIR not in path.relative_to(layer_dir).parts[:-1]
    ]
    return sorted(files, key=lambda p: p.as_posix())


def discover_sources(theme: str, settings: BuildSettings) -> list[Path]:
    """List source documents for a theme: foundational layer first, then overrides."""
    sources = _layer_files(settings.core_path)

    if not theme.strip():
        logger.debug("No theme name given, loading foundational tokens only")
        return sources

    theme_dir = settings.theme_path(theme)
    if not theme_dir.is_dir():
        logger.debug("No token directory for theme '%s' at %s", theme, theme_dir)
        return sources

    return sources + _layer_files(theme_dir)


# =============================================================================
# Documents
# =============================================================================


def load_document(path: Path) -> dict[str, Any]:
    """Parse one token source document.

    Raises:
        TokenLoadError: If the file cannot be read, is not valid JSON, or its
            root is not a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise make_load_error(f"Cannot read token document: {e}", path) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise make_load_error(
            f"Invalid JSON: {e.msg}", path, source=content, line=e.lineno, column=e.colno
        ) from e

    if not isinstance(data, dict):
        raise make_load_error("Token document root must be a JSON object", path)
    return data


def _is_token(node: dict[str, Any]) -> bool:
    return any(key in node for key in VALUE_KEYS)


def iter_token_nodes(
    node: dict[str, Any], prefix: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], dict[str, Any]]]:
    """Yield ``(path, token_object)`` pairs depth-first in document order."""
    for key, child in node.items():
        if not isinstance(child, dict):
            continue
        path = (*prefix, key)
        if _is_token(child):
            yield path, child
        else:
            yield from iter_token_nodes(child, path)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def coerce_value(raw: Any) -> str:
    """Render a scalar JSON value the way it appears in CSS/JS output."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, str):
        return raw
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, float):
        return str(int(raw)) if raw.is_integer() else repr(raw)
    raise TypeError(f"unsupported token value {raw!r}")


# =============================================================================
# Loading
# =============================================================================


def _origin(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _build_token(
    path: tuple[str, ...], props: dict[str, Any], origin: str, settings: BuildSettings
) -> Token:
    raw = next(props[key] for key in VALUE_KEYS if key in props)
    try:
        value = coerce_value(raw)
    except TypeError as e:
        raise TokenLoadError(f"{origin}: token '{'.'.join(path)}' has {e}") from e

    attributes = props.get("attributes")
    comment = next((props[key] for key in COMMENT_KEYS if props.get(key)), None)

    return Token(
        path=path,
        value=value,
        original_value=value,
        origin=origin,
        tier=classify(origin, settings.higher_tier_markers),
        attributes=dict(attributes) if isinstance(attributes, dict) else {},
        comment=str(comment) if comment is not None else None,
    )


def load_dictionary(theme: str, settings: BuildSettings) -> Dictionary:
    """Load and merge all token documents for ``theme``.

    Raises:
        TokenLoadError: If any source document is malformed.
    """
    merged: dict[tuple[str, ...], tuple[dict[str, Any], str]] = {}

    sources = discover_sources(theme, settings)
    for source in sources:
        origin = _origin(source, settings.root)
        document = load_document(source)
        for path, props in iter_token_nodes(document):
            existing = merged.get(path)
            if existing is not None:
                logger.debug("%s overrides %s from %s", ".".join(path), existing[1], origin)
                base = {key: val for key, val in existing[0].items() if key not in VALUE_KEYS}
                props = _deep_merge(base, props)
            merged[path] = (props, origin)

    tokens = [
        _build_token(path, props, origin, settings) for path, (props, origin) in merged.items()
    ]
    logger.debug(
        "Loaded %d tokens for theme '%s' from %d documents", len(tokens), theme, len(sources)
    )
    return Dictionary(theme=theme, tokens=tuple(tokens))
