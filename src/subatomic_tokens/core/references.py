"""
Token reference resolution.

A value may name other tokens with ``{path.to.token}`` placeholders (a
trailing ``.value`` is accepted). References are resolved after value
transforms so a referencing token picks up the transformed value of its
target, e.g. ``{size.sm}`` becomes ``0.5rem`` rather than ``8px``.
"""

from __future__ import annotations

import re

from .errors import TokenReferenceError
from .ir import Dictionary, Token

REFERENCE_PATTERN = re.compile(r"\{([^{}]+)\}")


def has_reference(value: str) -> bool:
    return REFERENCE_PATTERN.search(value) is not None


def reference_path(reference: str) -> tuple[str, ...]:
    """``"color.primary.value"`` -> ``("color", "primary")``."""
    parts = tuple(part.strip() for part in reference.strip().split("."))
    if len(parts) > 1 and parts[-1] in ("value", "$value"):
        parts = parts[:-1]
    return parts


def resolve_references(dictionary: Dictionary) -> Dictionary:
    """Return a dictionary in which every reference is replaced by its target's value.

    Raises:
        TokenReferenceError: On a reference to an unknown token or a cycle.
    """
    by_path: dict[tuple[str, ...], Token] = {token.path: token for token in dictionary.all_tokens}
    resolved: dict[tuple[str, ...], str] = {}

    def resolve(token: Token, chain: tuple[tuple[str, ...], ...]) -> str:
        if token.path in resolved:
            return resolved[token.path]
        if token.path in chain:
            cycle = " -> ".join(".".join(p) for p in (*chain, token.path))
            raise TokenReferenceError(f"Circular token reference: {cycle}")

        def substitute(match: re.Match[str]) -> str:
            target_path = reference_path(match.group(1))
            target = by_path.get(target_path)
            if target is None:
                raise TokenReferenceError(
                    f"Token '{token.dotted_path}' ({token.origin}) references "
                    f"unknown token '{'.'.join(target_path)}'"
                )
            return resolve(target, (*chain, token.path))

        value = REFERENCE_PATTERN.sub(substitute, token.value)
        resolved[token.path] = value
        return value

    if not any(has_reference(token.value) for token in dictionary.all_tokens):
        return dictionary

    tokens = [
        token.model_copy(update={"value": resolve(token, ())})
        if has_reference(token.value)
        else token
        for token in dictionary.all_tokens
    ]
    return dictionary.replace_tokens(tokens)
