"""Tier classification of token source documents."""

from __future__ import annotations

from collections.abc import Iterable

from .ir import Tier
from .settings import DEFAULT_HIGHER_TIER_MARKERS


def classify(origin: str, markers: Iterable[str] = DEFAULT_HIGHER_TIER_MARKERS) -> Tier:
    """Classify a token by the path of the document that defined it.

    Usage-layer and component-layer documents are higher tier; everything
    else is foundational.
    """
    if any(marker in origin for marker in markers):
        return Tier.HIGHER
    return Tier.FOUNDATIONAL
