"""
subatomic-tokens - design token build pipeline.

Turns tiered design-token JSON documents into CSS custom properties, a
flat JSON map and JS/TS token modules, one set per theme.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.builder import build_theme, build_themes
from .core.errors import (
    ConfigError,
    RegistryError,
    TokenError,
    TokenLoadError,
    TokenReferenceError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "build_theme",
    "build_themes",
    "TokenError",
    "TokenLoadError",
    "TokenReferenceError",
    "RegistryError",
    "ConfigError",
]
