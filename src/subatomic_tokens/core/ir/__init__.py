"""
Intermediate representation for the token build.

All types are re-exported from this package.
"""

from .platforms import (
    FileConfig,
    FormatContext,
    PlatformConfig,
    TokenFilter,
)
from .tokens import (
    NEUTRAL_SHADOW,
    SHADOW_COMPONENTS,
    Dictionary,
    ShadowGroup,
    Tier,
    Token,
)

__all__ = [
    # Tokens
    "Tier",
    "Token",
    "Dictionary",
    "ShadowGroup",
    "SHADOW_COMPONENTS",
    "NEUTRAL_SHADOW",
    # Platforms
    "TokenFilter",
    "FileConfig",
    "PlatformConfig",
    "FormatContext",
]
