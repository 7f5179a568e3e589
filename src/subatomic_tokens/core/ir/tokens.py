"""
Token IR types.

A Token is one named design value keyed by its hierarchical path. A
Dictionary is the merged, ordered collection of tokens for one theme
build. Both are rebuilt from the source documents on every build.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Tier(StrEnum):
    """Where a token sits in the token hierarchy."""

    FOUNDATIONAL = "foundational"
    HIGHER = "higher-tier"


# =============================================================================
# Token
# =============================================================================


class Token(BaseModel):
    """A single design token.

    ``tier`` is derived from ``origin`` once, when the token is loaded.
    ``name`` stays empty until a name transform assigns the output
    identifier for a platform.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: tuple[str, ...] = Field(min_length=1, description="Hierarchical key path")
    value: str = Field(description="Token value (raw or transformed)")
    origin: str = Field(description="Source document path, relative to the token root")
    tier: Tier = Field(default=Tier.FOUNDATIONAL)
    attributes: dict[str, Any] = Field(default_factory=dict)
    name: str = Field(default="", description="Output identifier assigned by a name transform")
    comment: str | None = Field(default=None, description="Description carried into JS/TS output")
    original_value: str | None = Field(
        default=None, description="Value as written in the source document"
    )

    @property
    def root(self) -> str:
        return self.path[0]

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    @property
    def is_higher_tier(self) -> bool:
        return self.tier is Tier.HIGHER

    @property
    def source_value(self) -> str:
        """Value as written in the source, before any transform."""
        return self.original_value if self.original_value is not None else self.value


# =============================================================================
# Dictionary
# =============================================================================


class Dictionary(BaseModel):
    """Ordered token collection for one theme build."""

    model_config = ConfigDict(frozen=True)

    theme: str = Field(default="", description="Theme the dictionary was loaded for")
    tokens: tuple[Token, ...] = Field(default=())

    @property
    def all_tokens(self) -> tuple[Token, ...]:
        return self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def find(self, path: Sequence[str]) -> Token | None:
        """Return the token at ``path``, or None."""
        wanted = tuple(path)
        for token in self.tokens:
            if token.path == wanted:
                return token
        return None

    def filter(self, predicate: Callable[[Token], bool]) -> Dictionary:
        """Return a new dictionary holding only the tokens matching ``predicate``."""
        return self.model_copy(update={"tokens": tuple(t for t in self.tokens if predicate(t))})

    def replace_tokens(self, tokens: Sequence[Token]) -> Dictionary:
        return self.model_copy(update={"tokens": tuple(tokens)})


# =============================================================================
# Shadows
# =============================================================================

SHADOW_COMPONENTS: tuple[str, ...] = ("x", "y", "blur", "spread", "color")


class ShadowGroup(BaseModel):
    """The five shadow sub-tokens sharing one size key, with defaults applied."""

    model_config = ConfigDict(frozen=True)

    size: str
    x: str = "0px"
    y: str = "0px"
    blur: str = "0px"
    spread: str = "0px"
    color: str = "transparent"

    @property
    def value(self) -> str:
        """Composed CSS shadow value in ``x y blur spread color`` order."""
        return " ".join(getattr(self, component) for component in SHADOW_COMPONENTS)

    @property
    def is_neutral(self) -> bool:
        return self.value == NEUTRAL_SHADOW


NEUTRAL_SHADOW = ShadowGroup(size="").value
