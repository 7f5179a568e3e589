"""
Platform build configuration types.

A platform is one output target (CSS, JSON or JS/TS) with its own
transform group, token filter and list of files to emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .tokens import Token


class TokenFilter(BaseModel):
    """Attribute filter applied before a platform's files are formatted.

    A token passes when every listed attribute matches. Tokens whose path
    starts with one of ``always_include_roots`` pass regardless.
    """

    model_config = ConfigDict(frozen=True)

    attributes: dict[str, str] = Field(default_factory=dict)
    always_include_roots: tuple[str, ...] = Field(default=("z-index",))

    def matches(self, token: Token) -> bool:
        if token.root in self.always_include_roots:
            return True
        return all(token.attributes.get(key) == value for key, value in self.attributes.items())


class FileConfig(BaseModel):
    """One emitted file: destination, format name and format options."""

    model_config = ConfigDict(frozen=True)

    destination: str
    format: str
    options: dict[str, Any] = Field(default_factory=dict)


class PlatformConfig(BaseModel):
    """Immutable per-theme description of one output platform."""

    model_config = ConfigDict(frozen=True)

    name: str
    transform_group: str
    prefix: str = ""
    build_path: str = "./"
    filter: TokenFilter = Field(default_factory=TokenFilter)
    files: tuple[FileConfig, ...] = Field(default=())


@dataclass(frozen=True)
class FormatContext:
    """Everything a format function may read besides the dictionary."""

    theme: str
    platform: PlatformConfig
    file: FileConfig

    def option(self, key: str, default: Any = None) -> Any:
        return self.file.options.get(key, default)
