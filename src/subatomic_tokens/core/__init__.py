"""Core token pipeline: IR, loading, transforms, naming, formats and build orchestration."""

from . import ir
from .builder import BuildResult, BuildTask, build_theme, build_themes, resolve_themes
from .errors import (
    ConfigError,
    ErrorContext,
    RegistryError,
    TokenError,
    TokenLoadError,
    TokenReferenceError,
)
from .loader import load_dictionary
from .registry import TokenRegistry, create_registry
from .settings import BuildSettings, load_settings

__all__ = [
    "ir",
    # Errors
    "TokenError",
    "TokenLoadError",
    "TokenReferenceError",
    "RegistryError",
    "ConfigError",
    "ErrorContext",
    # Settings
    "BuildSettings",
    "load_settings",
    # Pipeline
    "load_dictionary",
    "TokenRegistry",
    "create_registry",
    "BuildResult",
    "BuildTask",
    "build_theme",
    "build_themes",
    "resolve_themes",
]
