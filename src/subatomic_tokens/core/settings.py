"""
Build settings for the token pipeline.

Settings are read from an optional ``tokens.yaml`` in the token root.
Every key is optional; a missing file means "use the defaults".

Default location: {token_root}/tokens.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

SETTINGS_FILE = "tokens.yaml"

DEFAULT_THEMES: tuple[str, ...] = ("vanilla", "strawberry", "chocolate", "dark-chocolate")
DEFAULT_HIGHER_TIER_MARKERS: tuple[str, ...] = ("tier-2-usage", "tier-3-components")


class BuildSettings(BaseModel):
    """Settings shared by every theme build of one invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: Path = Field(default=Path("."), description="Token root directory")
    themes: tuple[str, ...] = Field(
        default=DEFAULT_THEMES, description="Themes built when no theme is selected"
    )
    core_dir: str = Field(default="core", description="Foundational token directory")
    category: str = Field(
        default="theme", description="Attribute category a token needs to be emitted"
    )
    higher_tier_markers: tuple[str, ...] = Field(
        default=DEFAULT_HIGHER_TIER_MARKERS,
        description="Origin substrings that mark usage/component layer files",
    )

    @field_validator("themes", "higher_tier_markers")
    @classmethod
    def _non_empty_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not entry.strip() for entry in value):
            raise ValueError("entries must be non-empty strings")
        return value

    @property
    def core_path(self) -> Path:
        return self.root / self.core_dir

    def theme_path(self, theme: str) -> Path:
        return self.root / theme


# =============================================================================
# Path helpers
# =============================================================================


def get_settings_path(root: Path) -> Path:
    """Get the tokens.yaml file path."""
    return root / SETTINGS_FILE


# =============================================================================
# Loading
# =============================================================================


def load_settings(root: Path, config_path: Path | None = None) -> BuildSettings:
    """Load build settings.

    Args:
        root: Token root directory.
        config_path: Explicit settings file. Defaults to ``root/tokens.yaml``.

    Returns:
        BuildSettings instance.

    Raises:
        ConfigError: If an explicit file is missing, or the YAML or schema is invalid.
    """
    explicit = config_path is not None
    settings_path = config_path if config_path is not None else get_settings_path(root)

    if not settings_path.exists():
        if explicit:
            raise ConfigError(f"Settings file not found: {settings_path}")
        logger.debug("No %s found, using defaults", SETTINGS_FILE)
        return BuildSettings(root=root)

    try:
        data = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {settings_path}: {e}") from e

    if not data:
        logger.warning("Empty settings file at %s, using defaults", settings_path)
        return BuildSettings(root=root)

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {settings_path}")

    try:
        return BuildSettings(root=root, **data)
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid settings in {settings_path}: {e}") from e
