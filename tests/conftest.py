"""Shared pytest fixtures for token build tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from subatomic_tokens.core.ir import Dictionary, Token
from subatomic_tokens.core.logging import LOGGER_NAME
from subatomic_tokens.core.settings import BuildSettings
from subatomic_tokens.core.tiers import classify

THEME = {"category": "theme"}

CORE_COLORS = {
    "color": {
        "primary": {"value": "#0055ff", "attributes": THEME, "comment": "Brand colour"},
        "neutral": {"value": "#ffffff", "attributes": THEME},
    },
    "z-index": {"modal": {"value": 100}},
}

CORE_SPACE = {"space": {"sm": {"value": "8px", "attributes": THEME}}}

CORE_SHADOWS = {
    "box-shadow": {
        "sm": {
            "x": {"value": "32px", "attributes": THEME},
            "y": {"value": "64px", "attributes": THEME},
            "blur": {"value": "128px", "attributes": THEME},
            "color": {"value": "rgba(0,0,0,0.1)", "attributes": THEME},
        }
    }
}

CORE_TYPOGRAPHY = {
    "typography": {
        "body": {
            "font-size": {"value": "16px", "attributes": THEME},
            "line-height": {"value": "24px", "attributes": THEME},
        }
    }
}

VANILLA_COLORS = {"color": {"primary": {"value": "#ff00aa"}}}

VANILLA_BUTTON = {
    "button": {"background": {"value": "{color.primary}", "attributes": THEME}},
}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def token_root(tmp_path: Path) -> Path:
    """A token tree with a foundational layer and a ``vanilla`` theme."""
    write_json(tmp_path / "core" / "tier-1-definitions" / "colors.json", CORE_COLORS)
    write_json(tmp_path / "core" / "tier-1-definitions" / "space.json", CORE_SPACE)
    write_json(tmp_path / "core" / "tier-2-usage" / "shadows.json", CORE_SHADOWS)
    write_json(tmp_path / "core" / "tier-2-usage" / "typography.json", CORE_TYPOGRAPHY)
    write_json(tmp_path / "vanilla" / "tier-2-usage" / "colors.json", VANILLA_COLORS)
    write_json(tmp_path / "vanilla" / "tier-3-components" / "button.json", VANILLA_BUTTON)
    return tmp_path


@pytest.fixture
def settings(token_root: Path) -> BuildSettings:
    return BuildSettings(root=token_root, themes=("vanilla",))


@pytest.fixture
def make_token() -> Callable[..., Token]:
    """Factory for tokens whose tier follows from their origin."""

    def _make(
        path: str | tuple[str, ...],
        value: str,
        origin: str = "core/tier-1-definitions/tokens.json",
        **kwargs: Any,
    ) -> Token:
        segments = tuple(path.split(".")) if isinstance(path, str) else path
        return Token(
            path=segments,
            value=value,
            origin=origin,
            tier=classify(origin),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_dictionary() -> Callable[..., Dictionary]:
    def _make(*tokens: Token, theme: str = "vanilla") -> Dictionary:
        return Dictionary(theme=theme, tokens=tokens)

    return _make


@pytest.fixture(name="write_json")
def write_json_fixture() -> Callable[[Path, Any], Path]:
    """Writes a JSON document, creating parent directories."""
    return write_json


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers the CLI attaches so they don't outlive the test's streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
