"""
Theme build orchestration.

For each theme: load the dictionary, then for every platform apply its
transform group, resolve references, filter, format each file and write
it under the token root. Every theme build gets its own registry and
touches only its own source and output directories, so the builds of one
invocation are independent tasks.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .ir import Dictionary, FormatContext, PlatformConfig
from .loader import load_dictionary
from .platforms import platform_configs
from .references import resolve_references
from .registry import TokenRegistry, create_registry
from .settings import BuildSettings

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Files written for one theme."""

    theme: str
    files: list[Path] = field(default_factory=list)
    token_count: int = 0


@dataclass(frozen=True)
class BuildTask:
    """One independent theme build."""

    theme: str

    def run(self, settings: BuildSettings) -> BuildResult:
        return build_theme(self.theme, settings)


# =============================================================================
# Platforms
# =============================================================================


def prepare_platform_dictionary(
    dictionary: Dictionary, platform: PlatformConfig, registry: TokenRegistry
) -> Dictionary:
    """Transform, resolve references and filter a dictionary for one platform."""
    transformed = registry.transform_dictionary(dictionary, platform)
    resolved = resolve_references(transformed)
    return resolved.filter(platform.filter.matches)


def format_platform(
    dictionary: Dictionary, platform: PlatformConfig, theme: str, registry: TokenRegistry
) -> dict[str, str]:
    """Render every file of a platform. Returns ``destination -> content``."""
    prepared = prepare_platform_dictionary(dictionary, platform, registry)
    outputs: dict[str, str] = {}
    for file in platform.files:
        formatter = registry.get_format(file.format)
        outputs[file.destination] = formatter(
            prepared, FormatContext(theme=theme, platform=platform, file=file)
        )
    return outputs


def write_outputs(outputs: dict[str, str], platform: PlatformConfig, root: Path) -> list[Path]:
    written: list[Path] = []
    for destination, content in outputs.items():
        output_path = root / platform.build_path / destination
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", output_path)
        written.append(output_path)
    return written


# =============================================================================
# Themes
# =============================================================================


def build_theme(
    theme: str, settings: BuildSettings, registry: TokenRegistry | None = None
) -> BuildResult:
    """Build every platform for one theme.

    Raises:
        TokenLoadError: If a source document is malformed.
        TokenReferenceError: If a reference cannot be resolved.
    """
    logger.info("Building %s theme", theme.upper())
    registry = registry if registry is not None else create_registry()

    dictionary = load_dictionary(theme, settings)
    result = BuildResult(theme=theme, token_count=len(dictionary))

    for platform in platform_configs(theme, settings):
        outputs = format_platform(dictionary, platform, theme, registry)
        result.files.extend(write_outputs(outputs, platform, settings.root))
        logger.info("  %s: %d file(s)", platform.name, len(outputs))

    return result


def resolve_themes(theme: str | None, settings: BuildSettings) -> list[str]:
    """Themes to build: the named one, or every configured theme when None.

    Unrecognised names are not rejected; they build from the foundational
    layer alone.
    """
    if theme is None:
        return list(settings.themes)
    return [theme]


def build_themes(themes: list[str], settings: BuildSettings, jobs: int = 1) -> list[BuildResult]:
    """Run one build task per theme, sequentially or on a thread pool.

    The first failing theme's error propagates; in sequential mode the
    remaining themes are not built.
    """
    tasks = [BuildTask(theme) for theme in themes]
    if len(themes) > 1:
        logger.info("Building %d themes: %s", len(themes), ", ".join(themes))

    if jobs <= 1 or len(tasks) <= 1:
        return [task.run(settings) for task in tasks]

    with ThreadPoolExecutor(max_workers=jobs) as pool:
        futures = [pool.submit(task.run, settings) for task in tasks]
        return [future.result() for future in futures]
