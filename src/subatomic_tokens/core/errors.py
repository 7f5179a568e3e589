"""
Error types for token loading, reference resolution and build configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenError(Exception):
    """Base exception for all token build errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenLoadError(TokenError):
    """
    Raised when a token source document cannot be loaded.

    Examples:
    - Unparsable JSON
    - Unreadable file
    - Document root that is not a JSON object
    """

    pass


class TokenReferenceError(TokenError):
    """
    Raised when a token value references a token that cannot be resolved.

    Examples:
    - Reference to a path that no token defines
    - Circular references between tokens
    """

    pass


class RegistryError(TokenError):
    """Raised when a transform, transform group or format name is not registered."""

    pass


class ConfigError(TokenError):
    """Raised when the build settings file is invalid."""

    pass


@dataclass(frozen=True)
class ErrorContext:
    """Where a token document failed to parse, plus the surrounding lines.

    ``excerpt`` holds the document lines from ``first_line`` onwards
    (1-indexed); ``column`` is 1-indexed as reported by ``json``.
    """

    file: Path
    line: int
    column: int
    excerpt: tuple[str, ...] = ()
    first_line: int = 1

    @classmethod
    def from_source(
        cls, file: Path, source: str, line: int, column: int, radius: int = 2
    ) -> "ErrorContext":
        lines = source.splitlines()
        first = max(1, line - radius)
        return cls(
            file=file,
            line=line,
            column=column,
            excerpt=tuple(lines[first - 1 : line + radius]),
            first_line=first,
        )

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

    def format(self) -> str:
        """``file:line:column``, then the excerpt with a caret under the column."""
        if not self.excerpt:
            return self.location

        width = len(str(self.first_line + len(self.excerpt) - 1))
        rendered = [self.location]
        for number, text in enumerate(self.excerpt, start=self.first_line):
            rendered.append(f"{number:>{width}} | {text}")
            if number == self.line:
                # Keep tabs so the caret lines up with tab-indented JSON
                pad = "".join("\t" if ch == "\t" else " " for ch in text[: self.column - 1])
                rendered.append(f"{' ' * width} | {pad}^")
        return "\n".join(rendered)


def make_load_error(
    message: str,
    file: Path,
    source: str | None = None,
    line: int | None = None,
    column: int | None = None,
) -> TokenLoadError:
    """Build a TokenLoadError, located in ``source`` when a position is known."""
    if line is None or column is None:
        return TokenLoadError(f"{file}: {message}")
    if source is None:
        return TokenLoadError(message, ErrorContext(file=file, line=line, column=column))
    return TokenLoadError(message, ErrorContext.from_source(file, source, line, column))
