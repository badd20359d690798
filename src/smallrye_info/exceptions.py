"""Exceptions raised while generating information classes."""

from pathlib import Path
from typing import Self


class InfoGeneratorError(Exception):
    """Base exception for all smallrye-info errors."""


class MalformedVersionError(InfoGeneratorError, ValueError):
    """Raised when a version string does not match the version grammar.

    Attributes:
        raw: The offending version string.
        pattern: The grammar the string was matched against.
        role: Which version was being parsed, e.g. "specification".
    """

    def __init__(self: Self, raw: str, pattern: str, role: str | None = None) -> None:
        """Initialize the error.

        Args:
            raw: The offending version string.
            pattern: The grammar the string was matched against.
            role: Optional label of the version being parsed.
        """
        self.raw = raw
        self.pattern = pattern
        self.role = role

        if role:
            message = (
                f'The {role} version "{raw}" does not match the pattern: {pattern}'
            )
        else:
            message = f'Version "{raw}" does not match the pattern: {pattern}'
        super().__init__(message)


class OutputWriteError(InfoGeneratorError):
    """Raised when generated sources cannot be written."""

    def __init__(self: Self, path: Path, reason: str) -> None:
        """Initialize the error.

        Args:
            path: File or directory that could not be written.
            reason: Description of the underlying failure.
        """
        self.path = path
        super().__init__(f"Failed to write generated sources to {path}: {reason}")


class ConfigError(InfoGeneratorError):
    """Raised when generator configuration is missing or invalid."""
