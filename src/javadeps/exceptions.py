"""Custom exceptions for javadeps."""

from __future__ import annotations

from pathlib import Path


class AnalyzerError(Exception):
    """Base exception for all analyzer errors.

    Carries the offending *path* so a failing top-level call can report
    where the failure happened, not only what it was.
    """

    def __init__(self, path: str | Path, message: str):
        self.path = Path(path)
        self.message = message
        # Keep both in args so the exception survives pickling across
        # process-pool workers.
        super().__init__(str(path), message)

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


class SourceReadError(AnalyzerError):
    """Raised when a source file or directory cannot be read or listed."""


class SourceSyntaxError(AnalyzerError):
    """Raised when the Java parser rejects a source file."""

    def __init__(
        self,
        path: str | Path,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ):
        self.line = line
        self.column = column
        super().__init__(path, message)
        self.args = (str(path), message, line, column)

    def __str__(self) -> str:
        if self.line is None:
            return super().__str__()
        return f"{self.message}: {self.path}:{self.line}:{self.column}"


class FolderNotFoundError(AnalyzerError):
    """Raised when a required source-root or entry-point folder is absent."""


class ConfigError(AnalyzerError):
    """Raised when a configuration file or value is invalid."""
