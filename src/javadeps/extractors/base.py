"""Extractor protocol: all source extractors conform to this interface."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class FileDependencies:
    """What one source file declares and references."""

    declared_package: str | None
    dependencies: frozenset[str]


class SourceExtractor(Protocol):
    """Protocol for per-file dependency extractors.

    ``extract`` runs inside a worker (thread or process), so implementations
    must be picklable and free of shared mutable state.
    """

    def extract(self, source: str, path: Path) -> FileDependencies:
        """Parse *source* (read from *path*) and return its dependencies.

        Raises :class:`~javadeps.exceptions.SourceSyntaxError` when the
        source cannot be parsed.
        """
        ...
