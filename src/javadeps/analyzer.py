"""Concurrent class, package and project dependency analysis."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from pathlib import Path

from javadeps.concurrency import ConcurrencyLimiter, collect, gather_all
from javadeps.config import AnalyzerConfig
from javadeps.extractors.base import FileDependencies, SourceExtractor
from javadeps.extractors.java import JavaTypeDependencyExtractor
from javadeps.fs import (
    base_name,
    find_child_dir,
    find_descendant_dir,
    list_directory,
    read_source,
)
from javadeps.model import ClassReport, PackageReport, ProjectReport

logger = logging.getLogger(__name__)


def strip_extension(file_name: str, extension: str) -> str:
    """Remove exactly one trailing *extension* from *file_name*.

    ``Foo.java.java`` becomes ``Foo.java``; a name without the suffix is
    returned unchanged.
    """
    if extension and file_name.endswith(extension):
        return file_name[: -len(extension)]
    return file_name


class DependencyAnalyser:
    """Build dependency reports for classes, packages and whole projects.

    Every public method is a coroutine.  Reads and directory listings run on
    the event loop (aiofiles / worker threads), parsing is handed to
    *executor* (``None`` selects the loop's default thread pool).  A failure
    anywhere in a subtree fails the whole call with that same exception.
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        *,
        extractor: SourceExtractor | None = None,
        executor: Executor | None = None,
    ):
        self.config = config or AnalyzerConfig()
        self.extractor = extractor or JavaTypeDependencyExtractor(
            implicit_prefix=self.config.implicit_prefix
        )
        self.executor = executor
        self._limiter = ConcurrencyLimiter(self.config.max_concurrency)

    async def analyze_class(self, path: Path | str) -> ClassReport:
        """Read, parse and extract one source file."""
        path = Path(path)
        async with self._limiter.slot():
            source = await read_source(path)
        async with self._limiter.slot():
            loop = asyncio.get_running_loop()
            deps: FileDependencies = await loop.run_in_executor(
                self.executor, self.extractor.extract, source, path
            )

        class_name = strip_extension(path.name, self.config.source_extension)
        package_name = deps.declared_package or self.config.default_package
        logger.debug(
            "Class %s (%s): %d dependencies", class_name, package_name, len(deps.dependencies)
        )
        return ClassReport(
            class_name=class_name,
            package_name=package_name,
            dependencies=deps.dependencies,
            declared_package=deps.declared_package,
        )

    async def analyze_package(self, path: Path | str) -> PackageReport:
        """Analyze every source file and subdirectory under *path*, recursively."""
        path = Path(path)
        async with self._limiter.slot():
            listing = await list_directory(path, self.config.source_extension)

        cancel = self.config.cancel_on_failure
        classes, subpackages = await gather_all(
            [
                collect((self.analyze_class(f) for f in listing.files), cancel_on_failure=cancel),
                collect(
                    (self.analyze_package(d) for d in listing.directories),
                    cancel_on_failure=cancel,
                ),
            ],
            cancel_on_failure=cancel,
        )

        logger.debug(
            "Package %s: %d classes, %d subpackages", path, len(classes), len(subpackages)
        )
        return PackageReport(
            package_name=base_name(path),
            classes=classes,
            subpackages=subpackages,
        )

    async def find_entry_point(self, project_dir: Path | str) -> Path:
        """Locate the entry-point folder beneath the project's source root."""
        project_dir = Path(project_dir)
        async with self._limiter.slot():
            src = await find_child_dir(project_dir, self.config.source_root_name)
        async with self._limiter.slot():
            entry = await find_descendant_dir(src, self.config.entry_point_name)
        logger.debug("Entry point for %s: %s", project_dir, entry)
        return entry

    async def analyze_project(self, path: Path | str) -> ProjectReport:
        """Analyze the project rooted at *path* starting from its entry-point folder."""
        path = Path(path)
        entry = await self.find_entry_point(path)
        root_package = await self.analyze_package(entry)
        return ProjectReport(
            project_name=base_name(path),
            packages=frozenset({root_package}),
        )
