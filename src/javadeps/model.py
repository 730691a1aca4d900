"""Report model for class, package, and project dependency results."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassReport:
    """Type dependencies of a single source file."""

    class_name: str
    package_name: str
    dependencies: frozenset[str] = field(default_factory=frozenset)
    # None when the file has no package clause; package_name then holds the
    # configured default.
    declared_package: str | None = None


@dataclass(frozen=True)
class PackageReport:
    """A directory in the source tree, with its classes and subdirectories."""

    package_name: str
    classes: frozenset[ClassReport] = field(default_factory=frozenset)
    subpackages: frozenset[PackageReport] = field(default_factory=frozenset)

    def iter_classes(self) -> Iterator[ClassReport]:
        """Yield every class in this package and all nested subpackages."""
        yield from self.classes
        for sub in self.subpackages:
            yield from sub.iter_classes()

    def find_subpackage(self, name: str) -> PackageReport | None:
        for sub in self.subpackages:
            if sub.package_name == name:
                return sub
        return None

    @property
    def class_count(self) -> int:
        return sum(1 for _ in self.iter_classes())


@dataclass(frozen=True)
class ProjectReport:
    """Top-level container; holds the entry-point package."""

    project_name: str
    packages: frozenset[PackageReport] = field(default_factory=frozenset)

    @property
    def root_package(self) -> PackageReport | None:
        return next(iter(self.packages), None)

    @property
    def class_count(self) -> int:
        return sum(p.class_count for p in self.packages)
