"""Filesystem primitives: async reads, directory snapshots, folder lookup."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from javadeps.exceptions import FolderNotFoundError, SourceReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryListing:
    """Immediate children of a directory, taken once and never refreshed."""

    files: frozenset[Path]
    directories: frozenset[Path]


def base_name(path: Path) -> str:
    """Base name of *path*; resolves relative paths such as ``.`` first."""
    return path.name or path.resolve().name


async def read_source(path: Path) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes."""
    try:
        async with aiofiles.open(path, "r", encoding="utf-8", errors="replace") as f:
            return await f.read()
    except OSError as e:
        raise SourceReadError(path, f"Cannot read file ({e.strerror or e})") from e


def _scan_directory(path: Path, extension: str) -> DirectoryListing:
    files: set[Path] = set()
    directories: set[Path] = set()
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                directories.add(Path(entry.path))
            elif entry.is_dir():
                logger.warning("Skipping symlinked directory %s", entry.path)
            elif entry.is_file() and entry.name.endswith(extension):
                files.add(Path(entry.path))
    return DirectoryListing(frozenset(files), frozenset(directories))


async def list_directory(path: Path, extension: str) -> DirectoryListing:
    """List source files with *extension* and subdirectories directly under *path*."""
    try:
        return await asyncio.to_thread(_scan_directory, path, extension)
    except OSError as e:
        raise SourceReadError(path, f"Cannot list directory ({e.strerror or e})") from e


def _find_child_dir(parent: Path, name: str) -> Path | None:
    with os.scandir(parent) as entries:
        for entry in entries:
            if entry.name == name and entry.is_dir():
                return Path(entry.path)
    return None


async def find_child_dir(parent: Path, name: str) -> Path:
    """Return the directory exactly named *name* directly under *parent*."""
    try:
        found = await asyncio.to_thread(_find_child_dir, parent, name)
    except OSError as e:
        raise SourceReadError(parent, f"Cannot list directory ({e.strerror or e})") from e
    if found is None:
        raise FolderNotFoundError(parent, f"'{name}' folder not found")
    return found


def _raise(error: OSError) -> None:
    raise error


def _find_descendant_dir(root: Path, name: str) -> Path | None:
    # Top-down walk; which match wins among several is filesystem-dependent.
    for dirpath, dirnames, _ in os.walk(root, onerror=_raise):
        if name in dirnames:
            return Path(dirpath) / name
    return None


async def find_descendant_dir(root: Path, name: str) -> Path:
    """Return the first directory named *name* anywhere beneath *root*."""
    try:
        found = await asyncio.to_thread(_find_descendant_dir, root, name)
    except OSError as e:
        raise SourceReadError(
            e.filename or root, f"Cannot walk directory ({e.strerror or e})"
        ) from e
    if found is None:
        raise FolderNotFoundError(root, f"'{name}' folder not found")
    return found
