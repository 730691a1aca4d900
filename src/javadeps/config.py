"""Analyzer configuration and its TOML loader."""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from javadeps.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".javadeps.toml"


@dataclass(frozen=True)
class AnalyzerConfig:
    """Folder markers, naming conventions, and concurrency limits."""

    # Folder directly under the project root that holds all sources.
    source_root_name: str = "src"
    # Folder searched for anywhere under the source root; analysis starts there.
    entry_point_name: str = "java"
    # Package name reported for files without a package clause.  Shares its
    # default with entry_point_name but is configured independently.
    default_package: str = "java"
    source_extension: str = ".java"
    # Names starting with this prefix are always available and never reported.
    implicit_prefix: str = "java.lang."
    # Ceiling on in-flight reads, listings and parses; None means unbounded.
    max_concurrency: int | None = None
    cancel_on_failure: bool = True

    def __post_init__(self) -> None:
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ConfigError(
                "<config>", f"max_concurrency must be positive, got {self.max_concurrency}"
            )
        if not self.source_extension.startswith("."):
            raise ConfigError(
                "<config>",
                f"source_extension must start with '.', got {self.source_extension!r}",
            )

    def replace(self, **overrides: Any) -> AnalyzerConfig:
        """Return a copy with *overrides* applied, ignoring ``None`` values."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes) if changes else self


_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "source_root_name": (str,),
    "entry_point_name": (str,),
    "default_package": (str,),
    "source_extension": (str,),
    "implicit_prefix": (str,),
    "max_concurrency": (int,),
    "cancel_on_failure": (bool,),
}


def config_from_mapping(data: dict[str, Any], source: Path | str = "<config>") -> AnalyzerConfig:
    """Build an :class:`AnalyzerConfig` from a parsed TOML table."""
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = key.replace("-", "_")
        expected = _FIELD_TYPES.get(name)
        if expected is None:
            raise ConfigError(source, f"Unknown configuration key {key!r}")
        # bool is an int subclass; don't let `max_concurrency = true` through.
        if not isinstance(value, expected) or (
            isinstance(value, bool) and bool not in expected
        ):
            raise ConfigError(
                source, f"Configuration key {key!r} has invalid value {value!r}"
            )
        values[name] = value
    try:
        return AnalyzerConfig(**values)
    except ConfigError as e:
        raise ConfigError(source, e.message) from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(path, f"Could not read configuration ({e.strerror})") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, f"Invalid TOML ({e})") from e


def load_config(
    project_dir: Path | None = None,
    config_path: Path | None = None,
) -> AnalyzerConfig:
    """Load configuration for *project_dir*.

    Lookup order: an explicit *config_path*, then ``.javadeps.toml`` (table
    ``[javadeps]``) in the project directory, then ``[tool.javadeps]`` in the
    project's ``pyproject.toml``.  Falls back to defaults when none is found.
    """
    if config_path is not None:
        data = _read_toml(config_path)
        table = data.get("javadeps", data.get("tool", {}).get("javadeps", data))
        logger.debug("Using configuration from %s", config_path)
        return config_from_mapping(table, config_path)

    if project_dir is None:
        return AnalyzerConfig()

    javadeps_toml = project_dir / CONFIG_FILE_NAME
    if javadeps_toml.exists():
        data = _read_toml(javadeps_toml)
        logger.debug("Using configuration from %s", javadeps_toml)
        return config_from_mapping(data.get("javadeps", {}), javadeps_toml)

    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        data = _read_toml(pyproject)
        table = data.get("tool", {}).get("javadeps")
        if table is not None:
            logger.debug("Using [tool.javadeps] from %s", pyproject)
            return config_from_mapping(table, pyproject)

    return AnalyzerConfig()
