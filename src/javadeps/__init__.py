"""javadeps: concurrent type-dependency reports for Java source trees."""

__version__ = "0.1.0"

from javadeps.analyzer import DependencyAnalyser
from javadeps.config import AnalyzerConfig, load_config
from javadeps.exceptions import (
    AnalyzerError,
    ConfigError,
    FolderNotFoundError,
    SourceReadError,
    SourceSyntaxError,
)
from javadeps.model import ClassReport, PackageReport, ProjectReport

__all__ = [
    "AnalyzerConfig",
    "AnalyzerError",
    "ClassReport",
    "ConfigError",
    "DependencyAnalyser",
    "FolderNotFoundError",
    "PackageReport",
    "ProjectReport",
    "SourceReadError",
    "SourceSyntaxError",
    "load_config",
]
