"""Java source extractors."""

from javadeps.extractors.java.type_deps import (
    PRIMITIVE_TYPES,
    JavaTypeDependencyExtractor,
    format_type,
    parse_source,
)

__all__ = [
    "PRIMITIVE_TYPES",
    "JavaTypeDependencyExtractor",
    "format_type",
    "parse_source",
]
