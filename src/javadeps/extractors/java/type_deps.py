"""Extract referenced type names from Java source via javalang."""

from __future__ import annotations

import logging
from pathlib import Path

import javalang

from javadeps.exceptions import SourceSyntaxError
from javadeps.extractors.base import FileDependencies

logger = logging.getLogger(__name__)

# Scalar type names; compared by exact match, so "int[]" is still reported.
PRIMITIVE_TYPES = frozenset(
    {"byte", "short", "int", "long", "float", "double", "boolean", "char", "void"}
)

# Declarations that may carry extends/implements clauses.
_TYPE_DECL_TYPES = (
    javalang.tree.ClassDeclaration,
    javalang.tree.InterfaceDeclaration,
    javalang.tree.EnumDeclaration,
)


def format_type(type_node) -> str:
    """Render a javalang type node the way it is written in source.

    ``java.util.Map<String, List<Integer>>[]`` comes back unchanged, while
    ``List<? extends Number>`` keeps its wildcard bound.
    """
    if type_node is None:
        return "void"
    if isinstance(type_node, javalang.tree.BasicType):
        name = type_node.name
    else:
        parts = []
        node = type_node
        while node is not None:
            part = node.name
            arguments = getattr(node, "arguments", None)
            if arguments:
                part += "<" + ", ".join(_format_type_argument(a) for a in arguments) + ">"
            parts.append(part)
            node = getattr(node, "sub_type", None)
        name = ".".join(parts)
    dimensions = type_node.dimensions or []
    return name + "[]" * len(dimensions)


def _format_type_argument(argument) -> str:
    pattern = argument.pattern_type
    if pattern == "?":
        return "?"
    if pattern in ("extends", "super"):
        return f"? {pattern} {format_type(argument.type)}"
    return format_type(argument.type)


def _declarator_type(type_node, declarator) -> str:
    """Type of one declared variable; C-style ``Foo y[]`` renders as ``Foo[]``."""
    dimensions = getattr(declarator, "dimensions", None) or []
    return format_type(type_node) + "[]" * len(dimensions)


def _supertype_name(ref) -> str:
    """Name of an extends/implements reference: ``scope.Simple`` or ``Simple``."""
    parts = []
    node = ref
    while node is not None:
        parts.append(node.name)
        node = getattr(node, "sub_type", None)
    return ".".join(parts)


def _supertypes(decl) -> list:
    refs: list = []
    extends = getattr(decl, "extends", None)
    if isinstance(extends, list):
        # Interfaces may extend several types.
        refs.extend(extends)
    elif extends is not None:
        refs.append(extends)
    refs.extend(getattr(decl, "implements", None) or [])
    return refs


class JavaTypeDependencyExtractor:
    """Collect the type names a compilation unit refers to.

    Names come from five places: non-wildcard imports, extends/implements
    clauses, field types, method signatures, and local variable types.
    Nothing is resolved; names are kept as written.
    """

    def __init__(self, implicit_prefix: str = "java.lang."):
        self.implicit_prefix = implicit_prefix

    def extract(self, source: str, path: Path) -> FileDependencies:
        tree = parse_source(source, path)
        return self.extract_from_tree(tree)

    def extract_from_tree(self, tree) -> FileDependencies:
        used: set[str] = set()

        def add(name: str) -> None:
            if name not in PRIMITIVE_TYPES:
                used.add(name)

        # Imports
        for imp in tree.imports:
            if not imp.wildcard:
                used.add(imp.path)

        # Supertypes; Node.filter() only takes a single class, so walk directly.
        for _, decl in tree:
            if not isinstance(decl, _TYPE_DECL_TYPES):
                continue
            for ref in _supertypes(decl):
                used.add(_supertype_name(ref))

        # Field types
        for _, field_decl in tree.filter(javalang.tree.FieldDeclaration):
            for declarator in field_decl.declarators:
                add(_declarator_type(field_decl.type, declarator))

        # Method return and parameter types
        for _, method in tree.filter(javalang.tree.MethodDeclaration):
            if method.return_type is not None:
                add(format_type(method.return_type))
            for param in method.parameters:
                add(format_type(param.type))

        # Local variables (LocalVariableDeclaration is a VariableDeclaration)
        for _, var_decl in tree.filter(javalang.tree.VariableDeclaration):
            for declarator in var_decl.declarators:
                add(_declarator_type(var_decl.type, declarator))

        # try-with-resources declarations
        for _, resource in tree.filter(javalang.tree.TryResource):
            if resource.type is not None:
                add(format_type(resource.type))

        if self.implicit_prefix:
            used = {name for name in used if not name.startswith(self.implicit_prefix)}

        declared = tree.package.name if tree.package is not None else None
        return FileDependencies(declared_package=declared, dependencies=frozenset(used))


def parse_source(source: str, path: Path):
    """Parse Java *source* into a ``CompilationUnit``.

    Raises :class:`SourceSyntaxError` when javalang rejects the input.
    """
    try:
        return javalang.parse.parse(source)
    except javalang.parser.JavaSyntaxError as e:
        line = column = None
        position = getattr(e.at, "position", None)
        if position is not None:
            line, column = position.line, position.column
        description = e.description or "Java syntax error"
        raise SourceSyntaxError(path, description, line, column) from e
    except javalang.parser.JavaParserBaseException as e:
        raise SourceSyntaxError(path, f"Java parser error ({e})") from e
    except javalang.tokenizer.LexerError as e:
        raise SourceSyntaxError(path, f"Java lexer error ({e})") from e
    except StopIteration as e:
        # javalang runs off its token stream on truncated input; a bare
        # StopIteration must not reach run_in_executor.
        raise SourceSyntaxError(path, "Unexpected end of input") from e
