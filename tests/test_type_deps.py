"""Tests for the javalang-based type dependency extractor."""

from __future__ import annotations

from pathlib import Path

import pytest

from javadeps.exceptions import SourceSyntaxError
from javadeps.extractors.java import PRIMITIVE_TYPES, JavaTypeDependencyExtractor

from conftest import MAIN_CLASS

SERVICE = """\
package com.example.app;

import java.util.*;
import java.util.Map;
import java.lang.String;
import static org.junit.Assert.assertEquals;
import com.example.base.Base;

public class Service extends com.example.base.AbstractService implements Runnable, java.io.Closeable {
    private int count;
    private long[] stamps;
    private Map<String, List<Integer>> index;
    protected Repository repo, backup;

    public void run() {
        Helper helper = new Helper();
        for (int i = 0; i < count; i++) {
            helper.tick();
        }
        String s = "x";
    }

    public Result process(Request request, boolean flag, String... names) {
        java.lang.StringBuilder sb = new java.lang.StringBuilder();
        return null;
    }

    public void close() {
    }

    interface Listener extends EventListener, com.example.Callback {
    }
}
"""

PATH = Path("Service.java")


@pytest.fixture
def extractor() -> JavaTypeDependencyExtractor:
    return JavaTypeDependencyExtractor()


@pytest.fixture
def service_deps(extractor):
    return extractor.extract(SERVICE, PATH)


class TestCategories:
    def test_declared_package(self, service_deps):
        assert service_deps.declared_package == "com.example.app"

    def test_non_wildcard_imports(self, service_deps):
        deps = service_deps.dependencies
        assert "java.util.Map" in deps
        assert "com.example.base.Base" in deps
        assert "org.junit.Assert.assertEquals" in deps
        assert "java.util" not in deps
        assert not any("*" in d for d in deps)

    def test_supertypes(self, service_deps):
        deps = service_deps.dependencies
        assert "com.example.base.AbstractService" in deps
        assert "Runnable" in deps
        assert "java.io.Closeable" in deps
        # nested interface extends
        assert "EventListener" in deps
        assert "com.example.Callback" in deps

    def test_field_types(self, service_deps):
        deps = service_deps.dependencies
        assert "Map<String, List<Integer>>" in deps
        assert "Repository" in deps
        assert "long[]" in deps

    def test_method_signatures(self, service_deps):
        deps = service_deps.dependencies
        assert "Result" in deps
        assert "Request" in deps
        # varargs parameter reports its element type
        assert "String" in deps

    def test_local_variables(self, service_deps, extractor):
        assert "Helper" in service_deps.dependencies
        source = (
            "class A { void f() throws Exception {"
            " try (java.io.BufferedReader r = open()) { } } }"
        )
        deps = extractor.extract(source, Path("A.java")).dependencies
        assert "java.io.BufferedReader" in deps

    def test_c_style_array_declarators(self, extractor):
        source = "class A { Foo y[]; Bar plain; void f() { Baz z[][] = null; } }"
        deps = extractor.extract(source, Path("A.java")).dependencies
        assert "Foo[]" in deps
        assert "Foo" not in deps
        assert "Bar" in deps
        assert "Baz[][]" in deps


class TestExclusions:
    def test_no_primitives(self, service_deps):
        assert not (service_deps.dependencies & PRIMITIVE_TYPES)

    def test_implicit_namespace_removed(self, service_deps):
        assert not any(d.startswith("java.lang.") for d in service_deps.dependencies)

    def test_custom_implicit_prefix(self):
        extractor = JavaTypeDependencyExtractor(implicit_prefix="com.example.")
        deps = extractor.extract(SERVICE, PATH).dependencies
        assert not any(d.startswith("com.example.") for d in deps)
        assert "java.lang.StringBuilder" in deps

    def test_set_semantics(self, extractor):
        source = """\
            class Twice {
                private Foo a;
                private Foo b;
                Foo make(Foo seed) { Foo copy = seed; return copy; }
            }
        """
        deps = extractor.extract(source, Path("Twice.java")).dependencies
        assert deps == frozenset({"Foo"})


def test_scenario_a(extractor):
    result = extractor.extract(MAIN_CLASS, Path("Main.java"))
    assert result.declared_package == "test.project"
    assert "java.util.List" in result.dependencies
    assert "test.TestClass" in result.dependencies
    assert "util.UtilClass" in result.dependencies
    assert "TestClass" in result.dependencies
    assert "List<String>" in result.dependencies


def test_missing_package_clause(extractor):
    result = extractor.extract("public class Lonely { }", Path("Lonely.java"))
    assert result.declared_package is None
    assert result.dependencies == frozenset()


def test_enum_implements(extractor):
    source = "package p;\nenum Color implements Shade { RED, GREEN }\n"
    assert "Shade" in extractor.extract(source, Path("Color.java")).dependencies


def test_wildcard_type_argument(extractor):
    source = "class W { java.util.List<? extends Number> nums; java.util.List<?> any; }"
    deps = extractor.extract(source, Path("W.java")).dependencies
    assert "java.util.List<? extends Number>" in deps
    assert "java.util.List<?>" in deps


@pytest.mark.parametrize("source", ["package", "import", "@", "package a.b;\nclass"])
def test_truncated_source_is_syntax_error(extractor, source):
    with pytest.raises(SourceSyntaxError) as exc_info:
        extractor.extract(source, Path("Trunc.java"))
    assert exc_info.value.path == Path("Trunc.java")


def test_syntax_error_carries_path(extractor):
    with pytest.raises(SourceSyntaxError) as exc_info:
        extractor.extract("This is not valid Java code", Path("Invalid.java"))
    assert exc_info.value.path == Path("Invalid.java")
    assert exc_info.value.__cause__ is not None
