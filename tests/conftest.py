"""Shared pytest fixtures: small Java source trees on disk."""

from pathlib import Path

import pytest

MAIN_CLASS = """\
package test.project;

import java.util.List;
import java.util.ArrayList;
import test.TestClass;
import util.UtilClass;

public class Main {
    private TestClass testClass;
    private UtilClass utilClass;

    public List<String> doSomething() {
        List<String> result = new ArrayList<>();
        result.add(testClass.getMessage());
        result.add(utilClass.getUtilMessage());
        return result;
    }
}
"""

TEST_CLASS = """\
package test;

import util.UtilClass;

public class TestClass {
    private UtilClass utilClass;

    public String getMessage() {
        return "Test message: " + utilClass.getUtilMessage();
    }
}
"""

UTIL_CLASS = """\
package util;

public class UtilClass {
    public String getUtilMessage() {
        return "Utility message";
    }
}
"""


def write_java(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.java"
    path.write_text(body)
    return path


def simple_class(name: str, package: str | None = None) -> str:
    header = f"package {package};\n\n" if package else ""
    return f"{header}public class {name} {{\n    private int value;\n}}\n"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """``test-project/src/java/{Main.java, test/TestClass.java, util/UtilClass.java}``."""
    root = tmp_path / "test-project"
    java_dir = root / "src" / "java"
    write_java(java_dir, "Main", MAIN_CLASS)
    write_java(java_dir / "test", "TestClass", TEST_CLASS)
    write_java(java_dir / "util", "UtilClass", UTIL_CLASS)
    return root


@pytest.fixture
def java_dir(project_root: Path) -> Path:
    return project_root / "src" / "java"
