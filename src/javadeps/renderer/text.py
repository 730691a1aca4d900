"""Render reports as an indented plain-text tree."""

from __future__ import annotations

from javadeps.model import ClassReport, PackageReport, ProjectReport

_INDENT = "  "


def _class_lines(report: ClassReport, depth: int) -> list[str]:
    pad = _INDENT * depth
    lines = [f"{pad}{report.class_name} ({report.package_name})"]
    for dep in sorted(report.dependencies):
        lines.append(f"{pad}{_INDENT}-> {dep}")
    return lines


def _package_lines(report: PackageReport, depth: int) -> list[str]:
    pad = _INDENT * depth
    lines = [f"{pad}[{report.package_name}]"]
    for cls in sorted(report.classes, key=lambda c: c.class_name):
        lines.extend(_class_lines(cls, depth + 1))
    for sub in sorted(report.subpackages, key=lambda p: p.package_name):
        lines.extend(_package_lines(sub, depth + 1))
    return lines


def render_text(report: ClassReport | PackageReport | ProjectReport) -> str:
    if isinstance(report, ClassReport):
        lines = _class_lines(report, 0)
    elif isinstance(report, PackageReport):
        lines = _package_lines(report, 0)
    else:
        lines = [f"{report.project_name} ({report.class_count} classes)"]
        for pkg in sorted(report.packages, key=lambda p: p.package_name):
            lines.extend(_package_lines(pkg, 1))
    return "\n".join(lines)
