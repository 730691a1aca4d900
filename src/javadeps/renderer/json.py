"""Serialize reports to JSON."""

from __future__ import annotations

import json
from pathlib import Path

from javadeps.model import ClassReport, PackageReport, ProjectReport

Report = ClassReport | PackageReport | ProjectReport


def _class_to_dict(report: ClassReport) -> dict:
    return {
        "class_name": report.class_name,
        "package_name": report.package_name,
        "declared_package": report.declared_package,
        "dependencies": sorted(report.dependencies),
    }


def _package_to_dict(report: PackageReport) -> dict:
    return {
        "package_name": report.package_name,
        "classes": [
            _class_to_dict(c) for c in sorted(report.classes, key=lambda c: c.class_name)
        ],
        "subpackages": [
            _package_to_dict(p)
            for p in sorted(report.subpackages, key=lambda p: p.package_name)
        ],
    }


def report_to_dict(report: Report) -> dict:
    """Convert any report into plain, deterministically ordered data."""
    if isinstance(report, ClassReport):
        return _class_to_dict(report)
    if isinstance(report, PackageReport):
        return _package_to_dict(report)
    return {
        "project_name": report.project_name,
        "packages": [
            _package_to_dict(p) for p in sorted(report.packages, key=lambda p: p.package_name)
        ],
    }


def render_json(report: Report, output_path: Path | None = None) -> str:
    """Return *report* as indented JSON, also writing it to *output_path* if given."""
    text = json.dumps(report_to_dict(report), indent=2)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n")
    return text
