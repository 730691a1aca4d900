"""Orchestrator: configure → analyze → render."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from javadeps.analyzer import DependencyAnalyser
from javadeps.config import AnalyzerConfig, load_config
from javadeps.model import ClassReport, PackageReport, ProjectReport
from javadeps.renderer.json import render_json
from javadeps.renderer.text import render_text

logger = logging.getLogger(__name__)

MODES = ("project", "package", "class")
FORMATS = ("text", "json")


async def analyze(
    path: Path,
    mode: str,
    analyser: DependencyAnalyser,
) -> ClassReport | PackageReport | ProjectReport:
    """Dispatch *path* to the analyser method matching *mode*."""
    if mode == "project":
        return await analyser.analyze_project(path)
    if mode == "package":
        return await analyser.analyze_package(path)
    if mode == "class":
        return await analyser.analyze_class(path)
    raise ValueError(f"Unknown mode {mode!r}; expected one of {', '.join(MODES)}")


def run(
    path: Path,
    *,
    mode: str = "project",
    fmt: str = "text",
    output: Path | None = None,
    config: AnalyzerConfig | None = None,
    config_path: Path | None = None,
) -> str:
    """Run the analysis synchronously and return the rendered report.

    When *config* is not given it is loaded from *config_path* or from the
    project directory (see :func:`javadeps.config.load_config`).
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")

    if config is None:
        project_dir = path if mode == "project" else None
        config = load_config(project_dir, config_path)

    analyser = DependencyAnalyser(config)
    logger.debug("Analyzing %s %s with %s", mode, path, config)
    report = asyncio.run(analyze(path, mode, analyser))

    if fmt == "json":
        text = render_json(report, output)
    else:
        text = render_text(report)
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text + "\n")

    if output is not None:
        logger.info("Wrote %s", output)
    return text
