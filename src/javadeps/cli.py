"""Command-line interface for javadeps."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from javadeps.config import load_config
from javadeps.exceptions import AnalyzerError
from javadeps.pipeline import FORMATS, MODES, run

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="javadeps",
        description="Report type-level dependencies of every class and package in a Java source tree.",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Project root (or package directory / source file, see --mode)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=MODES,
        default="project",
        help="What PATH points at (default: project)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="text",
        dest="fmt",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: .javadeps.toml in the project)",
    )
    parser.add_argument(
        "--max-concurrency",
        type=int,
        default=None,
        help="Cap on simultaneous file reads, listings and parses",
    )
    parser.add_argument(
        "--no-cancel",
        action="store_true",
        help="Let sibling tasks finish after the first failure instead of cancelling them",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("javadeps").setLevel(logging.DEBUG)

    try:
        project_dir = args.path if args.mode == "project" else None
        config = load_config(project_dir, args.config).replace(
            max_concurrency=args.max_concurrency,
            cancel_on_failure=False if args.no_cancel else None,
        )
        text = run(
            args.path,
            mode=args.mode,
            fmt=args.fmt,
            output=args.output,
            config=config,
        )
    except AnalyzerError as e:
        logger.error("%s: %s", type(e).__name__, e)
        if e.__cause__ is not None:
            logger.debug("Caused by: %r", e.__cause__)
        return 1

    if args.output is None:
        sys.stdout.write(text + "\n")
    return 0
