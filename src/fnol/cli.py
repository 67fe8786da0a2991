#!/usr/bin/env python3
"""
CLI for routing FNOL documents.

Usage:
    python -m src.fnol.cli fixtures/fnol_fast_track.txt
    fnol-router fixtures/fnol_fast_track.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from ..utils.config import get_settings
from .pipeline import ClaimPipeline
from .report import render_decision

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Setup logging configuration. Logs go to stderr; stdout carries only the report."""
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s - %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="fnol-router",
        description="Extract claim fields from an FNOL text document and recommend a route",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Path to the FNOL text document",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        parser.print_usage()
        return 0

    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        decision = ClaimPipeline(settings).process_file(args.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read FNOL document {args.path}: {e}")
        return 1

    print(render_decision(decision, indent=settings.output_indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
