"""Command line: print the service metadata computed for a model file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from archmeta.application.reporters.console import ConsoleConfig, ConsoleReporter
from archmeta.domain.exceptions.base import ArchMetaError
from archmeta.domain.model.configuration import AugmentationConfig
from archmeta.infrastructure.loader import load_model_file
from archmeta.presentation.pipeline.service_support import GenerationContext, augment


def build_parser() -> argparse.ArgumentParser:
    """Argument parser of the archmeta command."""
    parser = argparse.ArgumentParser(
        prog="archmeta",
        description="Compute service-layer metadata for a class-diagram model",
    )
    parser.add_argument("model", type=Path, help="Model file (JSON ingestion format)")
    parser.add_argument("--seed", type=int, default=0, help="Seed for mock values")
    parser.add_argument("--width", type=int, default=120, help="Console width")
    parser.add_argument("--no-color", action="store_true", help="Plain text output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        model = load_model_file(args.model)
        context = GenerationContext(model=model, config=AugmentationConfig(mock_seed=args.seed))
        report = ConsoleReporter(
            ConsoleConfig(width=args.width, color=not args.no_color)
        ).report(augment(context))
    except (ArchMetaError, OSError, ValueError) as e:
        print(f"archmeta: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0
