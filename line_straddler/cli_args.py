# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for line-straddler.

Handles command-line argument definition, numeric option validation, and
turning the parsed options into decoration metrics.
"""

from __future__ import annotations

import argparse
import math

from . import __version__
from .core import types as lt
from .core.glyph_stream import FORMATS


def _non_negative_float(text: str) -> float:
    """argparse type for tolerances and offset ratios.

    Raises:
        argparse.ArgumentTypeError: If the value is not a finite number >= 0.
    """
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number: '{text}'")
    if not math.isfinite(value) or value < 0:
        raise argparse.ArgumentTypeError(f"Value must be finite and non-negative: '{text}'")
    return value


def get_line_types(names: list[str] | None) -> list[int]:
    """Map ``--line-type`` names to line type constants, dropping repeats.

    Defaults to underline when no type was requested.
    """
    if not names:
        return [lt.UNDERLINE]
    line_types: list[int] = []
    for name in names:
        line_type = lt.LINE_TYPES_BY_NAME[name]
        if line_type not in line_types:
            line_types.append(line_type)
    return line_types


def get_metrics(args: argparse.Namespace) -> lt.DecorationMetrics:
    """Build DecorationMetrics from the parsed options; unset options keep defaults."""
    return lt.DEFAULT_METRICS.with_overrides(
        horizontal_tolerance=args.tolerance,
        line_y_tolerance=args.line_tolerance,
        underline_ratio=args.underline_ratio,
        strikethrough_ratio=args.strikethrough_ratio,
        overline_ratio=args.overline_ratio,
    )


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the line-straddler argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="line-straddler",
        description="line-straddler - compute text decoration lines from positioned glyphs",
        epilog="If no input file is provided, glyphs are read from standard input.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"line-straddler {__version__}"
    )
    parser.add_argument("inputfiles", nargs="*",
                        help="Glyph stream files to process (each as a separate run, '-' for stdin)")
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Write JSON output to this file instead of stdout"
    )
    parser.add_argument(
        "-t", "--line-type", dest="line_types", action="append",
        choices=sorted(lt.LINE_TYPES_BY_NAME),
        help="Decoration to generate; repeat for several (default: underline)"
    )
    parser.add_argument(
        "-f", "--format", choices=FORMATS, default="auto",
        help="Glyph stream format (default: auto, .jsonl/.ndjson files are read as JSON Lines)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose (debug) logging"
    )

    # Calibration options
    parser.add_argument(
        "--tolerance", type=_non_negative_float,
        help=f"Max horizontal gap between touching glyphs (default: {lt.DEFAULT_HORIZONTAL_TOLERANCE})"
    )
    parser.add_argument(
        "--line-tolerance", type=_non_negative_float,
        help=f"Max line_y difference for glyphs on one line (default: {lt.LINE_Y_EPSILON})"
    )
    parser.add_argument(
        "--underline-ratio", type=_non_negative_float,
        help=f"Underline offset below the baseline, in ems (default: {lt.DEFAULT_UNDERLINE_RATIO})"
    )
    parser.add_argument(
        "--strikethrough-ratio", type=_non_negative_float,
        help=f"Strikethrough offset above the baseline, in ems (default: {lt.DEFAULT_STRIKETHROUGH_RATIO})"
    )
    parser.add_argument(
        "--overline-ratio", type=_non_negative_float,
        help=f"Overline offset above the baseline, in ems (default: {lt.DEFAULT_OVERLINE_RATIO})"
    )

    # Performance profiling options
    parser.add_argument(
        "--profile", action="store_true",
        help="Enable cProfile performance profiling"
    )
    parser.add_argument(
        "--profile-output",
        help="Specify output file for profiling results (default: auto-generated)"
    )

    return parser
