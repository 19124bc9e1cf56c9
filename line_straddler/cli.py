#!/usr/bin/env python3
# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
line-straddler command-line front end

Reads runs of positioned glyphs, feeds each run through one LineGenerator
per requested decoration type, and writes the resulting lines as JSON.

Each input file is a separate run: the generators are flushed at the end
of every file. Output is one JSON object per run, one per line:

    {"source": "para.jsonl", "lines": [{"type": "underline", "start_x": 0.0,
     "end_x": 12.5, "y": 11.2, "style": {"color": "#000000ff", "boldness": 400}}]}

Usage:
    line-straddler glyphs.json
    line-straddler -t underline -t strikethrough -o lines.jsonl para.jsonl
    layout-tool | line-straddler --format jsonl -
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from typing import Any, TextIO

from . import cli_args
from .core import error as ls_error
from .core import types as lt
from .core.glyph_stream import line_to_dict, read_glyphs, resolve_format
from .core.line_generator import LineGenerator
from .utils import profiler as ls_profiler

logger = logging.getLogger(__name__)


def process_run(glyphs: Iterable[Any], line_types: list[int],
                metrics: lt.DecorationMetrics) -> list[dict[str, Any]]:
    """Decorate one run of glyphs with every requested line type.

    Every line type gets its own generator; all of them see each glyph in
    order and are flushed once the run is exhausted.

    Returns:
        Serialized lines, grouped by line type in request order.
    """
    generators = [LineGenerator(line_type, metrics) for line_type in line_types]
    lines: list[list[dict[str, Any]]] = [[] for _ in generators]

    glyph_count = 0
    for glyph in glyphs:
        glyph_count += 1
        for generator, collected in zip(generators, lines):
            line = generator.add_glyph(glyph)
            if line is not None:
                collected.append(line_to_dict(line, generator.line_type))

    for generator, collected in zip(generators, lines):
        line = generator.pop_line()
        if line is not None:
            collected.append(line_to_dict(line, generator.line_type))

    result = [line for collected in lines for line in collected]
    logger.info("Processed %d glyphs into %d lines", glyph_count, len(result))
    return result


def _process_input(path: str, fmt: str, line_types: list[int],
                   metrics: lt.DecorationMetrics) -> dict[str, Any]:
    fmt = resolve_format(fmt, path)
    if path == "-":
        lines = process_run(read_glyphs(sys.stdin, fmt), line_types, metrics)
        return {"source": "stdin", "lines": lines}
    with open(path, "r", encoding="utf-8") as f:
        lines = process_run(read_glyphs(f, fmt), line_types, metrics)
    return {"source": path, "lines": lines}


def _write_runs(runs: list[dict[str, Any]], out: TextIO) -> None:
    for run in runs:
        out.write(json.dumps(run))
        out.write("\n")


def run(args) -> int:
    """Process every input file named in ``args`` and write the output."""
    line_types = cli_args.get_line_types(args.line_types)
    metrics = cli_args.get_metrics(args)
    inputfiles = args.inputfiles or ["-"]

    runs = []
    for path in inputfiles:
        logger.debug("Processing %s as %s", path,
                     ", ".join(lt.line_type_name(t) for t in line_types))
        try:
            runs.append(_process_input(path, args.format, line_types, metrics))
        except ls_error.GlyphFormatError as exc:
            raise exc.with_source(path) from exc

    if args.outputfile:
        with open(args.outputfile, "w", encoding="utf-8") as out:
            _write_runs(runs, out)
    else:
        _write_runs(runs, sys.stdout)
    return ls_error.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``line-straddler`` command."""
    parser = cli_args.build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    profiler = ls_profiler.RunProfiler(output_path=args.profile_output, enabled=args.profile)

    try:
        with profiler.profile_context():
            status = run(args)
    except ls_error.LineStraddlerError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"line-straddler: {exc.name}: {exc}", file=sys.stderr)
        return exc.code
    except OSError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"line-straddler: {ls_error.ERROR_NAMES[ls_error.IOERROR]}: {exc}", file=sys.stderr)
        return ls_error.IOERROR

    if args.profile:
        profiler.save_results()
        logger.info("%s", profiler.generate_report())
    return status


if __name__ == "__main__":
    sys.exit(main())
