# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
cProfile support for the line-straddler command line.

Usage:
    line-straddler --profile glyphs.jsonl
    line-straddler --profile --profile-output=run.prof glyphs.json

A profiled run writes the binary stats to the output path and a text
report beside it (``run.prof`` -> ``run_report.txt``).
"""

from __future__ import annotations

import cProfile
import io
import logging
import os
import pstats
import time
from collections.abc import Generator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# Restricts the report's last section to this package's hot paths
_PACKAGE_FUNCTIONS = 'line_generator|glyph_stream|types'


def default_output_path() -> str:
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    return f"line_straddler_profile_{timestamp}.prof"


def report_path_for(output_path: str) -> str:
    """Text report path that never collides with the stats file."""
    base, _ = os.path.splitext(output_path)
    return f"{base}_report.txt"


class RunProfiler:
    """Profiles one CLI invocation. Does nothing unless enabled."""

    def __init__(self, output_path: str | None = None, enabled: bool = False) -> None:
        self.enabled = enabled
        self.output_path = output_path or (default_output_path() if enabled else None)
        self._profile = cProfile.Profile() if enabled else None
        self._collected = False

    @contextmanager
    def profile_context(self) -> Generator[RunProfiler, None, None]:
        if not self.enabled:
            yield self
            return
        logger.info("Starting cProfile profiling")
        self._profile.enable()
        try:
            yield self
        finally:
            self._profile.disable()
            self._collected = True
            logger.info("Profiling stopped")

    def _stats(self, stream=None) -> pstats.Stats:
        return pstats.Stats(self._profile, stream=stream)

    def generate_report(self, limit: int = 30) -> str:
        if not self._collected:
            return "No profiling data available"
        s = io.StringIO()
        self._stats(s).sort_stats('cumulative').print_stats(limit)
        return s.getvalue()

    def save_results(self) -> None:
        """Dump the binary stats and write the text report beside them."""
        if not self._collected:
            return

        self._stats().dump_stats(self.output_path)
        report_path = report_path_for(self.output_path)
        with open(report_path, 'w') as f:
            f.write("line-straddler Performance Profiling Report\n")
            f.write("=" * 50 + "\n\n")

            stats = self._stats(f)
            f.write("By cumulative time:\n")
            stats.sort_stats('cumulative').print_stats(30)
            f.write("\nBy total time:\n")
            stats.sort_stats('tottime').print_stats(20)
            f.write("\nline-straddler functions:\n")
            stats.print_stats(_PACKAGE_FUNCTIONS)

        logger.info("Profiling results saved to: %s (report: %s)", self.output_path, report_path)
