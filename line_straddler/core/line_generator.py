# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LineGenerator - Streaming Decoration Segment Merging

Figures out where underline, strikethrough and overline segments go for a
run of already-positioned glyphs.

Architecture:
- Glyphs are fed one at a time with add_glyph(), in layout order
- At most one pending segment is held; a glyph either extends it or closes it
- A closed segment becomes a Line, placed using the largest font size seen
  in the segment
- Zero- and negative-length segments are never emitted
- pop_line() flushes the pending segment and must be called once after the
  last glyph of a run; the generator cannot tell when input ends

A glyph extends the pending segment only when it sits on the same visual
line, has an equal style, starts no further than the horizontal tolerance
past the segment's end, and ends past the segment's start.

Usage:
```python
from line_straddler import Color, Glyph, GlyphStyle, LineGenerator, UNDERLINE

style = GlyphStyle(color=Color.rgba(0, 0, 0, 255))
generator = LineGenerator(UNDERLINE)

lines = []
for glyph in glyphs:
    line = generator.add_glyph(glyph)
    if line is not None:
        lines.append(line)
line = generator.pop_line()
if line is not None:
    lines.append(line)

for line in lines:
    draw_line(*line.points(), line.style)
```

Thread Safety: a LineGenerator is NOT thread-safe. Separate generators share
no mutable state and can be driven from separate threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from . import types as lt
from .glyph_stream import as_glyph

logger = logging.getLogger(__name__)


class _PendingSegment:
    """The segment currently being built."""
    __slots__ = ('start_x', 'end_x', 'line_y', 'max_font_size', 'style')

    def __init__(self, glyph: lt.Glyph) -> None:
        self.start_x = glyph.x
        self.end_x = glyph.x + glyph.width
        self.line_y = glyph.line_y             # anchor, never moved by merges
        self.max_font_size = glyph.font_size
        self.style = glyph.style               # snapshot of the first glyph

    def __repr__(self) -> str:
        return (f"_PendingSegment(start_x={self.start_x}, end_x={self.end_x}, "
                f"line_y={self.line_y}, max_font_size={self.max_font_size})")


class LineGenerator:
    """Generates decoration Lines from a stream of Glyphs.

    The line type and metrics are fixed for the lifetime of the generator.
    """

    def __init__(self, line_type: int, metrics: lt.DecorationMetrics | None = None) -> None:
        """
        Args:
            line_type: UNDERLINE, STRIKETHROUGH or OVERLINE
            metrics: Tolerances and offset ratios. Defaults to DEFAULT_METRICS.

        Raises:
            ValueError: If line_type is not a known line type.
        """
        lt.line_type_name(line_type)
        self._line_type = line_type
        self._metrics = metrics if metrics is not None else lt.DEFAULT_METRICS
        self._pending: _PendingSegment | None = None

    @property
    def line_type(self) -> int:
        return self._line_type

    @property
    def metrics(self) -> lt.DecorationMetrics:
        return self._metrics

    @property
    def has_pending(self) -> bool:
        """True while a segment is waiting for more glyphs or a pop_line()."""
        return self._pending is not None

    def continues(self, glyph: lt.Glyph) -> bool:
        """Tell if ``glyph`` would extend the pending segment."""
        pending = self._pending
        if pending is None:
            return False
        return (
            abs(glyph.line_y - pending.line_y) <= self._metrics.line_y_tolerance
            and glyph.style == pending.style
            and glyph.x <= pending.end_x + self._metrics.horizontal_tolerance
            and glyph.x + glyph.width > pending.start_x
        )

    def add_glyph(self, glyph: Any) -> lt.Line | None:
        """Add the next glyph of the run.

        Accepts a Glyph, a mapping of glyph fields, or an object with a
        ``to_glyph()`` method.

        Returns:
            The Line closed by this glyph, or None if the glyph extended the
            pending segment or the closed segment was degenerate.
        """
        glyph = as_glyph(glyph)

        if self.continues(glyph):
            pending = self._pending
            pending.start_x = min(pending.start_x, glyph.x)
            pending.end_x = max(pending.end_x, glyph.x + glyph.width)
            pending.max_font_size = max(pending.max_font_size, glyph.font_size)
            return None

        closed = self._pending
        self._pending = _PendingSegment(glyph)
        return self._finalize(closed) if closed is not None else None

    def pop_line(self) -> lt.Line | None:
        """Flush the pending segment, if any.

        Must be called once after the last glyph of a run, otherwise the
        final segment is lost.
        """
        closed = self._pending
        self._pending = None
        return self._finalize(closed) if closed is not None else None

    def extend(self, glyphs: Iterable[Any]) -> list[lt.Line]:
        """Add many glyphs; return the Lines they closed. Does not flush."""
        lines = []
        for glyph in glyphs:
            line = self.add_glyph(glyph)
            if line is not None:
                lines.append(line)
        return lines

    def _finalize(self, segment: _PendingSegment) -> lt.Line | None:
        if segment.start_x >= segment.end_x:
            logger.debug("Dropping degenerate %s segment %r",
                         lt.line_type_name(self._line_type), segment)
            return None
        y = lt.decoration_y(self._line_type, segment.line_y, segment.max_font_size, self._metrics)
        return lt.Line(start_x=segment.start_x, end_x=segment.end_x, y=y, style=segment.style)

    def __repr__(self) -> str:
        return (f"LineGenerator(line_type={lt.line_type_name(self._line_type)}, "
                f"pending={self._pending!r})")


def generate_lines(glyphs: Iterable[Any], line_type: int,
                   metrics: lt.DecorationMetrics | None = None) -> Iterator[lt.Line]:
    """Yield every decoration Line for a complete run of glyphs.

    Drives a single LineGenerator and performs the final pop_line() once
    ``glyphs`` is exhausted.
    """
    generator = LineGenerator(line_type, metrics)
    for glyph in glyphs:
        line = generator.add_glyph(glyph)
        if line is not None:
            yield line
    line = generator.pop_line()
    if line is not None:
        yield line
