"""Shared test fixtures."""

from __future__ import annotations

import pytest

from line_straddler import Color, Glyph, GlyphStyle


BLACK = GlyphStyle(color=Color.rgba(0, 0, 0, 255), boldness=400)
WHITE = GlyphStyle(color=Color.rgba(255, 255, 255, 255), boldness=400)
BLACK_BOLD = GlyphStyle(color=Color.rgba(0, 0, 0, 255), boldness=700)


def glyph(x: float, width: float = 2.0, line_y: float = 0.0, font_size: float = 4.0,
          style: GlyphStyle = BLACK) -> Glyph:
    return Glyph(line_y=line_y, font_size=font_size, width=width, x=x, style=style)


# Two lines of two glyphs, separated by a one unit gap.
TWO_LINES = [
    glyph(0.0, line_y=0.0),
    glyph(3.0, line_y=0.0),
    glyph(0.0, line_y=5.0),
    glyph(3.0, line_y=5.0),
]

# Recorded from a real layout pass: touching glyphs of mixed widths, then a
# line break.
RECORDED_LINE = [
    glyph(0.0, 17.828125, line_y=3.2000008, font_size=32.0),
    glyph(17.828125, 8.890625, line_y=3.2000008, font_size=32.0),
    glyph(26.71875, 20.28125, line_y=3.2000008, font_size=32.0),
    glyph(47.0, 19.6875, line_y=3.2000008, font_size=32.0),
    glyph(66.6875, 10.171875, line_y=3.2000008, font_size=32.0),
    glyph(76.859375, 26.8125, line_y=3.2000008, font_size=32.0),
    glyph(103.671875, 20.359375, line_y=3.2000008, font_size=32.0),
    glyph(0.0, 17.828125, line_y=35.2, font_size=32.0),
    glyph(17.828125, 8.890625, line_y=35.2, font_size=32.0),
]


def run_all(generator, glyphs):
    """Feed every glyph, then flush, collecting every emitted line."""
    lines = [line for line in map(generator.add_glyph, glyphs) if line is not None]
    last = generator.pop_line()
    if last is not None:
        lines.append(last)
    return lines


@pytest.fixture
def two_lines() -> list[Glyph]:
    return list(TWO_LINES)


@pytest.fixture
def recorded_line() -> list[Glyph]:
    return list(RECORDED_LINE)
