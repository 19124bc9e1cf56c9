# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Glyph and Decoration Line Types

Value types that flow through the line generator:

- GlyphStyle: the appearance a decoration inherits (color + weight)
- Glyph: one positioned, already-shaped glyph handed over by the layout pass
- Line: one finished horizontal decoration segment

All three are frozen dataclasses, so equality is structural and instances
are safe to share between generators.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .color import Color
from .constants import BOLD_THRESHOLD, DEFAULT_COLOR_VALUE, WEIGHT_NORMAL


@dataclass(frozen=True)
class GlyphStyle:
    """Glyph styling information.

    Two styles are the same decoration appearance only when both the color
    and the boldness compare equal. Boldness is a numeric weight
    (400 normal, 700 bold), not a flag.
    """
    color: Color = field(default_factory=lambda: Color(DEFAULT_COLOR_VALUE))
    boldness: float = WEIGHT_NORMAL

    @property
    def is_bold(self) -> bool:
        return self.boldness >= BOLD_THRESHOLD


@dataclass(frozen=True)
class Glyph:
    """A glyph to be decorated.

    Layout passes should convert their own positioned-glyph records to this
    type before handing them to a LineGenerator. ``line_y`` must be a stable,
    quantized value per visual line, and ``width`` / ``font_size`` finite and
    non-negative; neither is checked.
    """
    line_y: float       # Baseline of the glyph's visual line
    font_size: float    # Em size, scales the decoration offset
    width: float        # Width of the glyph's bounding box
    x: float            # Left edge, same coordinate space as line_y
    style: GlyphStyle = field(default_factory=GlyphStyle)

    @property
    def end_x(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class Line:
    """A horizontal decoration line to be drawn from (start_x, y) to (end_x, y).

    Lines produced by a LineGenerator always satisfy ``start_x < end_x``.
    """
    start_x: float
    end_x: float
    y: float
    style: GlyphStyle

    @property
    def length(self) -> float:
        return self.end_x - self.start_x

    def points(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Return the two endpoints, ready for a drawing backend."""
        return (self.start_x, self.y), (self.end_x, self.y)
