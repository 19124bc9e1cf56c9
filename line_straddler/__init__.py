# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
line-straddler - figure out where lines go when underlining, striking
through or overlining text.

When drawing text, a renderer needs to know where its decoration lines go.
line-straddler provides a renderer-agnostic LineGenerator that turns a
stream of positioned Glyphs into horizontal Line segments: one per run of
touching glyphs that share a visual line and a style.
"""

__version__ = "0.2.0"

from .core.error import ConfigurationError, GlyphFormatError, LineStraddlerError
from .core.glyph_stream import as_glyph, glyph_from_dict, line_to_dict, read_glyphs
from .core.line_generator import LineGenerator, generate_lines
from .core.types import (
    DEFAULT_METRICS, LINE_TYPE_NAMES, LINE_TYPES_BY_NAME, OVERLINE,
    STRIKETHROUGH, UNDERLINE, WEIGHT_BOLD, WEIGHT_NORMAL, Color,
    DecorationMetrics, Glyph, GlyphStyle, Line, decoration_y, offset,
)

__all__ = [
    "Color", "ConfigurationError", "DEFAULT_METRICS", "DecorationMetrics",
    "Glyph", "GlyphFormatError", "GlyphStyle", "LINE_TYPE_NAMES",
    "LINE_TYPES_BY_NAME", "Line", "LineGenerator", "LineStraddlerError",
    "OVERLINE", "STRIKETHROUGH", "UNDERLINE", "WEIGHT_BOLD", "WEIGHT_NORMAL",
    "as_glyph", "decoration_y", "generate_lines", "glyph_from_dict",
    "line_to_dict", "offset", "read_glyphs",
]
