# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
line-straddler Types Package - Public API

Re-exports every value type and constant so the rest of the package can use
the single import pattern `from ..core import types as lt` and refer to
`lt.Glyph`, `lt.UNDERLINE` and so on.

**Internal Module Organization:**
- constants.py: line types, default tolerances and offset ratios
- color.py: packed RGBA Color
- glyph.py: GlyphStyle, Glyph and Line
- metrics.py: DecorationMetrics and the vertical offset calculator
"""

from .constants import *
from .color import Color
from .glyph import Glyph, GlyphStyle, Line
from .metrics import DEFAULT_METRICS, DecorationMetrics, decoration_y, line_type_name, offset
