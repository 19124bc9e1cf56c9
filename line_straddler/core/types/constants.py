# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
line-straddler Types Constants Module

This module contains the constants used throughout line-straddler: the
decoration line types, the default merge tolerances and the default
typographic offset ratios. Offset ratios are fractions of the em (the
glyph's font size).
"""

# line types
UNDERLINE = 0                               # Below the baseline
STRIKETHROUGH = 1                           # Through the glyph bodies
OVERLINE = 2                                # Above the glyph tops

LINE_TYPE_NAMES = {
    UNDERLINE: "underline",
    STRIKETHROUGH: "strikethrough",
    OVERLINE: "overline",
}
LINE_TYPES_BY_NAME = {name: line_type for line_type, name in LINE_TYPE_NAMES.items()}

# merge tolerances
LINE_Y_EPSILON = 0.001                      # Max line_y difference for "same visual line"
DEFAULT_HORIZONTAL_TOLERANCE = 0.01         # Max gap between glyphs still considered touching

# offset ratios (fraction of the em)
DEFAULT_UNDERLINE_RATIO = 0.1               # Below the baseline
DEFAULT_STRIKETHROUGH_RATIO = 0.35          # Above the baseline, roughly x-height / 2
DEFAULT_OVERLINE_RATIO = 0.8                # Above the baseline, roughly ascender height

# font weights
WEIGHT_NORMAL = 400
WEIGHT_BOLD = 700
BOLD_THRESHOLD = 600                        # Weights at or above this count as bold

# default glyph color (opaque black)
DEFAULT_COLOR_VALUE = 0x000000FF
