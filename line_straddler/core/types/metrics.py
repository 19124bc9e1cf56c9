# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Decoration Metrics and Vertical Offset Calculation

DecorationMetrics bundles the calibration values a LineGenerator uses:
the two merge tolerances and the per-line-type offset ratios. The values
are not fixed by any font; the defaults are typographically reasonable
and can be overridden to match a reference renderer.

Offset formulas (positive y is downward, ``line_y`` is the baseline):

- underline:      y = line_y + font_size * underline_ratio
- strikethrough:  y = line_y - font_size * strikethrough_ratio
- overline:       y = line_y - font_size * overline_ratio
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace

from ..error import ConfigurationError
from .constants import (
    DEFAULT_HORIZONTAL_TOLERANCE, DEFAULT_OVERLINE_RATIO,
    DEFAULT_STRIKETHROUGH_RATIO, DEFAULT_UNDERLINE_RATIO, LINE_TYPE_NAMES,
    LINE_Y_EPSILON, OVERLINE, STRIKETHROUGH, UNDERLINE,
)


@dataclass(frozen=True)
class DecorationMetrics:
    """Calibration values for decoration placement and merging."""
    horizontal_tolerance: float = DEFAULT_HORIZONTAL_TOLERANCE
    line_y_tolerance: float = LINE_Y_EPSILON
    underline_ratio: float = DEFAULT_UNDERLINE_RATIO
    strikethrough_ratio: float = DEFAULT_STRIKETHROUGH_RATIO
    overline_ratio: float = DEFAULT_OVERLINE_RATIO

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(f"{f.name} must be finite and non-negative, got {value!r}")

    def with_overrides(self, **overrides: float | None) -> DecorationMetrics:
        """Return a copy with the given fields replaced. ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def ratio_for(self, line_type: int) -> float:
        line_type_name(line_type)
        if line_type == UNDERLINE:
            return self.underline_ratio
        if line_type == STRIKETHROUGH:
            return self.strikethrough_ratio
        if line_type == OVERLINE:
            return self.overline_ratio
        raise ValueError(f"Unknown line type: {line_type!r}")


DEFAULT_METRICS = DecorationMetrics()


def offset(line_type: int, font_size: float, metrics: DecorationMetrics = DEFAULT_METRICS) -> float:
    """Signed vertical distance from the baseline to the decoration line."""
    delta = font_size * metrics.ratio_for(line_type)
    return delta if line_type == UNDERLINE else -delta


def decoration_y(line_type: int, line_y: float, font_size: float,
                 metrics: DecorationMetrics = DEFAULT_METRICS) -> float:
    """Absolute y coordinate of a decoration for text on baseline ``line_y``."""
    return line_y + offset(line_type, font_size, metrics)


def line_type_name(line_type: int) -> str:
    """Name of a line type constant.

    Raises:
        ValueError: If line_type is not one of the int line type constants.
    """
    if not isinstance(line_type, int) or isinstance(line_type, bool):
        raise ValueError(f"Unknown line type: {line_type!r}")
    try:
        return LINE_TYPE_NAMES[line_type]
    except KeyError:
        raise ValueError(f"Unknown line type: {line_type!r}") from None
