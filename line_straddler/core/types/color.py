# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
32-bit RGBA color value.

The color is stored as a single packed integer with red in the most
significant byte and alpha in the least significant byte. Equality and
hashing are by value, so two independently built colors describing the
same RGBA compare equal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """Packed RGBA color with 8-bit channels."""
    value: int = 0

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Create a color from its four channel values.

        Raises:
            ValueError: If a channel is not an integer in 0..255.
        """
        for name, channel in (("red", r), ("green", g), ("blue", b), ("alpha", a)):
            if not isinstance(channel, int) or isinstance(channel, bool) or not 0 <= channel <= 255:
                raise ValueError(f"Invalid {name} channel: {channel!r} (expected int in 0..255)")
        return cls((r << 24) | (g << 16) | (b << 8) | a)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rrggbb`` or ``#rrggbbaa``. Alpha defaults to opaque.

        Raises:
            ValueError: If the text is not a 6 or 8 digit hex color.
        """
        m = _HEX_RE.match(text.strip())
        if m is None:
            raise ValueError(f"Invalid hex color: '{text}'")
        rgb, alpha = m.groups()
        return cls((int(rgb, 16) << 8) | (int(alpha, 16) if alpha else 0xFF))

    @property
    def red(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def blue(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def alpha(self) -> int:
        return self.value & 0xFF

    def components(self) -> tuple[int, int, int, int]:
        """Return the ``(red, green, blue, alpha)`` channel tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self) -> str:
        return f"#{self.value & 0xFFFFFFFF:08x}"

    def __repr__(self) -> str:
        return f"Color({self.to_hex()})"
