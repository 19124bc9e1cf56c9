# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Error types for line-straddler.

The line generator itself cannot fail; errors only arise at the edges where
untrusted input is turned into glyphs or calibration values. Every error
carries an integer code that the command-line front end uses as its exit
status.
"""

from __future__ import annotations

# error codes (process exit statuses)
SUCCESS = 0
INVALIDGLYPH = 2
IOERROR = 3
CONFIGURATIONERROR = 4

ERROR_NAMES = {
    INVALIDGLYPH: "invalidglyph",
    IOERROR: "ioerror",
    CONFIGURATIONERROR: "configurationerror",
}


class LineStraddlerError(Exception):
    """Base class for all line-straddler errors."""
    code = IOERROR

    @property
    def name(self) -> str:
        return ERROR_NAMES.get(self.code, f"error#{self.code}")


class GlyphFormatError(LineStraddlerError, ValueError):
    """A glyph record could not be turned into a Glyph.

    ``record`` is the 1-based position of the offending record in its
    stream, or None when the glyph was not read from a stream. ``source``
    names the stream (a file path) when known.
    """
    code = INVALIDGLYPH

    def __init__(self, message: str, record: int | None = None,
                 source: str | None = None) -> None:
        self.detail = message
        self.record = record
        self.source = source
        if record is not None:
            message = f"record {record}: {message}"
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)

    def with_source(self, source: str) -> GlyphFormatError:
        """Copy of this error attributed to ``source``."""
        return GlyphFormatError(self.detail, self.record, source)


class ConfigurationError(LineStraddlerError, ValueError):
    """Invalid decoration metrics (tolerance or offset ratio)."""
    code = CONFIGURATIONERROR
