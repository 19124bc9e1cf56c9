# line-straddler - Text Decoration Line Generator
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Glyph Stream Conversion

Turns external glyph records into Glyph values and finished Lines back into
plain dictionaries.

Accepted glyph records:
- Glyph instances (passed through unchanged)
- objects with a ``to_glyph()`` method (layout-engine adapters)
- mappings with ``line_y``, ``font_size``, ``width``, ``x`` and an optional
  ``style`` mapping (``color`` as ``#rrggbb[aa]`` or ``[r, g, b(, a)]``,
  ``boldness`` as a number)

Stream formats:
- json:  a list of glyph objects, or ``{"glyphs": [...]}``
- jsonl: one glyph object per non-blank line, read lazily
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator, Mapping
from typing import Any, TextIO

from . import types as lt
from .error import GlyphFormatError

_GLYPH_FIELDS = ("line_y", "font_size", "width", "x")

FORMATS = ("auto", "json", "jsonl")
_JSONL_EXTENSIONS = frozenset({".jsonl", ".ndjson"})


def _number(record: Mapping[str, Any], key: str, index: int | None) -> float:
    if key not in record:
        raise GlyphFormatError(f"missing field '{key}'", index)
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GlyphFormatError(f"field '{key}' must be a number, got {value!r}", index)
    return float(value)


def _color(value: Any, index: int | None) -> lt.Color:
    if isinstance(value, lt.Color):
        return value
    try:
        if isinstance(value, str):
            return lt.Color.from_hex(value)
        if isinstance(value, (list, tuple)) and len(value) in (3, 4):
            channels = list(value) + [255] * (4 - len(value))
            return lt.Color.rgba(*channels)
    except ValueError as exc:
        raise GlyphFormatError(str(exc), index) from exc
    raise GlyphFormatError(f"invalid color {value!r}", index)


def style_from_dict(record: Any, index: int | None = None) -> lt.GlyphStyle:
    """Build a GlyphStyle from a style mapping. Missing keys take defaults."""
    if record is None:
        return lt.GlyphStyle()
    if isinstance(record, lt.GlyphStyle):
        return record
    if not isinstance(record, Mapping):
        raise GlyphFormatError(f"style must be an object, got {type(record).__name__}", index)

    style = lt.GlyphStyle()
    if "color" in record:
        style = lt.GlyphStyle(color=_color(record["color"], index), boldness=style.boldness)
    if "boldness" in record:
        style = lt.GlyphStyle(color=style.color, boldness=_number(record, "boldness", index))
    return style


def glyph_from_dict(record: Any, index: int | None = None) -> lt.Glyph:
    """Build a Glyph from a mapping of glyph fields.

    Raises:
        GlyphFormatError: If a required field is missing or not numeric, or
            the style is malformed.
    """
    if not isinstance(record, Mapping):
        raise GlyphFormatError(f"glyph must be an object, got {type(record).__name__}", index)
    line_y, font_size, width, x = (_number(record, key, index) for key in _GLYPH_FIELDS)
    return lt.Glyph(
        line_y=line_y,
        font_size=font_size,
        width=width,
        x=x,
        style=style_from_dict(record.get("style"), index),
    )


def as_glyph(obj: Any, index: int | None = None) -> lt.Glyph:
    """Coerce any accepted glyph record into a Glyph."""
    if isinstance(obj, lt.Glyph):
        return obj
    to_glyph = getattr(obj, "to_glyph", None)
    if callable(to_glyph):
        glyph = to_glyph()
        if not isinstance(glyph, lt.Glyph):
            raise GlyphFormatError(
                f"{type(obj).__name__}.to_glyph() returned {type(glyph).__name__}, not Glyph", index
            )
        return glyph
    return glyph_from_dict(obj, index)


def resolve_format(fmt: str, path: str | None) -> str:
    """Pick a concrete stream format; ``auto`` goes by file extension."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown glyph stream format: '{fmt}'")
    if fmt != "auto":
        return fmt
    if path and path != "-" and os.path.splitext(path)[1].lower() in _JSONL_EXTENSIONS:
        return "jsonl"
    return "json"


def _decode(text: str, index: int | None) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise GlyphFormatError(f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
                               index) from exc


def read_glyphs(stream: TextIO, fmt: str = "json") -> Iterator[lt.Glyph]:
    """Yield glyphs from an open text stream in caller order.

    Records are numbered from 1; a malformed record raises GlyphFormatError
    naming its number. JSON Lines input is read one line at a time.
    Undecodable bytes in the stream are reported as GlyphFormatError too.
    """
    if fmt == "jsonl":
        index = 0
        try:
            for raw in stream:
                if not raw.strip():
                    continue
                index += 1
                yield as_glyph(_decode(raw, index), index)
        except UnicodeDecodeError as exc:
            raise GlyphFormatError(f"undecodable input: {exc.reason}", index + 1) from exc
        return

    if fmt != "json":
        raise ValueError(f"Unknown glyph stream format: '{fmt}'")

    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise GlyphFormatError(f"undecodable input: {exc.reason}") from exc
    document = _decode(text, None)
    if isinstance(document, Mapping):
        if "glyphs" not in document:
            raise GlyphFormatError("JSON object has no 'glyphs' list")
        document = document["glyphs"]
    if not isinstance(document, list):
        raise GlyphFormatError(f"expected a list of glyphs, got {type(document).__name__}")
    for index, record in enumerate(document, start=1):
        yield as_glyph(record, index)


def style_to_dict(style: lt.GlyphStyle) -> dict[str, Any]:
    return {"color": style.color.to_hex(), "boldness": style.boldness}


def line_to_dict(line: lt.Line, line_type: int) -> dict[str, Any]:
    """Serialize a finished Line for JSON output."""
    return {
        "type": lt.line_type_name(line_type),
        "start_x": line.start_x,
        "end_x": line.end_x,
        "y": line.y,
        "style": style_to_dict(line.style),
    }
