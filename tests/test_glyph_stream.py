"""Tests for glyph record coercion, stream reading and line serialization."""

from __future__ import annotations

import io
import json

import pytest

from line_straddler import (
    STRIKETHROUGH, Color, Glyph, GlyphFormatError, GlyphStyle, Line,
    as_glyph, glyph_from_dict, line_to_dict, read_glyphs,
)
from line_straddler.core.glyph_stream import resolve_format, style_from_dict


GLYPH_RECORD = {"line_y": 3, "font_size": 12, "width": 6.5, "x": 10,
                "style": {"color": "#ff000080", "boldness": 700}}


class TestCoercion:
    def test_glyph_from_dict(self):
        g = glyph_from_dict(GLYPH_RECORD)
        assert g == Glyph(line_y=3.0, font_size=12.0, width=6.5, x=10.0,
                          style=GlyphStyle(Color.rgba(255, 0, 0, 0x80), 700.0))

    def test_style_defaults(self):
        g = glyph_from_dict({"line_y": 0, "font_size": 1, "width": 1, "x": 0})
        assert g.style == GlyphStyle()

    def test_color_as_list(self):
        assert style_from_dict({"color": [1, 2, 3]}).color == Color.rgba(1, 2, 3, 255)
        assert style_from_dict({"color": [1, 2, 3, 4]}).color == Color.rgba(1, 2, 3, 4)

    def test_partial_style_keeps_other_default(self):
        style = style_from_dict({"boldness": 700})
        assert style.color == GlyphStyle().color
        assert style.boldness == 700

    @pytest.mark.parametrize("record, message", [
        ({"font_size": 1, "width": 1, "x": 0}, "missing field 'line_y'"),
        ({"line_y": "0", "font_size": 1, "width": 1, "x": 0}, "field 'line_y' must be a number"),
        ({"line_y": 0, "font_size": True, "width": 1, "x": 0}, "field 'font_size' must be a number"),
        ({"line_y": 0, "font_size": 1, "width": 1, "x": 0, "style": []}, "style must be an object"),
        ({"line_y": 0, "font_size": 1, "width": 1, "x": 0, "style": {"color": "blue"}}, "Invalid hex color"),
        ({"line_y": 0, "font_size": 1, "width": 1, "x": 0, "style": {"color": [1, 2]}}, "invalid color"),
        ({"line_y": 0, "font_size": 1, "width": 1, "x": 0, "style": {"color": [300, 0, 0]}}, "red channel"),
        ([0, 1, 2, 3], "glyph must be an object"),
    ])
    def test_rejects_malformed(self, record, message):
        with pytest.raises(GlyphFormatError, match=message):
            glyph_from_dict(record)

    def test_as_glyph_passthrough(self):
        g = Glyph(line_y=0.0, font_size=1.0, width=1.0, x=0.0)
        assert as_glyph(g) is g

    def test_as_glyph_adapter_must_return_glyph(self):
        class Broken:
            def to_glyph(self):
                return {"x": 1}

        with pytest.raises(GlyphFormatError, match="not Glyph"):
            as_glyph(Broken())


class TestReadGlyphs:
    def test_json_list(self):
        glyphs = list(read_glyphs(io.StringIO(json.dumps([GLYPH_RECORD, GLYPH_RECORD])), "json"))
        assert len(glyphs) == 2

    def test_json_object(self):
        glyphs = list(read_glyphs(io.StringIO(json.dumps({"glyphs": [GLYPH_RECORD]})), "json"))
        assert glyphs == [glyph_from_dict(GLYPH_RECORD)]

    def test_json_object_without_glyphs(self):
        with pytest.raises(GlyphFormatError, match="no 'glyphs' list"):
            list(read_glyphs(io.StringIO("{}"), "json"))

    def test_json_scalar(self):
        with pytest.raises(GlyphFormatError, match="expected a list"):
            list(read_glyphs(io.StringIO("3"), "json"))

    def test_invalid_json(self):
        with pytest.raises(GlyphFormatError, match="invalid JSON"):
            list(read_glyphs(io.StringIO("[{"), "json"))

    def test_json_error_names_record(self):
        bad = dict(GLYPH_RECORD, x="left")
        with pytest.raises(GlyphFormatError) as info:
            list(read_glyphs(io.StringIO(json.dumps([GLYPH_RECORD, bad])), "json"))
        assert info.value.record == 2
        assert str(info.value).startswith("record 2:")

    def test_jsonl_skips_blank_lines(self):
        text = json.dumps(GLYPH_RECORD) + "\n\n" + json.dumps(GLYPH_RECORD) + "\n"
        assert len(list(read_glyphs(io.StringIO(text), "jsonl"))) == 2

    def test_jsonl_is_lazy(self):
        text = json.dumps(GLYPH_RECORD) + "\nnot json\n"
        stream = read_glyphs(io.StringIO(text), "jsonl")
        assert isinstance(next(stream), Glyph)
        with pytest.raises(GlyphFormatError) as info:
            next(stream)
        assert info.value.record == 2

    def test_undecodable_json(self):
        stream = io.TextIOWrapper(io.BytesIO(b'[{"x": 1\xff}]'), encoding="utf-8")
        with pytest.raises(GlyphFormatError, match="undecodable input"):
            list(read_glyphs(stream, "json"))

    def test_undecodable_jsonl_names_record(self):
        data = (json.dumps(GLYPH_RECORD) + "\n").encode() + b"\xff\xfe\n"
        stream = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
        with pytest.raises(GlyphFormatError) as info:
            list(read_glyphs(stream, "jsonl"))
        assert "undecodable input" in str(info.value)
        assert info.value.record is not None

    def test_with_source_keeps_record(self):
        err = GlyphFormatError("missing field 'x'", 4).with_source("run.json")
        assert err.record == 4
        assert err.source == "run.json"
        assert str(err) == "run.json: record 4: missing field 'x'"

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            list(read_glyphs(io.StringIO("[]"), "xml"))


class TestResolveFormat:
    def test_auto_by_extension(self):
        assert resolve_format("auto", "run.jsonl") == "jsonl"
        assert resolve_format("auto", "run.NDJSON") == "jsonl"
        assert resolve_format("auto", "run.json") == "json"
        assert resolve_format("auto", "-") == "json"

    def test_explicit_wins(self):
        assert resolve_format("jsonl", "run.json") == "jsonl"

    def test_unknown(self):
        with pytest.raises(ValueError):
            resolve_format("yaml", None)


def test_line_to_dict():
    line = Line(start_x=1.0, end_x=2.0, y=-3.0, style=GlyphStyle(Color.rgba(0, 0, 255, 255), 400))
    assert line_to_dict(line, STRIKETHROUGH) == {
        "type": "strikethrough",
        "start_x": 1.0,
        "end_x": 2.0,
        "y": -3.0,
        "style": {"color": "#0000ffff", "boldness": 400},
    }
