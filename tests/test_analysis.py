# tests/test_analysis.py
from __future__ import annotations

import pytest

from textsniff.pipeline.analysis import analyze_content, is_valid_utf8


def test_line_statistics():
    analysis = analyze_content(b"hello\nworld\n")
    assert analysis.average_line_length == pytest.approx(5.0)
    assert analysis.max_line_length == 5


def test_no_line_breaks_uses_sample_length():
    analysis = analyze_content(b"abc")
    assert analysis.average_line_length == 3.0
    assert analysis.max_line_length == 0


def test_crlf_counts_two_breaks():
    analysis = analyze_content(b"ab\r\ncd\r\n")
    assert analysis.average_line_length == pytest.approx(1.0)
    assert analysis.max_line_length == 2


def test_unterminated_last_line_not_in_max():
    analysis = analyze_content(b"ab\n" + b"x" * 50)
    assert analysis.max_line_length == 2


def test_ratios_for_plain_ascii():
    analysis = analyze_content(b"Hello world\n")
    assert analysis.ascii_ratio == pytest.approx(11 / 12)
    assert analysis.control_char_ratio == 0.0
    assert analysis.non_printable_ratio == 0.0
    assert analysis.utf8_valid is True
    assert analysis.has_null_bytes is False


def test_ratios_for_control_bytes():
    analysis = analyze_content(b"\x01\x02\x0b\x0c")
    assert analysis.non_printable_ratio == pytest.approx(0.5)
    assert analysis.control_char_ratio == pytest.approx(1.0)
    assert analysis.ascii_ratio == 0.0


def test_null_bytes_flagged():
    assert analyze_content(b"ab\x00cd").has_null_bytes is True


def test_utf8_multibyte_is_valid_but_not_ascii():
    analysis = analyze_content("Grüße aus Köln".encode())
    assert analysis.utf8_valid is True
    assert analysis.ascii_ratio < 1.0


def test_latin1_is_not_valid_utf8():
    analysis = analyze_content("Grüße aus Köln".encode("latin-1"))
    assert analysis.utf8_valid is False


def test_window_cut_inside_multibyte_sequence_is_tolerated():
    data = b"a" * 8191 + "é".encode()
    assert analyze_content(data).utf8_valid is True
    assert analyze_content(data[:8192]).utf8_valid is True


def test_only_the_window_is_analyzed():
    head = b"line of text\n" * 700
    assert len(head) > 8192
    assert analyze_content(head) == analyze_content(head + b"\x00" * 10_000)


def test_code_sample_has_common_text_patterns():
    data = (
        b"#!/usr/bin/env node\n"
        b"// Build script for the **docs** site, "
        b"see [guide](https://example.com/guide).\n"
        b"function main() {\n"
        b'  const config = {"name": "docs", "debug": false};\n'
        b"  if (config.debug) {\n"
        b'    console.log("<b>Debug</b> mode &amp; verbose output");\n'
        b"  }\n"
        b"  return Hello World;\n"
        b"}\n"
    )
    assert analyze_content(data).has_common_text_patterns is True


@pytest.mark.parametrize(
    ("sample", "expected"),
    [
        (b"plain", True),
        (b"", True),
        ("ünïcödé".encode(), True),
        (b"a\xc3", False),
        (b"a" * 8191 + b"\xc3", True),
        (b"a" * 8190 + b"\xe2\x82", True),
        (b"a" * 8191 + b"\xff", False),
        (b"\xc3\x28" + b"a" * 8190, False),
    ],
)
def test_is_valid_utf8(sample: bytes, expected: bool):
    assert is_valid_utf8(sample) is expected

