"""Stage 2a: Statistical content analysis over the deep-scan window."""

from __future__ import annotations

import re

from textsniff._utils import DEEP_SCAN_BYTES, PATTERN_SAMPLE_BYTES
from textsniff.pipeline import FileAnalysis
from textsniff.pipeline.binary import (
    CONTROL_BYTES,
    NON_PRINTABLE_BYTES,
    count_bytes,
    has_null_bytes,
)
from textsniff.pipeline.patterns import has_common_text_patterns

_PRINTABLE_ASCII = bytes(range(0x20, 0x7F))
_LINE_BREAK_RE = re.compile(rb"[\r\n]")
# Longest UTF-8 sequence minus one: the most a window cut can leave dangling.
_MAX_DANGLING = 3


def is_valid_utf8(sample: bytes) -> bool:
    """Return True if *sample* decodes as strict UTF-8.

    A sample that fills the deep-scan window may end inside a multi-byte
    sequence, so an incomplete sequence at its very end is tolerated.  The
    verdict depends only on the sample, never on what follows it.
    """
    try:
        sample.decode("utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        if len(sample) < DEEP_SCAN_BYTES or exc.end != len(sample):
            return False
        if len(sample) - exc.start > _MAX_DANGLING:
            return False
        return exc.reason == "unexpected end of data"
    return True



def _line_lengths(sample: bytes, line_breaks: int) -> tuple[float, int]:
    """Return ``(average, max)`` line length for *sample*.

    Every CR and every LF counts as a break, so CRLF files have empty lines
    in between; only lines terminated by a break count towards the maximum.
    """
    if line_breaks == 0:
        return float(len(sample)), 0
    average = (len(sample) - line_breaks) / line_breaks
    terminated = _LINE_BREAK_RE.split(sample)[:-1]
    return average, max(len(line) for line in terminated)


def analyze_content(data: bytes) -> FileAnalysis:
    """Profile the first :data:`DEEP_SCAN_BYTES` of *data*.

    :param data: The raw byte data to examine.  Must not be empty.
    :returns: A :class:`FileAnalysis`; this stage takes no decision.
    """
    sample = data[:DEEP_SCAN_BYTES]
    length = len(sample)

    line_breaks = sample.count(b"\n") + sample.count(b"\r")
    average_line_length, max_line_length = _line_lengths(sample, line_breaks)

    text = sample[:PATTERN_SAMPLE_BYTES].decode("utf-8", errors="replace")

    return FileAnalysis(
        has_null_bytes=has_null_bytes(sample),
        non_printable_ratio=count_bytes(sample, NON_PRINTABLE_BYTES) / length,
        ascii_ratio=count_bytes(sample, _PRINTABLE_ASCII) / length,
        control_char_ratio=count_bytes(sample, CONTROL_BYTES) / length,
        average_line_length=average_line_length,
        max_line_length=max_line_length,
        utf8_valid=is_valid_utf8(sample),
        has_common_text_patterns=has_common_text_patterns(text),
    )
