"""Stage 1: Quick binary content checks.

Note: tab, newline and carriage return are never counted as control bytes.
Vertical tab (0x0B) and form feed (0x0C) count as control bytes but not as
non-printable ones.
"""

from __future__ import annotations

import dataclasses

from textsniff._utils import DEEP_SCAN_BYTES, QUICK_SCAN_BYTES

# Threshold: more than this fraction of non-printable bytes means binary.
_NON_PRINTABLE_THRESHOLD = 0.10
# Threshold: more than this fraction of control bytes means binary.
_CONTROL_THRESHOLD = 0.30

# Translation tables for bytes.translate(None, delete): len(data) minus the
# length of the translated result gives the count in one C-level pass.
NON_PRINTABLE_BYTES = bytes(range(0x09)) + bytes(range(0x0E, 0x20))
CONTROL_BYTES = NON_PRINTABLE_BYTES + b"\x0b\x0c\x7f"


@dataclasses.dataclass(frozen=True, slots=True)
class QuickScan:
    """Outcome of :func:`quick_scan`."""

    likely_binary: bool
    reason: str
    non_printable_ratio: float
    control_char_ratio: float


def count_bytes(data: bytes, table: bytes) -> int:
    """Return how many bytes of *data* appear in *table*."""
    return len(data) - len(data.translate(None, table))


def has_null_bytes(data: bytes) -> bool:
    """Return True if a NUL byte occurs within the deep-scan window."""
    return b"\x00" in data[:DEEP_SCAN_BYTES]


def quick_scan(data: bytes) -> QuickScan:
    """Cheap control-character check over the first kilobyte.

    :param data: The raw byte data to examine.
    :returns: A :class:`QuickScan`; empty input is reported as text-like.
    """
    sample = data[:QUICK_SCAN_BYTES]
    if not sample:
        return QuickScan(False, "content looks text-like", 0.0, 0.0)

    non_printable_ratio = count_bytes(sample, NON_PRINTABLE_BYTES) / len(sample)
    control_char_ratio = count_bytes(sample, CONTROL_BYTES) / len(sample)

    if non_printable_ratio > _NON_PRINTABLE_THRESHOLD:
        reason = f"high non-printable ratio: {non_printable_ratio * 100:.1f}%"
        likely_binary = True
    elif control_char_ratio > _CONTROL_THRESHOLD:
        reason = f"high control char ratio: {control_char_ratio * 100:.1f}%"
        likely_binary = True
    else:
        reason = "content looks text-like"
        likely_binary = False
    return QuickScan(likely_binary, reason, non_printable_ratio, control_char_ratio)
