"""Text/binary content classifier for files and diffs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textsniff._utils import DEEP_SCAN_BYTES, _as_bytes
from textsniff.detector import TextDetector
from textsniff.diff import BINARY_DIFF_PLACEHOLDER, is_binary_diff, render_diff
from textsniff.pipeline import FileTypeResult, make_result
from textsniff.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "BINARY_DIFF_PLACEHOLDER",
    "FileTypeResult",
    "TextDetector",
    "classify",
    "classify_file",
    "is_binary_diff",
    "make_result",
    "render_diff",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def classify(
    data: bytes | bytearray | memoryview,
    filename: str | None = None,
    mime_type: str | None = None,
) -> FileTypeResult:
    """Decide whether *data* is text or binary.

    Only the first 8KB of *data* are examined, so the cost does not grow
    with the input.  Never raises for any byte content.

    :param data: The raw bytes to classify; may be empty.
    :param filename: Optional file name; only its extension is used.
    :param mime_type: Optional declared MIME type, used as a prior.
    :returns: A :class:`FileTypeResult`.
    :raises TypeError: If *data* is not a bytes-like object.
    """
    sample = _as_bytes(data, DEEP_SCAN_BYTES)
    return run_pipeline(sample, filename, mime_type)


def classify_file(
    path: str | os.PathLike[str], mime_type: str | None = None
) -> FileTypeResult:
    """Classify the file at *path* by reading at most its first 8KB.

    :param path: The file to read.
    :param mime_type: Optional declared MIME type, used as a prior.
    :raises OSError: If the file cannot be opened or read.
    """
    path = Path(path)
    with path.open("rb") as f:
        data = f.read(DEEP_SCAN_BYTES)
    return run_pipeline(data, path.name, mime_type)
