"""Internal shared utilities for textsniff."""

from __future__ import annotations

#: Bytes examined by the quick control-character scan.
QUICK_SCAN_BYTES: int = 1024

#: Bytes examined by the null-byte check and the deep analyzer.
DEEP_SCAN_BYTES: int = 8192

#: Bytes decoded for text pattern scoring.
PATTERN_SAMPLE_BYTES: int = 2048


def get_extension(filename: str | None) -> str | None:
    """Return the extension of *filename* including the dot, or ``None``.

    Only the final path component is considered, so ``"pkg.d/README"`` has
    no extension.  A name that ends in a dot has no extension; a dotfile such
    as ``".gitignore"`` is its own extension.
    """
    if not filename:
        return None
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return None
    return name[dot:]


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)


def _as_bytes(data: bytes | bytearray | memoryview, limit: int) -> bytes:
    """Return at most *limit* leading bytes of *data* as ``bytes``."""
    if isinstance(data, bytes):
        return data[:limit]
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data[:limit])
    msg = f"expected a bytes-like object, got {type(data).__name__}"
    raise TypeError(msg)
