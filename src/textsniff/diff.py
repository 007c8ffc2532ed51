"""Binary detection for version-control diffs.

A diff that is binary must not be embedded verbatim into a prompt or a
rendered view; :func:`render_diff` swaps in a placeholder for it.
"""

from __future__ import annotations

import logging

from textsniff._utils import DEEP_SCAN_BYTES
from textsniff.pipeline.orchestrator import run_pipeline

logger = logging.getLogger(__name__)

BINARY_DIFF_PLACEHOLDER = "Binary file"

# Longer diffs are minified or generated content and are treated as binary.
MAX_DIFF_CHARS = 100_000
# A binary verdict below this confidence is not trusted.
_MIN_BINARY_CONFIDENCE = 0.5

_GIT_BINARY_MARKERS: tuple[str, ...] = ("Binary files", "GIT binary patch")


def _has_git_binary_marker(diff: str) -> bool:
    if any(marker in diff for marker in _GIT_BINARY_MARKERS):
        return True
    return "differ" in diff and "Binary" in diff


def is_binary_diff(diff: str | bytes, path: str | None = None) -> bool:
    """Return True if *diff* should be replaced by a placeholder.

    :param diff: The diff text, or raw bytes as produced by ``git diff``.
    :param path: Optional path of the changed file; its extension is used as
        a prior.
    """
    if not diff:
        return False

    if isinstance(diff, bytes):
        text = diff.decode("utf-8", errors="replace")
        data = diff
    else:
        text = diff
        data = diff.encode("utf-8", errors="replace")

    if _has_git_binary_marker(text):
        logger.debug("git marks %s as binary", path)
        return True
    if len(text) > MAX_DIFF_CHARS:
        logger.debug("diff for %s exceeds %d characters", path, MAX_DIFF_CHARS)
        return True

    result = run_pipeline(data[:DEEP_SCAN_BYTES], path)
    return result.is_binary and result.confidence > _MIN_BINARY_CONFIDENCE


def render_diff(diff: str, path: str | None = None) -> str:
    """Return *diff*, or :data:`BINARY_DIFF_PLACEHOLDER` if it is binary."""
    if is_binary_diff(diff, path):
        return BINARY_DIFF_PLACEHOLDER
    return diff
