"""Classification pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
from typing import Any

#: Confidence for conclusive binary evidence (magic bytes, null bytes).
DETERMINISTIC_CONFIDENCE: float = 0.95


@dataclasses.dataclass(frozen=True, slots=True)
class FileTypeResult:
    """The verdict of a single classification.

    ``is_binary`` is derived from ``is_text`` so the two can never disagree.
    ``reason`` is diagnostic text naming the rule that decided the verdict;
    it is not meant to be parsed.
    """

    is_text: bool
    confidence: float
    reason: str
    encoding: str | None = None
    mime_type: str | None = None
    extension: str | None = None

    @property
    def is_binary(self) -> bool:
        return not self.is_text

    def to_dict(self) -> dict[str, Any]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'is_text'``, ``'is_binary'``, ``'encoding'``,
            ``'mime_type'``, ``'extension'``, ``'confidence'`` and
            ``'reason'`` keys.
        """
        return {
            "is_text": self.is_text,
            "is_binary": self.is_binary,
            "encoding": self.encoding,
            "mime_type": self.mime_type,
            "extension": self.extension,
            "confidence": self.confidence,
            "reason": self.reason,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class FileAnalysis:
    """Numeric profile of a content sample, consumed by the decision engine."""

    has_null_bytes: bool
    non_printable_ratio: float
    ascii_ratio: float
    control_char_ratio: float
    average_line_length: float
    max_line_length: int
    utf8_valid: bool
    has_common_text_patterns: bool


def make_result(
    is_text: bool, confidence: float, reason: str, **fields: Any
) -> FileTypeResult:
    """Build a :class:`FileTypeResult`.

    :param fields: Optional ``encoding``, ``mime_type`` and ``extension``.
    """
    return FileTypeResult(
        is_text=is_text, confidence=confidence, reason=reason, **fields
    )
