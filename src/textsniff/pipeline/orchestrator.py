"""Pipeline orchestrator: quick detection, deep analysis, then the decision."""

from __future__ import annotations

import logging

from textsniff._utils import get_extension
from textsniff.enums import Prior
from textsniff.pipeline import (
    DETERMINISTIC_CONFIDENCE,
    FileAnalysis,
    FileTypeResult,
)
from textsniff.pipeline.analysis import analyze_content
from textsniff.pipeline.binary import has_null_bytes, quick_scan
from textsniff.pipeline.priors import extension_prior, mime_prior
from textsniff.pipeline.signatures import match_signature

logger = logging.getLogger(__name__)

_EMPTY_CONFIDENCE = 0.10
_MIME_CONFIDENCE = 0.85
_EXTENSION_CONFIDENCE = 0.80
# A text extension whose content fails the quick scan is strong evidence.
_EXTENSION_VETO_CONFIDENCE = 0.90
_NON_PRINTABLE_CONFIDENCE = 0.90
_UNCERTAIN_CONFIDENCE = 0.50
_HEURISTIC_CONFIDENCE = 0.65

# Decisions at or above this confidence are never adjusted by extension.
_ADJUSTMENT_CEILING = 0.90
# Below this confidence the coarse heuristic gets a final say.
_UNCERTAIN_BELOW = 0.60


def run_pipeline(
    data: bytes,
    filename: str | None = None,
    mime_type: str | None = None,
) -> FileTypeResult:
    """Classify *data* as text or binary.

    :param data: The raw bytes; only the first 8KB are examined.
    :param filename: Optional name whose extension acts as a prior.
    :param mime_type: Optional declared MIME type, also a prior.
    :returns: The final :class:`FileTypeResult`.
    """
    extension = get_extension(filename)

    if not data:
        logger.debug("empty input")
        return FileTypeResult(
            is_text=True,
            confidence=_EMPTY_CONFIDENCE,
            reason="Empty content - treated as text",
            encoding="utf-8",
            mime_type=mime_type,
            extension=extension,
        )

    quick = quick_detection(data, extension, mime_type)
    if quick is not None:
        return quick

    analysis = analyze_content(data)
    return make_decision(analysis, extension, mime_type)


def quick_detection(
    data: bytes, extension: str | None = None, mime_type: str | None = None
) -> FileTypeResult | None:
    """Run the cheap checks that can settle a classification on their own.

    Order: magic bytes, null bytes, declared MIME type, known extension.  A
    known text extension still has to pass the quick content scan.

    :returns: A result, or ``None`` if deep analysis is needed.
    """
    signature = match_signature(data)
    if signature is not None:
        logger.debug("signature match: %s", signature.description)
        return FileTypeResult(
            is_text=False,
            confidence=DETERMINISTIC_CONFIDENCE,
            reason=f"Detected {signature.description} magic bytes",
            mime_type=signature.mime_type,
            extension=extension,
        )

    if has_null_bytes(data):
        logger.debug("null byte within the scan window")
        return FileTypeResult(
            is_text=False,
            confidence=DETERMINISTIC_CONFIDENCE,
            reason="Contains null bytes - definitely binary",
            mime_type=mime_type,
            extension=extension,
        )

    prior = mime_prior(mime_type)
    if prior is Prior.DEFINITELY_TEXT:
        logger.debug("text MIME type: %s", mime_type)
        return FileTypeResult(
            is_text=True,
            confidence=_MIME_CONFIDENCE,
            reason=f"Text MIME type: {mime_type}",
            encoding="utf-8",
            mime_type=mime_type,
            extension=extension,
        )
    if prior is Prior.DEFINITELY_BINARY:
        logger.debug("binary MIME type: %s", mime_type)
        return FileTypeResult(
            is_text=False,
            confidence=_MIME_CONFIDENCE,
            reason=f"Binary MIME type: {mime_type}",
            mime_type=mime_type,
            extension=extension,
        )

    prior = extension_prior(extension)
    if prior is Prior.DEFINITELY_BINARY:
        logger.debug("binary extension: %s", extension)
        return FileTypeResult(
            is_text=False,
            confidence=_EXTENSION_CONFIDENCE,
            reason=f"Known binary extension: {extension.lower()}",
            mime_type=mime_type,
            extension=extension,
        )
    if prior is Prior.DEFINITELY_TEXT:
        ext = extension.lower()
        scan = quick_scan(data)
        if scan.likely_binary:
            logger.debug("text extension %s vetoed: %s", ext, scan.reason)
            return FileTypeResult(
                is_text=False,
                confidence=_EXTENSION_VETO_CONFIDENCE,
                reason=f"Binary content despite text extension {ext}: {scan.reason}",
                mime_type=mime_type,
                extension=extension,
            )
        logger.debug("text extension %s confirmed by quick scan", ext)
        return FileTypeResult(
            is_text=True,
            confidence=_EXTENSION_CONFIDENCE,
            reason=f"Known text extension {ext} with valid content",
            encoding="utf-8",
            mime_type=mime_type,
            extension=extension,
        )

    return None


def _base_decision(analysis: FileAnalysis) -> tuple[bool, float, str]:
    """Apply content rules 3-7 and return ``(is_text, confidence, reason)``."""
    if analysis.utf8_valid and analysis.ascii_ratio > 0.7:
        ascii_pct = analysis.ascii_ratio * 100
        return True, 0.80, f"Valid UTF-8 with {ascii_pct:.1f}% ASCII"
    if analysis.has_common_text_patterns:
        return True, 0.75, "Contains common text patterns"
    if analysis.utf8_valid and analysis.control_char_ratio < 0.1:
        return True, 0.70, "Valid UTF-8 with low control characters"
    if analysis.average_line_length < 200 and analysis.ascii_ratio > 0.5:
        return True, 0.65, "Reasonable line length with decent ASCII ratio"
    return False, _UNCERTAIN_CONFIDENCE, "Content analysis"


def _adjust_for_extension(
    is_text: bool, confidence: float, reason: str, ext: str
) -> tuple[float, str]:
    """Nudge *confidence* towards or away from the extension's prior.

    The verdict itself is never changed here; conflicts are recorded in the
    reason instead.
    """
    prior = extension_prior(ext)
    if prior is Prior.DEFINITELY_TEXT:
        if is_text:
            confidence = min(confidence + 0.15, 0.95)
            return confidence, f"{reason} (known text extension: {ext})"
        confidence = max(confidence, 0.6)
        return confidence, f"{reason} (text extension {ext} but questionable content)"
    if prior is Prior.DEFINITELY_BINARY:
        if not is_text:
            confidence = min(confidence + 0.15, 0.95)
            return confidence, f"{reason} (known binary extension: {ext})"
        confidence = max(confidence - 0.2, 0.3)
        return (
            confidence,
            f"{reason} (binary extension {ext} but text-like content - suspicious)",
        )
    if prior is Prior.LIKELY_TEXT:
        if is_text:
            confidence = min(confidence + 0.1, 0.9)
            return confidence, f"{reason} (likely text extension: {ext})"
        return confidence, reason
    if prior is Prior.LIKELY_BINARY:
        if not is_text:
            confidence = min(confidence + 0.1, 0.9)
            return confidence, f"{reason} (likely binary extension: {ext})"
        confidence = max(confidence - 0.1, 0.4)
        return confidence, f"{reason} (likely binary extension {ext} but text content)"
    return confidence, f"{reason} (unknown extension: {ext})"


def make_decision(
    analysis: FileAnalysis,
    extension: str | None = None,
    mime_type: str | None = None,
) -> FileTypeResult:
    """Merge a :class:`FileAnalysis` and the metadata priors into a verdict.

    Null bytes and a high non-printable ratio settle the verdict outright.
    Otherwise the first matching content rule decides, the extension adjusts
    confidence, and a coarse heuristic gets the last word when confidence is
    still low.
    """
    if analysis.has_null_bytes:
        logger.debug("decision: null bytes")
        return FileTypeResult(
            is_text=False,
            confidence=DETERMINISTIC_CONFIDENCE,
            reason="Contains null bytes - definitely binary",
            mime_type=mime_type,
            extension=extension,
        )

    if analysis.non_printable_ratio > 0.3:
        logger.debug("decision: non-printable ratio %.3f", analysis.non_printable_ratio)
        return FileTypeResult(
            is_text=False,
            confidence=_NON_PRINTABLE_CONFIDENCE,
            reason=(
                f"High non-printable ratio: {analysis.non_printable_ratio * 100:.1f}%"
            ),
            mime_type=mime_type,
            extension=extension,
        )

    is_text, confidence, reason = _base_decision(analysis)

    if extension and confidence < _ADJUSTMENT_CEILING:
        confidence, reason = _adjust_for_extension(
            is_text, confidence, reason, extension.lower()
        )

    if confidence < _UNCERTAIN_BELOW:
        if analysis.ascii_ratio > 0.8 and analysis.non_printable_ratio < 0.05:
            is_text, confidence = True, _HEURISTIC_CONFIDENCE
            reason = "High ASCII ratio with minimal non-printable chars"
        elif analysis.non_printable_ratio > 0.1 or analysis.control_char_ratio > 0.2:
            is_text, confidence = False, _HEURISTIC_CONFIDENCE
            reason = "High ratio of problematic characters"

    logger.debug(
        "decision: %s (%.2f) %s", "text" if is_text else "binary", confidence, reason
    )
    return FileTypeResult(
        is_text=is_text,
        confidence=confidence,
        reason=reason,
        encoding="utf-8" if is_text and analysis.utf8_valid else None,
        mime_type=mime_type,
        extension=extension,
    )
