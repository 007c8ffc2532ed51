"""TextDetector: streaming text/binary classification."""

from __future__ import annotations

from textsniff._utils import DEEP_SCAN_BYTES, _validate_max_bytes, get_extension
from textsniff.pipeline import FileTypeResult
from textsniff.pipeline.binary import has_null_bytes
from textsniff.pipeline.orchestrator import quick_detection, run_pipeline
from textsniff.pipeline.signatures import SIGNATURES, match_signature

# Enough bytes to test every magic number.
_SIGNATURE_BYTES = max(len(entry.signature) for entry in SIGNATURES)


class TextDetector:
    """Streaming text/binary detector.

    Implements a feed/close pattern for classifying content that arrives in
    chunks, such as a file read in blocks or a network response.  Only the
    first *max_bytes* are buffered.
    """

    def __init__(
        self,
        filename: str | None = None,
        mime_type: str | None = None,
        max_bytes: int = DEEP_SCAN_BYTES,
    ) -> None:
        """Initialize the detector.

        :param filename: Optional file name; only its extension is used.
        :param mime_type: Optional declared MIME type, used as a prior.
        :param max_bytes: Maximum number of bytes to buffer from
            :meth:`feed` calls.  Values above the deep-scan window buy
            nothing.
        :raises ValueError: If *max_bytes* is not a positive integer.
        """
        _validate_max_bytes(max_bytes)
        self._filename = filename
        self._mime_type = mime_type
        self._max_bytes = max_bytes
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result: FileTypeResult | None = None
        self._signature_checked = False

    def feed(self, byte_str: bytes | bytearray) -> None:
        """Feed a chunk of bytes to the detector.

        :param byte_str: The next chunk of bytes to examine.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if self._done:
            return
        remaining = self._max_bytes - len(self._buffer)
        if remaining > 0:
            self._buffer.extend(byte_str[:remaining])
        self._try_early_detect()

    def _try_early_detect(self) -> None:
        """Settle on magic bytes or a null byte without waiting for close().

        Both checks are content-only and precede every metadata prior, so an
        early answer is the one :meth:`close` would give.
        """
        buf_len = len(self._buffer)
        if not self._signature_checked:
            if buf_len < _SIGNATURE_BYTES and buf_len < self._max_bytes:
                return
            self._signature_checked = True
            if match_signature(bytes(self._buffer)) is not None:
                self._finish()
                return

        if has_null_bytes(bytes(self._buffer)):
            self._finish()
            return

        if buf_len >= self._max_bytes:
            self._done = True

    def _finish(self) -> None:
        self._result = quick_detection(
            bytes(self._buffer), get_extension(self._filename), self._mime_type
        )
        self._done = True

    def close(self) -> FileTypeResult:
        """Finalize detection and return the result.

        Runs the full pipeline on the buffered data unless detection already
        finished during :meth:`feed`.
        """
        if not self._closed:
            self._closed = True
            if self._result is None:
                self._result = run_pipeline(
                    bytes(self._buffer), self._filename, self._mime_type
                )
                self._done = True
        return self._result

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result = None
        self._signature_checked = False

    @property
    def done(self) -> bool:
        """Whether detection is complete and no more data is needed."""
        return self._done

    @property
    def result(self) -> FileTypeResult | None:
        """The result, or ``None`` until detection has finished."""
        return self._result
