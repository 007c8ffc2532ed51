"""Stage 0: Magic-byte signature matching."""

from __future__ import annotations

import dataclasses

_OCTET_STREAM = "application/octet-stream"


@dataclasses.dataclass(frozen=True, slots=True)
class SignatureEntry:
    """A magic number identifying a binary file format."""

    signature: bytes
    mime_type: str
    description: str


# First match wins.  No entry is a prefix of an earlier one, so the order
# only matters for readability.
SIGNATURES: tuple[SignatureEntry, ...] = (
    SignatureEntry(b"%PDF", "application/pdf", "PDF"),
    SignatureEntry(b"PK\x03\x04", "application/zip", "ZIP/Office"),
    SignatureEntry(b"PK\x05\x06", "application/zip", "ZIP/Office"),
    SignatureEntry(b"PK\x07\x08", "application/zip", "ZIP/Office"),
    SignatureEntry(b"\xff\xd8\xff", "image/jpeg", "JPEG"),
    SignatureEntry(b"\x89PNG\r\n\x1a\n", "image/png", "PNG"),
    SignatureEntry(b"GIF8", "image/gif", "GIF"),
    SignatureEntry(b"BM", "image/bmp", "BMP"),
    SignatureEntry(b"\x7fELF", _OCTET_STREAM, "ELF"),
    SignatureEntry(b"MZ", _OCTET_STREAM, "EXE"),
    SignatureEntry(b"\xca\xfe\xba\xbe", _OCTET_STREAM, "Java Class"),
    SignatureEntry(b"\xfe\xed\xfa\xce", _OCTET_STREAM, "Mach-O"),
    SignatureEntry(b"\xfe\xed\xfa\xcf", _OCTET_STREAM, "Mach-O"),
)


def match_signature(data: bytes) -> SignatureEntry | None:
    """Return the first signature that *data* starts with, or ``None``.

    :param data: The raw byte data to examine.
    """
    for entry in SIGNATURES:
        if data.startswith(entry.signature):
            return entry
    return None
