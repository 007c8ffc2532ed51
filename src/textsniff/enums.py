"""Enumerations for textsniff."""

import enum


class Prior(enum.Enum):
    """Belief about text/binary status derived from an extension or MIME type."""

    DEFINITELY_TEXT = "definitely-text"
    DEFINITELY_BINARY = "definitely-binary"
    LIKELY_TEXT = "likely-text"
    LIKELY_BINARY = "likely-binary"
    UNKNOWN = "unknown"
