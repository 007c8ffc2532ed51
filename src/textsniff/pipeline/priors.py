"""Extension and MIME type priors.

The curated sets are checked first.  The regex predicates are a looser
fallback for extensions missing from both sets and only bias confidence in
the decision engine; they intentionally overlap the curated sets.
"""

from __future__ import annotations

import re

from textsniff.enums import Prior

TEXT_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".txt",
        ".md",
        ".json",
        ".xml",
        ".html",
        ".htm",
        ".css",
        ".js",
        ".ts",
        ".jsx",
        ".tsx",
        ".py",
        ".java",
        ".c",
        ".cpp",
        ".h",
        ".hpp",
        ".cs",
        ".php",
        ".rb",
        ".go",
        ".rs",
        ".sql",
        ".sh",
        ".bat",
        ".ps1",
        ".yaml",
        ".yml",
        ".toml",
        ".ini",
        ".cfg",
        ".conf",
        ".log",
        ".csv",
        ".tsv",
        ".gitignore",
        ".gitattributes",
        ".dockerfile",
        ".env",
    }
)

BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Documents
        ".pdf",
        ".doc",
        ".docx",
        ".xls",
        ".xlsx",
        ".ppt",
        ".pptx",
        # Archives
        ".zip",
        ".rar",
        ".7z",
        ".tar",
        ".gz",
        ".bz2",
        # Executables and libraries
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        # Images
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".ico",
        ".svg",
        ".webp",
        # Audio and video
        ".mp3",
        ".wav",
        ".flac",
        ".ogg",
        ".mp4",
        ".avi",
        ".mkv",
        ".mov",
        ".wmv",
        ".webm",
        # Fonts
        ".ttf",
        ".otf",
        ".woff",
        ".woff2",
    }
)

_LIKELY_TEXT_RE = re.compile(
    r"""^\.(?:
        txt|text|md|markdown|readme
        |json|xml|yaml|yml|toml|ini|cfg|conf
        |html|htm|css|js|ts|jsx|tsx
        |py|java|c|cpp|h|hpp|cs|php|rb|go|rs|swift
        |sql|sh|bat|ps1|cmd|bash|zsh|fish
        |log|csv|tsv|dat|config
        |.*rc
        |env|gitignore|gitattributes|dockerignore
    )$""",
    re.IGNORECASE | re.VERBOSE,
)

_LIKELY_BINARY_RE = re.compile(
    r"""^\.(?:
        exe|dll|so|dylib|lib|a|o
        |jpg|jpeg|png|gif|bmp|tiff|ico|webp|svg
        |mp3|wav|flac|ogg|aac|mp4|avi|mkv|mov|wmv|webm
        |pdf|doc|docx|xls|xlsx|ppt|pptx|odt|ods|odp
        |zip|rar|7z|tar|gz|bz2|xz|lzma
        |ttf|otf|woff|woff2|eot
        |bin|dat|db|sqlite|mdb
    )$""",
    re.IGNORECASE | re.VERBOSE,
)

# MIME types outside text/* that still carry text.
_TEXT_APPLICATION_TYPES: frozenset[str] = frozenset(
    {
        "application/json",
        "application/xml",
        "application/javascript",
        "application/x-sh",
        "application/x-python",
    }
)
_BINARY_MEDIA_PREFIXES: tuple[str, ...] = ("image/", "video/", "audio/")
_TEXTUAL_SUBTYPE_MARKERS: tuple[str, ...] = ("json", "xml", "javascript")


def is_likely_text_extension(ext: str) -> bool:
    """Return True if *ext* looks like a text extension (dotted, any case)."""
    return _LIKELY_TEXT_RE.match(ext) is not None


def is_likely_binary_extension(ext: str) -> bool:
    """Return True if *ext* looks like a binary extension (dotted, any case)."""
    return _LIKELY_BINARY_RE.match(ext) is not None


def extension_prior(ext: str | None) -> Prior:
    """Map a dotted extension to a :class:`Prior`.

    The likely-text predicate is consulted before the likely-binary one, so
    an extension matching both (``.dat``) counts as likely text.
    """
    if not ext:
        return Prior.UNKNOWN
    ext = ext.lower()
    if ext in BINARY_EXTENSIONS:
        return Prior.DEFINITELY_BINARY
    if ext in TEXT_EXTENSIONS:
        return Prior.DEFINITELY_TEXT
    if is_likely_text_extension(ext):
        return Prior.LIKELY_TEXT
    if is_likely_binary_extension(ext):
        return Prior.LIKELY_BINARY
    return Prior.UNKNOWN


def mime_prior(mime_type: str | None) -> Prior:
    """Map a declared MIME type to a definite :class:`Prior` or UNKNOWN.

    Parameters such as ``; charset=utf-8`` are ignored and the comparison is
    case-insensitive.
    """
    if not mime_type:
        return Prior.UNKNOWN
    essence = mime_type.split(";", 1)[0].strip().lower()
    if essence.startswith("text/") or essence in _TEXT_APPLICATION_TYPES:
        return Prior.DEFINITELY_TEXT
    if essence.startswith(_BINARY_MEDIA_PREFIXES):
        return Prior.DEFINITELY_BINARY
    if essence.startswith("application/") and not any(
        marker in essence for marker in _TEXTUAL_SUBTYPE_MARKERS
    ):
        return Prior.DEFINITELY_BINARY
    return Prior.UNKNOWN
