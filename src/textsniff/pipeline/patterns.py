"""Stage 2b: Weighted text pattern scoring.

Scores a decoded sample against a fixed set of source-code, markup, data
format and prose idioms.  The score corroborates the statistical checks; it
is tuned to err towards "text".
"""

from __future__ import annotations

import dataclasses
import re

#: Normalized score above which a sample has common text patterns.
PATTERN_THRESHOLD: float = 0.3

_NATURAL_LANGUAGE_BONUS = 0.5
_WHITESPACE_BONUS = 0.3
_STRUCTURE_BONUS = 0.4
_MIN_WORDS = 10
_MIN_WHITESPACE_RATIO = 0.1
_MAX_WHITESPACE_RATIO = 0.8


@dataclasses.dataclass(frozen=True, slots=True)
class TextPatternRule:
    """A regular expression and the weight it adds when it matches."""

    pattern: re.Pattern[str]
    weight: float
    description: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(pattern: str, weight: float, description: str) -> TextPatternRule:
    return TextPatternRule(re.compile(pattern, re.ASCII), weight, description)


# Word classes are ASCII-only; `^` and `\Z` anchor to the whole sample.
BASIC_RULES: tuple[TextPatternRule, ...] = (
    _rule(r"^[\x20-\x7e\s]*\Z", 1.0, "ASCII printable and whitespace"),
    _rule(r"^[\x00-\x7f]*\Z", 1.0, "ASCII"),
    _rule(r"^\s*[{\[<]", 1.0, "Opening bracket"),
    _rule(r"^\s*#", 1.0, "Hash comment"),
    _rule(r"^\s*//", 1.0, "Line comment"),
    _rule(r"^\s*/\*", 1.0, "Block comment"),
    _rule(r"^#!", 1.0, "Shebang"),
    _rule(r"^\s*<\?xml", 1.0, "XML declaration"),
    _rule(r"^\s*<!DOCTYPE", 1.0, "HTML doctype"),
    _rule(r"^\s*function\s+\w+", 1.0, "Function declaration"),
    _rule(r"^\s*class\s+\w+", 1.0, "Class declaration"),
    _rule(r"^\s*(?:import|export|require)\s+", 1.0, "Module import"),
    _rule(r"^\s*(?:def|function|func|proc)\s+\w+", 1.0, "Function definition"),
    _rule(r"^\s*(?:public|private|protected)\s+", 1.0, "Access modifier"),
    _rule(r"^\s*\w+\s*[:=]\s*", 1.0, "Assignment"),
    _rule(r"^\s*[A-Za-z_]\w*\s*\(", 1.0, "Function call"),
    _rule(r"\b(?:true|false|null|undefined|None|True|False)\b", 1.0, "Literal"),
    _rule(
        r"\b(?:if|else|for|while|do|switch|case|try|catch|finally)\b",
        1.0,
        "Control structure",
    ),
    _rule(r"^\s*\d+\.\s+", 1.0, "Numbered list"),
    _rule(r"^\s*[-*+]\s+", 1.0, "Bullet list"),
    _rule(r"^\s*\|\s*.*\s*\|", 1.0, "Table row"),
)

ADVANCED_RULES: tuple[TextPatternRule, ...] = (
    # Programming languages
    _rule(r"\b(?:console\.log|print|echo|puts)\b", 0.8, "Output statements"),
    _rule(r"\b(?:return|yield|throw|raise)\b", 0.7, "Control flow"),
    _rule(r"\b(?:int|str|bool|float|double|char|void)\b", 0.6, "Data types"),
    _rule(r"[{}();,]", 0.3, "Code syntax"),
    # Markup
    _rule(r"</?\w+[^>]*>", 0.8, "HTML/XML tags"),
    _rule(r"&\w+;", 0.5, "HTML entities"),
    # Data formats
    _rule(r'"[^"]*":\s*[^,}]+', 0.7, "JSON key-value"),
    _rule(r"^\s*\w+:\s*.*\Z", 0.4, "YAML/config format"),
    _rule(r"^\s*\[\w+\]", 0.5, "INI sections"),
    # Documentation
    _rule(r"^\s*#+\s+", 0.6, "Markdown headers"),
    _rule(r"\*\*[^*]+\*\*|\*[^*]+\*", 0.4, "Markdown emphasis"),
    _rule(r"\[[^\]]*\]\([^)]*\)", 0.5, "Markdown links"),
    # Prose
    _rule(r"\b[A-Z][a-z]+\s+[A-Z][a-z]+", 0.3, "Proper nouns"),
    _rule(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b", 0.2, "Dates"),
    _rule(r"\b\w+@\w+\.\w+\b", 0.4, "Email addresses"),
    _rule(r"https?://\S+", 0.4, "URLs"),
)

_TOTAL_WEIGHT = sum(rule.weight for rule in BASIC_RULES + ADVANCED_RULES)

_WORD_RE = re.compile(r"\w+", re.ASCII)
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_WHITESPACE_RE = re.compile(r"\s", re.ASCII)
_CODE_STRUCTURE_RE = re.compile(r"[{};()\[\]]")
_MARKUP_STRUCTURE_RE = re.compile(r"<[^>]+>")
_DATA_STRUCTURE_RE = re.compile(r"[:\"'{}\[\],]")


def score_text_patterns(text: str) -> float:
    """Return a normalized pattern score in ``[0, 1]`` for decoded *text*.

    Matched rule weights plus the prose, whitespace and structure bonuses are
    divided by the total rule weight.  The bonuses do not count towards the
    total, so a very text-like sample can saturate at 1.0.
    """
    if not text:
        return 0.0

    matched = sum(
        rule.weight for rule in BASIC_RULES + ADVANCED_RULES if rule.matches(text)
    )

    words = _WORD_RE.findall(text)
    if len(words) > _MIN_WORDS and _SENTENCE_END_RE.search(text):
        matched += _NATURAL_LANGUAGE_BONUS

    whitespace_ratio = len(_WHITESPACE_RE.findall(text)) / len(text)
    if _MIN_WHITESPACE_RATIO < whitespace_ratio < _MAX_WHITESPACE_RATIO:
        matched += _WHITESPACE_BONUS

    if (
        _CODE_STRUCTURE_RE.search(text)
        or _MARKUP_STRUCTURE_RE.search(text)
        or _DATA_STRUCTURE_RE.search(text)
    ):
        matched += _STRUCTURE_BONUS

    return min(matched / _TOTAL_WEIGHT, 1.0)


def has_common_text_patterns(text: str) -> bool:
    """Return True if *text* scores above :data:`PATTERN_THRESHOLD`."""
    return score_text_patterns(text) > PATTERN_THRESHOLD
