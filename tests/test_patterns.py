# tests/test_patterns.py
from __future__ import annotations

import pytest

from textsniff.pipeline.patterns import (
    _TOTAL_WEIGHT,
    ADVANCED_RULES,
    BASIC_RULES,
    PATTERN_THRESHOLD,
    has_common_text_patterns,
    score_text_patterns,
)

_SCRIPT = """#!/usr/bin/env node
// Build script for the **docs** site, see [guide](https://example.com/guide).
function main() {
  const config = {"name": "docs", "debug": false};
  if (config.debug) {
    console.log("<b>Debug</b> mode &amp; verbose output");
  }
  return Hello World;
}
"""


def test_basic_rules_have_unit_weight():
    assert all(rule.weight == 1.0 for rule in BASIC_RULES)


def test_advanced_weights_are_in_range():
    assert all(0.0 < rule.weight <= 1.0 for rule in ADVANCED_RULES)


def test_empty_text_scores_zero():
    assert score_text_patterns("") == 0.0
    assert has_common_text_patterns("") is False


def test_replacement_characters_score_zero():
    text = (bytes(range(0x80, 0x100)) * 4).decode("utf-8", errors="replace")
    assert score_text_patterns(text) == 0.0
    assert has_common_text_patterns(text) is False


def test_source_code_has_common_text_patterns():
    assert score_text_patterns(_SCRIPT) > PATTERN_THRESHOLD
    assert has_common_text_patterns(_SCRIPT) is True


def test_score_is_bounded():
    score = score_text_patterns(_SCRIPT)
    assert 0.0 <= score <= 1.0


def test_code_scores_higher_than_prose_fragment():
    assert score_text_patterns(_SCRIPT) > score_text_patterns("lorem")


def test_punctuation_raises_score():
    # Code syntax rule plus structure bonus
    assert score_text_patterns("xyz;") > score_text_patterns("xyzw")


def test_rule_matches_shebang():
    shebang = next(rule for rule in BASIC_RULES if rule.description == "Shebang")
    assert shebang.matches("#!/bin/sh\necho hi\n")
    assert not shebang.matches("echo hi\n#!/bin/sh\n")


def test_rule_matches_json_key_value():
    rule = next(r for r in ADVANCED_RULES if r.description == "JSON key-value")
    assert rule.matches('{"key": "value"}')
    assert not rule.matches("key value")


def _words(count: int) -> str:
    return " ".join(["w"] * count)


def test_total_weight():
    assert _TOTAL_WEIGHT == pytest.approx(29.1)


def test_score_is_matched_weight_over_total():
    # Only the two ASCII rules match; no bonus applies.
    assert score_text_patterns("abcdefgh") == pytest.approx(2 / _TOTAL_WEIGHT)


def test_natural_language_bonus_needs_more_than_ten_words():
    ten = score_text_patterns(_words(10) + ".")
    eleven = score_text_patterns(_words(11) + ".")
    assert ten == pytest.approx(2.3 / _TOTAL_WEIGHT)
    assert eleven - ten == pytest.approx(0.5 / _TOTAL_WEIGHT)


def test_natural_language_bonus_needs_terminator():
    with_end = score_text_patterns(_words(11) + "!")
    without_end = score_text_patterns(_words(11))
    assert with_end - without_end == pytest.approx(0.5 / _TOTAL_WEIGHT)


@pytest.mark.parametrize(
    ("text", "bonus"),
    [
        ("abcdefghij", False),
        ("abcd efghi", False),  # exactly 0.10
        ("abcd efgh", True),
        ("a   b", True),
        ("a    ", False),  # exactly 0.80
    ],
)
def test_whitespace_bonus_bounds_are_strict(text: str, bonus: bool):
    expected = 2.3 if bonus else 2.0
    assert score_text_patterns(text) == pytest.approx(expected / _TOTAL_WEIGHT)


def test_structure_bonus_is_added_once():
    # "]" is both code and data structure but matches no rule.
    plain = score_text_patterns("abcdefgh")
    bracket = score_text_patterns("abcdefg]")
    assert bracket - plain == pytest.approx(0.4 / _TOTAL_WEIGHT)


def test_non_ascii_letters_are_not_words():
    text = "ééé " * 20 + "."
    # Whitespace bonus only: no ASCII rule, no word tokens.
    assert score_text_patterns(text) == pytest.approx(0.3 / _TOTAL_WEIGHT)


def test_yaml_rule_anchors_at_end_of_text():
    rule = next(r for r in ADVANCED_RULES if r.description == "YAML/config format")
    assert rule.matches("key: value")
    assert not rule.matches("key: value\n")
