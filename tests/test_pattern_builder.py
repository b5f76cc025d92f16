from __future__ import annotations

import re

import pytest

from domain.enums import ArgumentType
from domain.models import DEFAULT_ARGUMENT_PATTERNS, ArgumentPattern
from snippets.argument_scanner import scan_arguments
from snippets.pattern_builder import (
    NamedGroupStyle,
    build_pattern,
    escape_literal,
    replace_arguments_with_space,
)


def test_builds_pattern_for_string_and_int_arguments() -> None:
    pattern = build_pattern('I have 5 cukes in my "belly"', DEFAULT_ARGUMENT_PATTERNS)

    assert pattern == r'^I have (\d+) cukes in my "([^"]*)"$'


def test_phrase_without_arguments_is_anchored_verbatim() -> None:
    assert build_pattern("I am happy", DEFAULT_ARGUMENT_PATTERNS) == "^I am happy$"


@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_blank_phrase_produces_empty_pattern(text: str) -> None:
    assert build_pattern(text, DEFAULT_ARGUMENT_PATTERNS) == "^$"


def test_named_groups_are_numbered_left_to_right() -> None:
    pattern = build_pattern(
        'I have 5 cukes in my "belly"',
        DEFAULT_ARGUMENT_PATTERNS,
        NamedGroupStyle(start="{arg", end="}"),
    )

    assert pattern == r'^I have ({arg1}\d+) cukes in my "({arg2}[^"]*)"$'


def test_named_groups_skip_literal_parentheses() -> None:
    pattern = build_pattern(
        "call (me) 5 times", DEFAULT_ARGUMENT_PATTERNS, NamedGroupStyle(start="{arg", end="}")
    )

    assert pattern == r"^call \(me\) ({arg1}\d+) times$"


def test_named_groups_leave_extension_groups_alone() -> None:
    decimal = ArgumentPattern.of(r"(\d+(?:\.\d+)?)", "Float")

    pattern = build_pattern("costs 2.50", [decimal], NamedGroupStyle(start="?P<arg", end=">"))

    assert pattern == r"^costs (?P<arg1>\d+(?:\.\d+)?)$"
    assert re.match(pattern, "costs 2.50").group("arg1") == "2.50"


def test_literal_metacharacters_are_escaped() -> None:
    pattern = build_pattern("I pay $5 (cash)?", DEFAULT_ARGUMENT_PATTERNS)

    assert pattern == r"^I pay \$(\d+) \(cash\)\?$"


def test_later_patterns_do_not_match_inside_earlier_groups() -> None:
    date = ArgumentPattern.of(r"(\d{4}-\d{2}-\d{2})", "Date")
    number = ArgumentPattern.of(r"(\d+)", ArgumentType.INT)

    pattern = build_pattern("on 2024-01-05 at 5", [date, number])

    assert pattern == r"^on (\d{4}-\d{2}-\d{2}) at (\d+)$"


def test_escape_literal_keeps_spaces_and_quotes() -> None:
    assert escape_literal('say "hi" now.') == r'say "hi" now\.'


def test_replace_arguments_with_space() -> None:
    replaced = replace_arguments_with_space('I have 5 cukes in my "belly"', DEFAULT_ARGUMENT_PATTERNS)

    assert replaced == "I have   cukes in my  "


PHRASES = [
    'I have 5 cukes in my "belly"',
    "I am happy",
    'a.b (c) $d ^e [f] {g} |h| *i+ ?j\\k',
    '"" is an empty string and 0 is zero',
    "Пользователь вводит 150 рублей",
    "the 3rd of 12 items costs 42",
    "I have ٣ cukes",
]


@pytest.mark.parametrize("phrase", PHRASES)
def test_built_pattern_matches_its_own_phrase(phrase: str) -> None:
    pattern = build_pattern(phrase, DEFAULT_ARGUMENT_PATTERNS)

    assert re.match(pattern, phrase) is not None


@pytest.mark.parametrize("phrase", PHRASES)
def test_group_count_equals_argument_count(phrase: str) -> None:
    pattern = build_pattern(phrase, DEFAULT_ARGUMENT_PATTERNS)

    assert re.compile(pattern).groups == len(scan_arguments(phrase, DEFAULT_ARGUMENT_PATTERNS))
