import re

import pytest

from snippet_kit.errors import InvalidPatternError
from snippet_kit.text.patterns import compile_pattern


def test_compiles_plain_pattern() -> None:
    assert compile_pattern(r"\d+").findall("a1b22") == ["1", "22"]


def test_passes_flags() -> None:
    regex = compile_pattern(r"^x", re.MULTILINE)
    assert regex.findall("x\nx") == ["x", "x"]


def test_named_group_dialect_is_converted() -> None:
    regex = compile_pattern(r"(?<word>\w+)-\k<word>")

    match = regex.search("ab-ab")

    assert match is not None
    assert match.group("word") == "ab"


def test_lookbehind_is_left_alone() -> None:
    assert compile_pattern(r"(?<=a)b").findall("ab cb") == ["b"]
    assert compile_pattern(r"(?<!a)b").findall("ab cb") == ["b"]


def test_escaped_backslash_before_k_is_not_a_backreference() -> None:
    assert compile_pattern(r"\\k<x>").search(r"\k<x>") is not None


def test_invalid_pattern_raises() -> None:
    with pytest.raises(InvalidPatternError, match="Invalid pattern '\\('") as exc_info:
        compile_pattern("(")

    assert exc_info.value.pattern == "("
    assert exc_info.value.reason
