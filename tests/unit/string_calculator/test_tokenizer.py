"""Tests for the delimiter tokenizer."""

import pytest

from string_calculator.tokenizer import split_on_any


def test_single_delimiter() -> None:
    """A single delimiter splits like str.split."""
    assert split_on_any("1,2,3", {","}) == ["1", "2", "3"]


def test_any_of_several_delimiters() -> None:
    """Any delimiter of the set splits the text."""
    assert split_on_any("1\n2,3", {",", "\n"}) == ["1", "2", "3"]


def test_regex_metacharacters_are_literal() -> None:
    """Delimiters are matched literally."""
    assert split_on_any("1.2*3", {".", "*"}) == ["1", "2", "3"]
    assert split_on_any("1***2***3", ["***"]) == ["1", "2", "3"]


def test_longest_delimiter_wins() -> None:
    """Longer delimiters are preferred over their prefixes."""
    assert split_on_any("1**2*3", {"*", "**"}) == ["1", "2", "3"]


def test_empty_text_has_no_tokens() -> None:
    """An empty string yields zero tokens."""
    assert split_on_any("", {";"}) == []


def test_adjacent_delimiters_keep_empty_tokens() -> None:
    """Empty tokens are preserved for validation to reject."""
    assert split_on_any("1,,2", {","}) == ["1", "", "2"]


@pytest.mark.parametrize("delimiters", [set(), {""}, {",", ""}])
def test_requires_non_empty_delimiter(delimiters: set[str]) -> None:
    """Empty delimiter sets are rejected."""
    with pytest.raises(ValueError, match="non-empty delimiter"):
        split_on_any("1,2", delimiters)
