from __future__ import annotations

import pytest

from diaglines.wrap import wrap


def test_fits_in_one_window():
    assert wrap("short", 10) == ["short"]
    assert wrap("exactly10!", 10) == ["exactly10!"]


def test_empty_text_still_yields_one_line():
    assert wrap("", 5) == [""]


def test_breaks_at_last_space_in_window():
    # the space right after a full-width word is still a break point
    assert wrap("aaaa bbbb cccc", 9) == ["aaaa bbbb", "cccc"]


def test_hard_break_without_whitespace():
    assert wrap("abcdefghij", 4) == ["abcd", "efgh", "ij"]


def test_hard_break_then_soft_break():
    assert wrap("abcdefgh ij", 4) == ["abcd", "efgh", "ij"]


def test_whitespace_run_is_consumed():
    assert wrap("ab   cd ef", 4) == ["ab", "cd", "ef"]


@pytest.mark.parametrize("width", [0, -3])
def test_width_must_be_positive(width: int) -> None:
    with pytest.raises(ValueError):
        wrap("anything", width)


@pytest.mark.parametrize(
    "text,width",
    [
        ("the quick brown fox jumps over the lazy dog", 10),
        ("the quick brown fox jumps over the lazy dog", 20),
        ("a b c d e f g h i j k l m n o p", 3),
        ("unused variable 'x' declared but never read in this scope", 21),
    ],
)
def test_lines_fit_and_words_survive(text: str, width: int) -> None:
    """No line exceeds the width and the words come back in order."""
    lines = wrap(text, width)
    assert all(len(line) <= width for line in lines)
    assert " ".join(lines).split() == text.split()


def test_long_word_is_cut_exactly_at_width():
    lines = wrap("x" * 25 + " tail", 10)
    assert lines[:2] == ["x" * 10, "x" * 10]
    assert all(len(line) <= 10 for line in lines)
    assert "".join(lines).replace(" ", "") == "x" * 25 + "tail"


def test_trailing_whitespace_leaves_no_empty_line():
    assert wrap("aaaa      ", 4) == ["aaaa"]
    assert wrap("aaaa bbbb   ", 4) == ["aaaa", "bbbb"]
