"""Test word and character counting for the status bar."""

import pytest
from textpad.status import (DocumentStats, compute_stats, count_characters,
                            count_words, format_status)


def test_count_words_empty_buffer():
    assert count_words("") == 0


@pytest.mark.parametrize("text", [" ", "   ", "\n", "\t \n  \r\n"])
def test_count_words_all_whitespace(text):
    assert count_words(text) == 0


def test_hello_world():
    """Two words, eleven characters."""
    assert count_words("hello world") == 2
    assert count_characters("hello world") == 11


def test_whitespace_runs_collapsed():
    assert count_words("  a   b  ") == 2


def test_count_words_across_lines():
    text = "First line has four\n\nSecond line\tafter a tab\n"
    assert count_words(text) == 9


def test_count_words_single_word():
    assert count_words("word") == 1
    assert count_words("\n  word\n") == 1


def test_count_words_punctuation_is_part_of_word():
    assert count_words("one, two; three.") == 3


def test_count_characters_no_trimming():
    assert count_characters("  a   b  ") == 9
    assert count_characters("line\n") == 5


def test_count_characters_unicode():
    assert count_characters("Café 世界") == 7


def test_compute_stats():
    assert compute_stats("hello world") == DocumentStats(words=2, characters=11)


def test_format_status():
    assert format_status(DocumentStats(words=2, characters=11)) == " Words: 2 | Characters: 11 "


def test_format_status_empty_buffer():
    assert format_status(compute_stats("")) == " Words: 0 | Characters: 0 "


def test_non_breaking_space_does_not_separate_words():
    assert count_words("a\u00a0b") == 1
    assert count_words("one\u2003two three") == 2


def test_control_characters_are_trimmed():
    assert count_words("\x01") == 0
    assert count_words("\x00\x1f word \x02") == 1


def test_vertical_tab_and_form_feed_separate_words():
    assert count_words("a\x0bb\x0cc") == 3
