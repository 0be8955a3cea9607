"""Tests for word extraction."""

import pytest

from bayes_filter import ConfigError, Tokenizer, TokenizerConfig, extract_words


def test_short_words_are_dropped():
    assert extract_words("I am a cat") == {"cat"}


def test_case_is_preserved_and_dedup_is_exact():
    assert extract_words("Buy buy BUY now") == {"Buy", "buy", "BUY", "now"}


def test_repeated_word_collapses():
    assert extract_words("spam spam spam spam spam") == {"spam"}


def test_empty_and_wordless_text():
    assert extract_words("") == set()
    assert extract_words("12 ab !! $$ 3.14") == set()


def test_non_letters_separate_words():
    assert extract_words("foo123bar_baz-qux") == {"foo", "bar", "baz", "qux"}


def test_runs_are_maximal():
    # "abcdef" is one word, never "abc" + "def"
    assert extract_words("abcdef") == {"abcdef"}


def test_non_ascii_letters_are_separators():
    assert extract_words("café naïve") == {"caf"}


def test_configurable_minimum_length():
    tokenizer = Tokenizer(TokenizerConfig(min_word_length=2))
    assert tokenizer.extract_words("I am a cat") == {"am", "cat"}


def test_zero_minimum_length_is_rejected():
    with pytest.raises(ConfigError):
        Tokenizer(TokenizerConfig(min_word_length=0))
