"""Unit tests for the tokenizer."""

from word_tracker.components.tokenizer import tokenize


def test_tokenize_lowercases_and_strips_punctuation():
    assert tokenize("The cat sat.") == ["the", "cat", "sat"]


def test_tokenize_non_letters_split_words():
    assert tokenize("don't stop-me now") == ["don", "t", "stop", "me", "now"]
    assert tokenize("abc123def") == ["abc", "def"]


def test_tokenize_drops_empty_tokens():
    assert tokenize("") == []
    assert tokenize("   ...,,, !! ") == []
    assert tokenize("a  ,, b") == ["a", "b"]


def test_tokenize_keeps_repeated_words():
    assert tokenize("Go go GO") == ["go", "go", "go"]


def test_tokenize_unicode_letters():
    assert tokenize("Café naïve") == ["café", "naïve"]


def test_tokens_contain_only_letters_after_lowercasing():
    tokens = tokenize("İstanbul Straße")

    assert tokens == ["i", "stanbul", "straße"]
    assert all(token.isalpha() for token in tokens)
