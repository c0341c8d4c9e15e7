"""Tests for whitespace tokenization."""

import pytest

from zenreader.services.tokenizer import count_words, tokenize


class TestTokenize:
    """Tests for splitting text into display tokens."""

    def test_trims_and_collapses_whitespace(self):
        assert tokenize("  hello   world  ") == ("hello", "world")

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  \n", "\r\n"])
    def test_blank_input_yields_no_tokens(self, text):
        assert tokenize(text) == ()

    def test_tabs_and_newlines_are_separators(self):
        text = "first\tsecond\nthird\r\nfourth\n\nfifth"
        assert tokenize(text) == ("first", "second", "third", "fourth", "fifth")

    def test_punctuation_stays_attached(self):
        text = 'Keep reading. (parenthetical) "quoted," well-known - dash'
        assert tokenize(text) == (
            "Keep",
            "reading.",
            "(parenthetical)",
            '"quoted,"',
            "well-known",
            "-",
            "dash",
        )

    def test_returns_immutable_sequence(self):
        tokens = tokenize("a b c")
        assert isinstance(tokens, tuple)

    def test_deterministic(self):
        text = "The same input, every time."
        assert tokenize(text) == tokenize(text)

    def test_unicode_words(self):
        assert tokenize("Привет, мир! Grüße") == ("Привет,", "мир!", "Grüße")

    def test_no_empty_tokens(self):
        tokens = tokenize(" a  \n\n  b \t ")
        assert all(tokens)
        assert len(tokens) == 2


class TestCountWords:
    def test_counts_tokens(self):
        assert count_words("one two  three.") == 3

    def test_blank(self):
        assert count_words("   ") == 0
